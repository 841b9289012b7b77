"""Core module - exceptions."""
