"""Demonstrates boxlog's table output with mock data.

Run from the repository root:

    python examples/demo.py

Tables are coloured when stdout is a terminal. Set BOXLOG_COLORIZE=false
to turn colour off, or BOXLOG_ENABLED=false to silence everything.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

import boxlog
from boxlog import Log, Loggable


@dataclass
class User:
    """Example record used to demonstrate pretty-printing."""

    id: UUID
    name: str
    role: str
    description: str


class UserListViewModel(Loggable):
    def __init__(self) -> None:
        self.users = [
            User(uuid4(), "Alex", "Supervisor", "A wise and strategic leader."),
            User(uuid4(), "Jamie", "Engineer", "An expert in all things technical."),
            User(uuid4(), "Bob", "Director", "The visionary driving the team forward. " * 6),
        ]

    def fetch(self) -> None:
        self.log_d(f"Fetched new users: {self.users}")
        self.log_d(f"Fetched new users: {self.users}", format="model")
        self.log_d(self.users, format="model")


def run_basic_levels() -> None:
    """Each severity level with a short plain-text message."""
    print("\n--- Basic severity logs ---")

    boxlog.v("Verbose: initializing mock sync")
    boxlog.d("Debug: fetched configuration")
    boxlog.i("Info: sync completed successfully")
    boxlog.w("Warning: pagination token missing, retrying first page")
    boxlog.e("Error: failed to persist cache entry", width="small")
    boxlog.wtf("Fatal: unrecoverable corruption detected")

    Log.d("Sugar: shorthand log via Log facade")


def run_structured_examples() -> None:
    """Model and JSON pretty-printing."""
    print("\n--- Model pretty-print ---")
    UserListViewModel().fetch()

    print("\n--- JSON pretty-print ---")
    boxlog.i('{"status":"success"}')
    boxlog.i('Response body: {"status":"success","items":[3,1,2]}', format="json")
    boxlog.i({"zeta": 1, "alpha": {"nested": True}}, format="json", width="small")


if __name__ == "__main__":
    print("=== boxlog example ===")
    run_basic_levels()
    run_structured_examples()
    print("\nInspect the console above for table-style output.")
