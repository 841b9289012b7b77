"""Global test fixtures."""

import io
from collections.abc import Generator

import pytest

from boxlog.config import Settings
from boxlog.engine import ConsoleSink, LogEngine, set_engine
from boxlog.render.table import TableRenderer

FIXED_TIMESTAMP = "2025-01-01 12:00:00"


@pytest.fixture
def timestamp() -> str:
    """Fixed timestamp for deterministic tables."""
    return FIXED_TIMESTAMP


@pytest.fixture
def renderer() -> TableRenderer:
    """Create renderer with default config."""
    return TableRenderer()


@pytest.fixture
def test_settings() -> Settings:
    """Create settings with colour off and logging enabled."""
    return Settings(enabled=True, colorize=False, default_width="medium", default_format="plain")


@pytest.fixture
def output_stream() -> io.StringIO:
    """In-memory console."""
    return io.StringIO()


@pytest.fixture
def engine(test_settings: Settings, output_stream: io.StringIO) -> Generator[LogEngine, None, None]:
    """Install an engine writing to output_stream for the duration of a test."""
    engine = LogEngine(
        config=test_settings,
        renderer=TableRenderer(),
        sink=ConsoleSink(output_stream),
    )
    set_engine(engine)
    yield engine
    set_engine(None)


def table_rows(output: str) -> list[str]:
    """Rows of one rendered table, without the trailing newline."""
    assert output.endswith("\n")
    return output[:-1].split("\n")
