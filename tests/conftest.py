"""Shared test fixtures and helpers."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from firstchar.cli import main
from firstchar.counter import FrequencyTables, classify

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def tables():
    """Return a helper that classifies a str or bytes and returns the tables."""

    def _tables(content: str | bytes) -> FrequencyTables:
        if isinstance(content, str):
            content = content.encode("latin-1")
        return classify(content)

    return _tables


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes bytes (or latin-1 text) to a file under tmp_path."""

    def _write(content: str | bytes, name: str = "input.txt") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("latin-1")
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture
def run_cli(capsys: pytest.CaptureFixture[str]):
    """Return a helper that runs main() and returns (exit code, stdout lines, stderr)."""

    def _run(*argv: str) -> tuple[int, list[str], str]:
        code = main(list(argv))
        captured = capsys.readouterr()
        return code, captured.out.splitlines(), captured.err

    return _run


def assert_counts(table: dict[str, int], expected: list[tuple[str, int]]) -> None:
    """Assert table contents and first-seen order."""
    actual = list(table.items())
    assert actual == expected, f"Expected {expected}, got {actual}"
