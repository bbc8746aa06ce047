"""Error types, exit codes, and formatted content context.

Exit codes are declared once here; the CLI returns ``exc.exit_code``.
"""

from __future__ import annotations

from dataclasses import dataclass

from firstchar.classes import Position

EXIT_OK = 0
EXIT_INPUT = 1
EXIT_CONTENT = 2
EXIT_FORMAT = 3
EXIT_FLAGS = 4


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_INPUT, "INPUT", "No usable input path, or the file is missing/unreadable"),
    ExitCodeInfo(EXIT_CONTENT, "CONTENT", "Empty file, rejected byte, or a category with no characters"),
    ExitCodeInfo(EXIT_FORMAT, "FORMAT", "Missing or unknown format name"),
    ExitCodeInfo(EXIT_FLAGS, "FLAGS", "No category flag given"),
)


def render_exit_codes_help() -> str:
    """Render the exit code table shown at the end of --help."""
    lines = ["exit codes:"]
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"  {e.code}  {e.name:<8} {e.description}")
    return "\n".join(lines)


class FirstCharError(Exception):
    """Base error; every subclass maps to a fixed exit code."""

    exit_code: int = EXIT_INPUT

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: {self.message}"


class InputArgumentError(FirstCharError):
    exit_code = EXIT_INPUT


class FormatArgumentError(FirstCharError):
    exit_code = EXIT_FORMAT


class FlagArgumentError(FirstCharError):
    exit_code = EXIT_FLAGS


class ContentError(FirstCharError):
    """Raised on the first rejected byte, with position and content context."""

    exit_code = EXIT_CONTENT

    def __init__(
        self,
        message: str,
        position: Position | None = None,
        content: bytes = b"",
        filename: str = "<input>",
    ) -> None:
        self.position = position
        self.content = content
        self.filename = filename
        super().__init__(message)

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        if self.position is None:
            return f"error: {self.message}\n  --> {filename}"

        lines = self.content.split(b"\n")
        line_idx = self.position.line - 1
        col = self.position.column

        if 0 <= line_idx < len(lines):
            source_line = _display_line(lines[line_idx].rstrip(b"\r"), col)
        else:
            source_line = ("", 0)
        text, caret_col = source_line

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {text}\n"
            f"{blank_gutter} {' ' * caret_col}^"
        )


class EmptyContentError(ContentError):
    """Raised when the content is empty or a category has no characters."""


def display_byte(b: int) -> str:
    """Printable rendering of a single byte; others as \\xNN."""
    if 0x20 <= b <= 0x7E:
        return chr(b)
    return f"\\x{b:02x}"


def _display_line(raw: bytes, col: int) -> tuple[str, int]:
    """Render a content line and return it with the caret offset for *col*."""
    parts = [display_byte(b) for b in raw]
    # The offending newline itself lies past the end of the line
    caret = sum(len(p) for p in parts[: col - 1])
    return "".join(parts), caret
