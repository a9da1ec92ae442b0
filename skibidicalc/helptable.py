"""Reference table of the calculator's buttons and keyboard shortcuts."""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields

HEADERS = ("Symbol", "Function", "Example/Description", "Keyboard Shortcut")


@dataclass(frozen=True)
class HelpEntry:
    """One row of the help table."""

    symbol: str
    function: str
    example: str
    shortcut: str


_ENTRIES = (
    HelpEntry("+", "Addition", "2 + 3 = 5", "+"),
    HelpEntry("-", "Subtraction", "5 - 3 = 2", "-"),
    HelpEntry("x", "Multiplication", "5 x 3 = 15", "*"),
    HelpEntry("/", "Division", "15 / 3 = 5", "/"),
    HelpEntry("^", "Power", "2 ^ 5 = 32", ""),
    HelpEntry("y√x", "Root", "3 √ 27 = 3", ""),
    HelpEntry("x!", "Factorial", "5 ! = 120", ""),
    HelpEntry("x|y", "Greatest Common Divisor", "18 | 12 = 6", ""),
    HelpEntry("+/-", "Change Sign", "(-5) >> 5", ""),
    HelpEntry("C", "Clear", "remove all", ""),
    HelpEntry("CE", "Clear Entry", "remove entry", ""),
    HelpEntry("DEL", "Delete", "remove last digit", "Backspace"),
    HelpEntry("=", "Calculate", "calculate result", "Enter"),
)


def help_entries() -> tuple[HelpEntry, ...]:
    """Return every help row in display order."""
    return _ENTRIES


def format_help_table() -> str:
    """Render the help rows as an aligned plain-text table with a header."""
    rows = [HEADERS, *(astuple(entry) for entry in _ENTRIES)]
    widths = [max(len(row[col]) for row in rows) for col in range(len(fields(HelpEntry)))]

    def render(row: tuple[str, ...]) -> str:
        cells = [
            cell.center(width) if col == 0 else cell.ljust(width)
            for col, (cell, width) in enumerate(zip(row, widths))
        ]
        return "  ".join(cells).rstrip()

    separator = "  ".join("-" * width for width in widths)
    lines = [render(HEADERS), separator, *(render(row) for row in rows[1:])]
    return "\n".join(lines)