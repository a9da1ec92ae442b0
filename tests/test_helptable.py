import pytest

from skibidicalc.helptable import HelpEntry, format_help_table, help_entries


def test_symbols_in_order():
    symbols = [entry.symbol for entry in help_entries()]
    assert symbols == ["+", "-", "x", "/", "^", "y√x", "x!", "x|y", "+/-", "C", "CE", "DEL", "="]


def test_entry_fields():
    entries = {entry.symbol: entry for entry in help_entries()}
    assert entries["DEL"] == HelpEntry("DEL", "Delete", "remove last digit", "Backspace")
    assert entries["="].shortcut == "Enter"
    assert entries["x"].shortcut == "*"
    assert entries["x|y"].function == "Greatest Common Divisor"


def test_entries_are_immutable():
    entry = help_entries()[0]
    with pytest.raises(AttributeError):
        entry.symbol = "?"
    assert entry.symbol == "+"
    assert help_entries()[0].symbol == "+"


def test_table_header_and_size():
    lines = format_help_table().splitlines()
    assert len(lines) == len(help_entries()) + 2
    for header in ("Symbol", "Function", "Example/Description", "Keyboard Shortcut"):
        assert header in lines[0]
    assert set(lines[1].replace(" ", "")) == {"-"}


def test_table_rows_contain_entries():
    lines = format_help_table().splitlines()[2:]
    for line, entry in zip(lines, help_entries()):
        assert entry.function in line
        assert entry.example in line
        assert line.rstrip().endswith(entry.shortcut or entry.example)


def test_table_columns_aligned():
    lines = format_help_table().splitlines()
    column = lines[0].index("Function")
    for line, entry in zip(lines[2:], help_entries()):
        assert line[column:].startswith(entry.function)