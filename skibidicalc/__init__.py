"""Desktop calculator with overflow-checked arithmetic, a keypad engine, a help table and a standard deviation tool."""

__version__ = "1.0.0"
__all__ = ["mathlib", "stddev", "helptable", "engine", "gui"]