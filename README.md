# skibidicalc

A small desktop calculator with overflow-checked arithmetic, plus a
command-line tool that prints the sample standard deviation of numbers
read from standard input.

## Installation

```
pip install .
```

The window is built with Tkinter from the Python standard library; the
rest of the package works without Tk installed.

## The calculator

```
skibidicalc
```

The window shows a history line above a result line, and a keypad with
digits, `+`, `-`, `x`, `/`, power (`^`), root (`y√x`), factorial (`x!`),
greatest common divisor (`x|y max`), sign change (`+/-`), decimal comma
(`,`), `CE`, `C`, `DEL` and `=`. Numbers use a comma as the decimal
separator and are shown with up to 15 significant digits. Errors such as
division by zero appear in the result line as `Error: <message>`; the
next key press clears them. The Help menu opens a table listing each
symbol, its function, an example and its keyboard shortcut.

For the root operation the radicand is entered first and the degree
second: `27`, `y√x`, `3`, `=` gives `3`.

Keyboard: digits (main row or keypad), `+`, `-`, `*`, `/` (or the keypad
operators), `.` or `,` for the decimal comma, Enter to calculate,
Backspace to delete the last character, Escape to clear everything.

## Standard deviation

```
echo "2 4 4 4 5 5 7 9" | skibidicalc-stddev
```

Reads whitespace-separated numbers from standard input, stopping at the
first token that is not a number, and prints their sample standard
deviation. With fewer than two numbers, or when a result overflows, the
error is printed to standard error and the exit status is 1.

## Using it as a library

```python
from skibidicalc.mathlib import add, divide, power, root, factorial, greatest_common_divisor
from skibidicalc.stddev import standard_deviation
from skibidicalc.engine import Calculator, format_number
from skibidicalc.helptable import help_entries, format_help_table

power(2, 5)                      # 32.0
root(27, 3)                      # 3.0
factorial(5)                     # 120.0
greatest_common_divisor(18, 12)  # 6
standard_deviation([1, 2, 3, 4])
format_number(2.5)               # "2,5"

calc = Calculator()
for label in ["1", "2", "+", "3", "="]:
    calc.press(label)
calc.result_text()   # "15"
calc.history_text()  # "12 + 3 ="

print(format_help_table())
```

`skibidicalc.mathlib` also provides `subtract`, `multiply` and
`round_to_1e5`. `power` accepts only non-negative whole exponents and
`root` only positive degrees; both round their result to 5 decimal
places. `factorial` accepts non-negative whole numbers whose factorial
fits in a 32-bit signed integer.

The arithmetic functions raise `OverflowError` when a result would not fit
in a float and `ValueError` for invalid arguments such as division by zero,
negative factorials or even roots of negative numbers.

`Calculator` can also be driven by its methods directly: `digit`,
`operation`, `equal`, `clear_entry`, `clear_all`, `delete_last_char`,
`change_sign`, `decimal_point`, `factorial`, `power`, `root` and `gcd`.

## Tests

```
pip install .[test]
pytest
```