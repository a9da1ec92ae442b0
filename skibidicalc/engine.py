"""Keypad state machine behind the calculator window.

The engine keeps operands as display strings, using a comma as the
decimal separator, and exposes the two display lines: the history line
(``history_text``) and the result line (``result_text``).
"""

from __future__ import annotations

from skibidicalc import mathlib

DIGITS = "0123456789"
BINARY_OPERATIONS = ("+", "-", "x", "/")
POWER_SYMBOL = "^"
ROOT_SYMBOL = "√"
GCD_SYMBOL = "x|y"

ROOT_LABEL = "y√x"
GCD_LABEL = "x|y\nmax"
FACTORIAL_LABEL = "x!"

# (label, row, column, row span, column span, style) in window order.
BUTTONS = (
    ("CE", 1, 0, 1, 1, "dark"),
    ("C", 1, 1, 1, 1, "dark"),
    ("DEL", 1, 2, 1, 1, "dark"),
    ("/", 1, 3, 1, 1, "dark"),
    (ROOT_LABEL, 1, 4, 1, 1, "dark"),
    ("7", 2, 0, 1, 1, "light"),
    ("8", 2, 1, 1, 1, "light"),
    ("9", 2, 2, 1, 1, "light"),
    ("x", 2, 3, 1, 1, "dark"),
    ("^", 2, 4, 1, 1, "dark"),
    ("4", 3, 0, 1, 1, "light"),
    ("5", 3, 1, 1, 1, "light"),
    ("6", 3, 2, 1, 1, "light"),
    ("-", 3, 3, 1, 1, "dark"),
    (GCD_LABEL, 3, 4, 1, 1, "dark"),
    ("1", 4, 0, 1, 1, "light"),
    ("2", 4, 1, 1, 1, "light"),
    ("3", 4, 2, 1, 1, "light"),
    ("+", 4, 3, 1, 1, "dark"),
    (FACTORIAL_LABEL, 4, 4, 1, 1, "dark"),
    ("+/-", 5, 0, 1, 1, "light"),
    ("0", 5, 1, 1, 1, "light"),
    (",", 5, 2, 1, 1, "light"),
    ("=", 5, 3, 1, 2, "accent"),
)


class _InvalidNumber(ValueError):
    """An operand string that does not parse as a number."""

    def __init__(self) -> None:
        super().__init__("Invalid number format")


def format_number(value: float) -> str:
    """Format ``value`` with 15 significant digits and a decimal comma."""
    text = f"{value:.15g}".replace(".", ",")
    if "," in text:
        text = text.rstrip("0")
        if text.endswith(","):
            text = text[:-1]
    return text


def _parse(text: str) -> float:
    """Parse an operand string that may use a decimal comma."""
    normalized = text.replace(",", ".")
    if "_" in normalized:
        raise _InvalidNumber()
    try:
        return float(normalized)
    except ValueError:
        raise _InvalidNumber() from None


class Calculator:
    """Calculator state driven by button presses."""

    def __init__(self) -> None:
        self.current_input = ""
        self.first_operand = ""
        self.second_operand = ""
        self.current_operation = ""
        self.is_new_input = True
        self.has_error = False
        self.just_pressed_equal = False
        self._history = ""
        self._result = "0"
        self.clear_all()

    # Display -----------------------------------------------------------

    def history_text(self) -> str:
        """Text of the upper (history) display line."""
        return self._history

    def result_text(self) -> str:
        """Text of the lower (result) display line."""
        return self._result

    def _update_display(self) -> None:
        if not self.just_pressed_equal:
            text = ""
            if self.first_operand:
                if self.current_operation == ROOT_SYMBOL:
                    text = f"{self.current_operation} {self.first_operand}"
                elif self.current_operation:
                    text = f"{self.first_operand} {self.current_operation}"
                else:
                    text = self.first_operand
            self._history = text

        if self.has_error:
            return
        if self.current_input:
            self._result = self.current_input
        elif self.first_operand:
            self._result = self.first_operand
        else:
            self._result = "0"

    def _handle_error(self, exc: Exception) -> None:
        self.has_error = True
        self._result = f"Error: {exc}"
        self.current_input = ""

    # Button dispatch ---------------------------------------------------

    def press(self, label: str) -> None:
        """Act on a button given by its label."""
        if len(label) == 1 and label in DIGITS:
            self.digit(label)
            return
        if label in BINARY_OPERATIONS:
            self.operation(label)
            return
        actions = {
            "=": self.equal,
            "CE": self.clear_entry,
            "C": self.clear_all,
            "DEL": self.delete_last_char,
            "+/-": self.change_sign,
            ",": self.decimal_point,
            FACTORIAL_LABEL: self.factorial,
            POWER_SYMBOL: self.power,
            ROOT_LABEL: self.root,
            GCD_LABEL: self.gcd,
            GCD_SYMBOL: self.gcd,
        }
        try:
            action = actions[label]
        except KeyError:
            raise ValueError(f"Unknown button: {label!r}") from None
        action()

    def digit(self, digit: str) -> None:
        """Append a digit to the current input."""
        if len(digit) != 1 or digit not in DIGITS:
            raise ValueError(f"Not a digit: {digit!r}")

        if self.just_pressed_equal:
            self.clear_all()
            self.just_pressed_equal = False

        if self.is_new_input:
            self.current_input = ""
            self.is_new_input = False

        if self.has_error:
            self.clear_all()
            self.has_error = False

        self.current_input += digit
        self._update_display()

    def operation(self, symbol: str) -> None:
        """Select one of the binary operations +, -, x and /."""
        if symbol not in BINARY_OPERATIONS:
            raise ValueError(f"Unknown operation: {symbol!r}")

        if self.just_pressed_equal:
            self.current_operation = symbol
            self.just_pressed_equal = False
            self._update_display()
            return

        if self.has_error:
            self.clear_all()
            self.has_error = False

        self.current_operation = symbol
        self._process_operation()

    def _process_operation(self) -> None:
        if self.has_error:
            self.clear_all()
            return

        if self.first_operand and self.current_operation and self.current_input:
            self.second_operand = self.current_input
            result = self._calculate_result()
            if self.has_error:
                return
            self.first_operand = result
            self.second_operand = ""
            self.current_input = ""
        elif not self.current_input and not self.first_operand:
            self.first_operand = "0"
        elif self.current_input:
            self.first_operand = self.current_input
            self.current_input = ""

        self.is_new_input = True
        self._update_display()

    def equal(self) -> None:
        """Evaluate the pending operation."""
        if self.has_error:
            self.clear_all()
            return

        if not self.first_operand or not self.current_operation:
            if self.current_input:
                self.first_operand = self.current_input
            self._update_display()
            return

        if self.current_input:
            self.second_operand = self.current_input
        elif not self.second_operand:
            self.second_operand = self.first_operand

        if self.current_operation == ROOT_SYMBOL:
            expression = f"{self.second_operand} {self.current_operation} {self.first_operand} ="
        else:
            expression = f"{self.first_operand} {self.current_operation} {self.second_operand} ="

        result = self._calculate_result()

        if not self.has_error:
            self._history = expression
            self.first_operand = result
            self.current_input = result
            self.current_operation = ""
            self.second_operand = ""
            self._result = result

        self.is_new_input = True
        self.just_pressed_equal = True

    def _calculate_result(self) -> str:
        if not self.first_operand or not self.second_operand:
            return self.current_input

        self.first_operand = self.first_operand.replace(",", ".")
        self.second_operand = self.second_operand.replace(",", ".")
        try:
            num1 = _parse(self.first_operand)
            num2 = _parse(self.second_operand)
        except _InvalidNumber as exc:
            self._handle_error(exc)
            return ""

        try:
            result = self._apply(num1, num2)
        except (ValueError, ArithmeticError) as exc:
            self._handle_error(exc)
            return ""
        return format_number(result)

    def _apply(self, num1: float, num2: float) -> float:
        operation = self.current_operation
        if operation == "+":
            return mathlib.add(num1, num2)
        if operation == "-":
            return mathlib.subtract(num1, num2)
        if operation == "x":
            return mathlib.multiply(num1, num2)
        if operation == "/":
            return mathlib.divide(num1, num2)
        if operation == POWER_SYMBOL:
            return mathlib.power(num1, num2)
        if operation == GCD_SYMBOL:
            if not (_is_whole(num1) and _is_whole(num2)):
                raise ValueError("GCD requires integers")
            return float(mathlib.greatest_common_divisor(int(num1), int(num2)))
        if operation == ROOT_SYMBOL:
            if not _is_whole(num2):
                raise ValueError("Root degree must be an integer")
            return mathlib.root(num1, int(num2))
        return 0.0

    # Editing -----------------------------------------------------------

    def clear_entry(self) -> None:
        """Reset the current input to zero, keeping the pending operation."""
        self.current_input = "0"
        self.is_new_input = True
        self.has_error = False
        self._update_display()

    def clear_all(self) -> None:
        """Forget every operand, the operation and any error."""
        self.current_input = ""
        self.first_operand = ""
        self.second_operand = ""
        self.current_operation = ""
        self.is_new_input = True
        self.has_error = False
        self.just_pressed_equal = False
        self._update_display()

    def delete_last_char(self) -> None:
        """Remove the last character of the current input."""
        if self.has_error:
            self.clear_all()
            return
        if not self.current_input:
            return
        self.current_input = self.current_input[:-1]
        if not self.current_input:
            self.current_input = "0"
            self.is_new_input = True
        self._update_display()

    def change_sign(self) -> None:
        """Toggle a leading minus sign on the current input."""
        if self.has_error:
            self.clear_all()
            return
        if not self.current_input:
            return
        if self.current_input.startswith("-"):
            self.current_input = self.current_input[1:]
        else:
            self.current_input = "-" + self.current_input
        self._update_display()

    def decimal_point(self) -> None:
        """Add a decimal comma to the current input if it has none."""
        if self.has_error:
            self.clear_all()
            return
        if self.is_new_input:
            self.current_input = "0"
            self.is_new_input = False
        if "," not in self.current_input:
            self.current_input += ","
        self._update_display()

    # Unary and extra operations ------------------------------------------

    def _active_operand(self) -> str:
        if self.current_input:
            return self.current_input
        if self.first_operand:
            return self.first_operand
        return "0"

    def _set_active_operand(self, operand: str) -> None:
        if not self.current_input:
            self.first_operand = operand
        else:
            self.current_input = operand

    def factorial(self) -> None:
        """Replace the active operand with its factorial."""
        if self.has_error:
            self.clear_all()
            return
        if not self.current_input and not self.first_operand:
            return

        try:
            value = _parse(self._active_operand())
        except _InvalidNumber as exc:
            self._handle_error(exc)
            return

        try:
            result = mathlib.factorial(value)
        except (ValueError, ArithmeticError) as exc:
            self._handle_error(exc)
            return
        self._set_active_operand(format_number(result))
        self._update_display()

        self.is_new_input = True
        self.just_pressed_equal = True

    def _select_extra(self, symbol: str) -> None:
        if self.has_error:
            self.clear_all()
            return
        self.current_operation = symbol
        self._process_operation()

    def power(self) -> None:
        """Select the power operation."""
        self._select_extra(POWER_SYMBOL)

    def root(self) -> None:
        """Select the root operation (the degree is entered second)."""
        self._select_extra(ROOT_SYMBOL)

    def gcd(self) -> None:
        """Select the greatest-common-divisor operation."""
        self._select_extra(GCD_SYMBOL)


def _is_whole(value: float) -> bool:
    try:
        return float(value).is_integer()
    except (OverflowError, ValueError):
        return False