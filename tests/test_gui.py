import pytest

from skibidicalc.engine import Calculator
from skibidicalc.gui import key_action


def _type(calculator, *keys):
    for char, keysym in keys:
        action = key_action(char, keysym)
        assert action is not None
        action(calculator)
    return calculator


@pytest.mark.parametrize("char,keysym", [("a", "a"), ("", "F1"), ("", "Shift_L"), ("q", "q")])
def test_unbound_keys_do_nothing(char, keysym):
    assert key_action(char, keysym) is None


@pytest.mark.parametrize("digit", list("0123456789"))
def test_digit_key_shows_digit(digit):
    calculator = _type(Calculator(), (digit, digit))
    assert calculator.result_text() == digit


def test_keypad_digit_without_char():
    calculator = _type(Calculator(), ("", "KP_7"))
    assert calculator.result_text() == "7"


@pytest.mark.parametrize("char,symbol", [("+", "+"), ("-", "-"), ("*", "x"), ("/", "/")])
def test_operator_keys_match_buttons(char, symbol):
    typed = _type(Calculator(), ("7", "7"), (char, char))
    pressed = Calculator()
    pressed.press("7")
    pressed.press(symbol)
    assert typed.history_text() == pressed.history_text()
    assert typed.history_text() == f"7 {symbol}"


@pytest.mark.parametrize("keysym", ["Return", "KP_Enter"])
def test_enter_evaluates(keysym):
    calculator = _type(
        Calculator(), ("2", "2"), ("+", "plus"), ("3", "3"), ("\r", keysym)
    )
    assert calculator.result_text() == "5"
    assert calculator.history_text() == "2 + 3 ="


def test_backspace_deletes_last_character():
    calculator = _type(Calculator(), ("1", "1"), ("2", "2"), ("\b", "BackSpace"))
    assert calculator.result_text() == "1"


def test_escape_clears_everything():
    calculator = _type(
        Calculator(), ("4", "4"), ("+", "plus"), ("4", "4"), ("\x1b", "Escape")
    )
    assert calculator.result_text() == "0"
    assert calculator.history_text() == ""


@pytest.mark.parametrize("char,keysym", [(".", "period"), (",", "comma"), ("", "KP_Decimal")])
def test_decimal_keys_add_comma(char, keysym):
    calculator = _type(Calculator(), (char, keysym))
    assert calculator.result_text() == "0,"


def test_typed_digit_after_equal_extends_result():
    calculator = _type(
        Calculator(), ("2", "2"), ("+", "plus"), ("3", "3"), ("\r", "Return"), ("5", "5")
    )
    assert calculator.result_text() == "55"
    assert calculator.history_text() == "2 + 3 ="


def test_division_by_zero_from_keyboard_reports_error():
    calculator = _type(
        Calculator(), ("6", "6"), ("/", "slash"), ("0", "0"), ("\r", "Return")
    )
    assert calculator.has_error
    assert calculator.result_text() == "Error: Division by zero"