"""Desktop window for the calculator, built on tkinter."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from skibidicalc.engine import BUTTONS, DIGITS, Calculator
from skibidicalc.helptable import HEADERS, help_entries

KeyAction = Callable[[Calculator], None]

WINDOW_TITLE = "skibidi kalkulačka"
HELP_TITLE = "Calculator Help Guide"
DISPLAY_BACKGROUND = "#D3D3D3"
DISPLAY_FOREGROUND = "#373737"
HOVER_BACKGROUND = "#7E7E7E"
HELP_HEADER_BACKGROUND = "#333333"
HELP_SELECTION = "#FFA500"

BUTTON_STYLES = {
    "dark": ("#333333", "white"),
    "light": ("#C0C0C0", "black"),
    "accent": ("#FFA500", "white"),
}

HISTORY_FONT = ("Arial", 14)
RESULT_FONT = ("Arial", 36, "bold")
ERROR_FONT = ("Arial", 18, "bold")

_KEYPAD_DIGITS = {f"KP_{d}": d for d in DIGITS}
_KEY_OPERATIONS = {"+": "+", "-": "-", "*": "x", "/": "/"}
_KEYPAD_OPERATIONS = {
    "KP_Add": "+",
    "KP_Subtract": "-",
    "KP_Multiply": "x",
    "KP_Divide": "/",
}


def _type_digit(digit: str) -> KeyAction:
    # Typed digits go straight onto the current input, unlike button presses.
    def action(calculator: Calculator) -> None:
        calculator.current_input += digit
        calculator._update_display()

    return action


def _select_operation(symbol: str) -> KeyAction:
    def action(calculator: Calculator) -> None:
        calculator.current_operation = symbol
        calculator._process_operation()

    return action


def key_action(char: str, keysym: str) -> KeyAction | None:
    """Return what a key press does to a calculator, or None if it does nothing."""
    if len(char) == 1 and char in DIGITS:
        return _type_digit(char)
    if keysym in _KEYPAD_DIGITS:
        return _type_digit(_KEYPAD_DIGITS[keysym])
    if char in _KEY_OPERATIONS and char:
        return _select_operation(_KEY_OPERATIONS[char])
    if keysym in _KEYPAD_OPERATIONS:
        return _select_operation(_KEYPAD_OPERATIONS[keysym])
    if char in (".", ",") and char or keysym in ("period", "comma", "KP_Decimal"):
        return Calculator.decimal_point
    if keysym in ("Return", "KP_Enter"):
        return Calculator.equal
    if keysym == "BackSpace":
        return Calculator.delete_last_char
    if keysym == "Escape":
        return Calculator.clear_all
    return None


class CalculatorWindow:
    """Main calculator window: two display lines, a keypad and a help menu."""

    def __init__(self, master) -> None:
        # Imported here so the rest of the package works without Tk installed.
        import tkinter as tk
        from tkinter import ttk

        self.master = master
        self.calculator = Calculator()

        master.title(WINDOW_TITLE)
        master.minsize(300, 500)

        menubar = tk.Menu(master)
        help_menu = tk.Menu(menubar, tearoff=False)
        help_menu.add_command(label="Open Help", command=self.open_help)
        menubar.add_cascade(label="Help", menu=help_menu)
        master.config(menu=menubar)

        display = tk.Frame(master, bg=DISPLAY_BACKGROUND, padx=10, pady=10)
        display.grid(row=0, column=0, columnspan=5, sticky="nsew")
        display.columnconfigure(0, weight=1)

        self._history = tk.Label(
            display,
            text="",
            anchor="e",
            font=HISTORY_FONT,
            bg=DISPLAY_BACKGROUND,
            fg=DISPLAY_FOREGROUND,
        )
        self._history.grid(row=0, column=0, sticky="ew")
        ttk.Separator(display, orient="horizontal").grid(row=1, column=0, sticky="ew")
        self._result = tk.Label(
            display,
            text="0",
            anchor="e",
            font=RESULT_FONT,
            bg=DISPLAY_BACKGROUND,
            fg=DISPLAY_FOREGROUND,
        )
        self._result.grid(row=2, column=0, sticky="ew")

        for label, row, column, row_span, column_span, style in BUTTONS:
            background, foreground = BUTTON_STYLES[style]
            button = tk.Button(
                master,
                text=label,
                bg=background,
                fg=foreground,
                activebackground=HOVER_BACKGROUND,
                activeforeground=foreground,
                relief="flat",
                borderwidth=0,
                font=("Arial", 12),
                command=lambda label=label: self._press(label),
            )
            button.grid(
                row=row,
                column=column,
                rowspan=row_span,
                columnspan=column_span,
                sticky="nsew",
            )

        rows = {spec[1] for spec in BUTTONS}
        columns = {spec[2] for spec in BUTTONS}
        for row in rows:
            master.rowconfigure(row, weight=1)
        for column in columns:
            master.columnconfigure(column, weight=1)

        master.bind("<Key>", self._on_key)
        self.refresh()

    def _press(self, label: str) -> None:
        self.calculator.press(label)
        self.refresh()

    def _on_key(self, event) -> None:
        action = key_action(event.char or "", event.keysym or "")
        if action is None:
            return
        action(self.calculator)
        self.refresh()

    def refresh(self) -> None:
        """Copy the calculator's display lines into the window."""
        self._history.config(text=self.calculator.history_text())
        font = ERROR_FONT if self.calculator.has_error else RESULT_FONT
        self._result.config(text=self.calculator.result_text(), font=font)

    def open_help(self) -> None:
        """Show the help table in a modal dialog."""
        import tkinter as tk
        from tkinter import ttk

        dialog = tk.Toplevel(self.master)
        dialog.title(HELP_TITLE)
        dialog.geometry("600x440")
        dialog.transient(self.master)

        style = ttk.Style(dialog)
        style.configure(
            "Help.Treeview",
            background=DISPLAY_BACKGROUND,
            fieldbackground=DISPLAY_BACKGROUND,
            foreground="black",
            font=("Arial", 11),
        )
        style.configure(
            "Help.Treeview.Heading",
            background=HELP_HEADER_BACKGROUND,
            foreground="white",
            font=("Arial", 11),
        )
        style.map("Help.Treeview", background=[("selected", HELP_SELECTION)])

        column_ids = [f"c{index}" for index in range(len(HEADERS))]
        table = ttk.Treeview(
            dialog, columns=column_ids, show="headings", style="Help.Treeview"
        )
        for index, (column_id, heading) in enumerate(zip(column_ids, HEADERS)):
            table.heading(column_id, text=heading)
            table.column(
                column_id,
                anchor="center" if index == 0 else "w",
                stretch=index == len(HEADERS) - 1,
            )
        for entry in help_entries():
            table.insert(
                "", "end", values=(entry.symbol, entry.function, entry.example, entry.shortcut)
            )
        table.pack(fill="both", expand=True, padx=8, pady=8)

        dialog.grab_set()
        self.master.wait_window(dialog)


def main(argv: list[str] | None = None) -> int:
    """Open the calculator window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="skibidicalc", description="Desktop calculator.")
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    CalculatorWindow(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())