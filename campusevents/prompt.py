"""Console input and output helpers for the interactive menus."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import Any, TextIO, TypeVar

T = TypeVar("T")

_INT = re.compile(r"[+-]?\d+")
_TOP = "┌────────────────────────────"
_BOTTOM = "└────────────────────────────"
_RULE = "│─────────────"
_INVALID = "Invalid input. Please try again.\n"
_PICK_PROVIDED = "│Please enter with a valid option between the ones provided!\n"


class Prompt:
    """Reads answers from a text stream and writes menus to another.

    Integers are read token by token, as a console reads numbers; a bad
    answer discards the rest of its line and raises ``ValueError``.
    End of input raises ``EOFError``.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending = ""

    # low level reading

    def _fill(self) -> None:
        line = self._stdin.readline()
        if not line:
            raise EOFError("end of input")
        self._pending = line

    def _discard_line(self) -> None:
        self._pending = self._pending.partition("\n")[2]

    def _next_int(self) -> int | None:
        while True:
            self._pending = self._pending.lstrip()
            if self._pending:
                break
            self._fill()
        match = _INT.match(self._pending)
        if match is None:
            return None
        self._pending = self._pending[match.end():]
        return int(match.group())

    def _reject(self, message: str) -> None:
        self._discard_line()
        sys.stderr.write(_INVALID)
        self.write(message)

    # output

    def write(self, text: str) -> None:
        """Write text to the output stream."""
        self._stdout.write(text)

    def full_separator(self) -> None:
        self.write("-------------\n")

    def partial_separator(self) -> None:
        self.write("-----\n")

    def huge_separator(self) -> None:
        self.write("------------------\n")

    def clear_screen(self) -> None:
        """Clear the terminal when the output is one."""
        isatty = getattr(self._stdout, "isatty", None)
        if not (isatty and isatty()):
            return
        self._stdout.flush()
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)

    # simple questions

    def text(self, title: str) -> str:
        """Ask for a line of text."""
        self.write(f"│{title}")
        if self._pending.startswith("\n"):
            self._pending = self._pending[1:]
        if not self._pending:
            self._fill()
        line, _, self._pending = self._pending.partition("\n")
        return line

    def read_int(self) -> int:
        """Read one integer."""
        value = self._next_int()
        if value is None:
            self._discard_line()
            self.write("│Please enter a valid int value...\n")
            raise ValueError("expected an integer")
        return value

    def read_in_range(self, start: int, end: int) -> int:
        """Read an integer between ``start`` and ``end`` inclusive."""
        value = self._next_int()
        if value is None or not start <= value <= end:
            self._reject(f"│Please enter a valid option between {start} and {end}.\n")
            raise ValueError(f"expected an integer between {start} and {end}")
        return value

    def read_option(self, options: Mapping[int, Any]) -> int:
        """Read an integer that is a key of ``options``."""
        value = self._next_int()
        if value is None or value not in options:
            self._reject(_PICK_PROVIDED)
            raise ValueError("expected one of the provided options")
        return value

    def integer(self, title: str) -> int:
        """Ask for an integer until one is given."""
        self.write(f"│{title}\n│Your input: ")
        while True:
            try:
                return self.read_int()
            except ValueError:
                continue

    def flag(self, title: str) -> bool:
        """Ask a yes (1) or no (0) question."""
        self.write(f"│{title}\n│[1]: yes\n│[0]: no\n│Your answer: ")
        while True:
            try:
                return self.read_in_range(0, 1) == 1
            except ValueError:
                continue

    def option(self, options: Mapping[int, str]) -> int:
        """Show a text menu and ask until one of its keys is chosen."""
        while True:
            self.write("│Options Available:\n")
            self.print_options(options)
            try:
                return self.read_option(options)
            except ValueError:
                continue

    # listings

    def print_options(self, options: Mapping[int, str]) -> None:
        """Show a menu of text options."""
        self.write(f"{_TOP}\n│\n│\n")
        for key, label in sorted(options.items()):
            self.write(f"│Option [{key}]: {label}\n")
        self.write("│\n│\n")

    def print_entity_options(self, selectables: Mapping[int, Any]) -> None:
        """Show rendered entities, each under its option number."""
        for key, item in sorted(selectables.items(), key=lambda pair: pair[0]):
            self.write(f"{_RULE}\n│\n│Option [{key}]: \n")
            self.write(item.render())
            self.write("│\n│\n")
        self.write("│\n│\n")

    def print_entities(self, selectables: Mapping[int, Any] | Sequence[Any]) -> None:
        """Show rendered entities from a mapping or a sequence."""
        if isinstance(selectables, Mapping):
            self.write("│\n")
            for _, item in sorted(selectables.items(), key=lambda pair: pair[0]):
                self.write(item.render())
                self.write(f"│\n{_RULE}\n│\n")
            self.write("│\n")
            return
        self.write(f"│\n{_RULE}\n│\n")
        for item in selectables:
            self.write("│\n")
            self.write(item.render())
            self.write(f"│\n{_RULE}\n│\n")
        self.write("│\n")

    # selections

    def select_one(self, title: str, available: Mapping[int, T]) -> T:
        """Ask until one entity of ``available`` is chosen and return it."""
        while True:
            self.write(f"{_TOP}\n│\n│  {title}\n│\n")
            self.print_entity_options(available)
            self.write("│Enter a selection [0 to finish it]: ")
            try:
                key = self.read_option(available)
            except ValueError:
                continue
            self.clear_screen()
            return available[key]

    def select_many(self, title: str, available: Mapping[int, T]) -> dict[int, T]:
        """Let the user pick entities one at a time until 0 is entered."""
        remaining = dict(available)
        selected: dict[int, T] = {}
        while True:
            self.write(f"{_TOP}\n│{title}\n│\n")
            self.write("│Currently available:\n")
            self.print_entity_options(remaining)
            self.write("│\n│Currently selected:\n")
            self.print_entity_options(selected)
            self.write("│\n│Enter a selection ['0' finishes]: ")

            value = self._next_int()
            if value != 0 and (value is None or value not in remaining):
                self._reject(_PICK_PROVIDED)
                continue

            self.clear_screen()
            if value == 0:
                break
            selected[value] = remaining.pop(value)
            self.write(f"│\n│\nNext Selection...\n│\n│\n{_BOTTOM}")

        self.clear_screen()
        return selected