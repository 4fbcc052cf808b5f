"""Terminal input and output for the shop's interactive menus."""

from __future__ import annotations

import re
import sys
from typing import TextIO

GREEN = "\033[32m"
RED = "\033[31m"
BOLD = "\033[1m"
RESET = "\033[0m"
CLEAR_SCREEN = "\033[2J\033[H"

_WORD = re.compile(r"\S+")


class Console:
    """Reads whitespace-separated tokens or whole lines and writes coloured text."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._pending = ""

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def success(self, message: str) -> None:
        self.write(f"{GREEN}{message}{RESET}")

    def error(self, message: str) -> None:
        self.write(f"{RED}{message}{RESET}")

    def bold(self, message: str) -> None:
        self.write(f"{BOLD}{message}{RESET}")

    def clear(self) -> None:
        self.write(CLEAR_SCREEN)

    def _next_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("end of input")
        return line

    def read_line(self, prompt: str = "") -> str:
        """Read a line of text, discarding what is left of a line read by tokens."""
        self.write(prompt)
        if self._pending.strip():
            line, self._pending = self._pending, ""
        else:
            self._pending = ""
            line = self._next_line()
        return line.rstrip("\r\n")

    def read_token(self, prompt: str = "") -> str:
        """Read the next whitespace-separated word, across lines if needed."""
        self.write(prompt)
        while not self._pending.strip():
            self._pending = self._next_line()
        stripped = self._pending.lstrip()
        match = _WORD.match(stripped)
        self._pending = stripped[match.end():]
        return match.group()

    def read_int(self, prompt: str = "") -> int:
        """Read an integer; raises ValueError if the word is not one."""
        word = self.read_token(prompt)
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"not an integer: {word!r}") from None

    def read_float(self, prompt: str = "") -> float:
        """Read a number; raises ValueError if the word is not one."""
        word = self.read_token(prompt)
        try:
            return float(word)
        except ValueError:
            raise ValueError(f"not a number: {word!r}") from None


def show_start_menu(console: Console) -> None:
    console.clear()
    console.write(
        "\n=== E-commerce System ===\n"
        "1. Register\n"
        "2. Login\n"
        "3. Exit\n"
        "Enter your choice: "
    )


def ask_relogin(console: Console) -> bool:
    """Ask whether to try logging in again until the answer is 1 or 2."""
    while True:
        console.write(
            "\n=== Do you want to login again? ===\n"
            "1. Yes\n"
            "2. No\n"
        )
        try:
            choice = console.read_int("Enter your choice: ")
        except ValueError:
            choice = None
        if choice in (1, 2):
            return choice == 1
        console.error("Invalid choice!\n")