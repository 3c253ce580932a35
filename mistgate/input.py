"""Reading and normalising the player's typed input."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, Sequence, TextIO

if TYPE_CHECKING:
    from .events import Choice

_WHITESPACE = " \t\n\r\f\v"


def preprocess_input(text: str) -> str:
    """Lower-case the input for comparison."""
    return text.lower()


class InputManager:
    """Reads trimmed, non-empty lines from a text stream (standard input by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def get_user_input(self) -> str:
        """Return the next non-empty line with surrounding whitespace removed.

        Raises EOFError when the stream runs out.
        """
        stream = self._stream if self._stream is not None else sys.stdin
        while True:
            line = stream.readline()
            if not line:
                raise EOFError("no more input")
            text = line.strip(_WHITESPACE)
            if text:
                return text
            print("[DEBUG] Empty input received, please enter a valid command: ", end="")

    def get_choice_input(self, choices: Sequence["Choice"]) -> str:
        """Ask until the input names a choice by full id or by its first letter."""
        while True:
            print("Enter your choice: ", end="")
            text = preprocess_input(self.get_user_input())
            for choice in choices:
                full_id = preprocess_input(choice.id)
                if full_id == text or (
                    len(text) == 1 and full_id[:1] == text
                ):
                    return choice.id
            print("Invalid choice. Please try again.")

    def get_yes_no_input(self) -> str:
        """Ask until the answer is yes/y or no/n; return "yes" or "no"."""
        while True:
            text = preprocess_input(self.get_user_input())
            if text in ("y", "yes"):
                return "yes"
            if text in ("n", "no"):
                return "no"
            print("Invalid choice. Please enter 'yes' or 'no': ", end="")


class InputDecorator(InputManager):
    """Wraps another input manager and passes its raw input through."""

    def __init__(self, input_manager: InputManager) -> None:
        super().__init__()
        self._inner = input_manager

    def get_user_input(self) -> str:
        return self._inner.get_user_input()