"""Asking players to choose things."""

import sys
from enum import Enum
from typing import Any, Callable, Sequence, TextIO, TypeVar

from reef_encounter.errors import InvalidChoiceError
from reef_encounter.state.player import Player

T = TypeVar("T")

Prompter = Callable[[Player, str, Sequence[Any]], Any]
"""Called as `prompter(player, message, choices)`; returns one of `choices`."""


def choice_label(choice: Any) -> str:
    """Human-readable label for a choice."""
    if isinstance(choice, Enum):
        return str(choice.value)
    return str(choice)


class ConsolePrompter:
    """Prompt players on a text console."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _write(self, s: str) -> None:
        self.stdout.write(s + "\n")
        self.stdout.flush()

    def __call__(self, player: Player, message: str, choices: Sequence[T]) -> T:
        if len(choices) == 0:
            raise InvalidChoiceError(f"Nothing to choose from for {player}")
        options = sorted(choices, key=choice_label)
        self._write(f"\n{player}, {message}")
        for idx, c in enumerate(options):
            self._write(f"\t{idx}. {choice_label(c)}")
        self._write(f"\n{player.supply_report()}")
        while True:
            line = self.stdin.readline()
            if line == "":
                raise InvalidChoiceError("Input closed before a choice was made")
            raw = line.strip()
            if raw.isdigit() and int(raw) < len(options):
                return options[int(raw)]
            self._write(f"Please enter a number between 0 and {len(options) - 1}")
