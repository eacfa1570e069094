"""Game setup."""

from .prompts import ConsolePrompter, Prompter
from .setup import Game, GamePhase

__all__ = ["ConsolePrompter", "Prompter", "Game", "GamePhase"]
