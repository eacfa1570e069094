"""Reef Encounter setup engine."""

from reef_encounter.game.setup import Game, GamePhase

__all__ = ["Game", "GamePhase"]
