"""Player-owned state."""

from .player import ParrotFish, Player, PlayerScreen, ScreenArea

__all__ = ["ParrotFish", "Player", "PlayerScreen", "ScreenArea"]
