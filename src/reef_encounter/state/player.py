"""Players and the pieces they own."""

from collections import Counter

from pydantic import BaseModel, Field

from reef_encounter.data.models import Color, LarvaCube, PolypTile, Shrimp


class ScreenArea(BaseModel):
    """Pieces on one side of a player screen."""

    shrimp: list[Shrimp] = []
    tiles: list[PolypTile] = []
    cubes: list[LarvaCube] = []

    def __str__(self) -> str:
        tiles = Counter(t.color.value for t in self.tiles)
        cubes = Counter(c.color.value for c in self.cubes)
        parts = [f"shrimp: {len(self.shrimp)}"]
        parts += [f"{color} tiles: {n}" for color, n in sorted(tiles.items())]
        parts += [f"{color} cubes: {n}" for color, n in sorted(cubes.items())]
        return ", ".join(parts)


class PlayerScreen(BaseModel):
    """A player screen; things behind it are hidden from the others."""

    color: Color
    behind: ScreenArea = Field(default_factory=ScreenArea)
    in_front_of: ScreenArea = Field(default_factory=ScreenArea)


class ParrotFish(BaseModel):
    """A player's parrot fish, which eats polyp tiles."""

    color: Color
    eaten: list[PolypTile] = []

    def eat(self, tile: PolypTile) -> None:
        self.eaten.append(tile)


class Player(BaseModel):
    """A player."""

    color: Color
    parrot_fish: ParrotFish
    player_screen: PlayerScreen

    @classmethod
    def create(cls, color: Color, n_shrimp: int) -> "Player":
        """Create a player with their shrimp behind the screen."""
        screen = PlayerScreen(color=color)
        screen.behind.shrimp = [Shrimp(color=color) for _ in range(n_shrimp)]
        return cls(
            color=color,
            parrot_fish=ParrotFish(color=color),
            player_screen=screen,
        )

    @property
    def shrimp(self) -> list[Shrimp]:
        """All of the player's shrimp."""
        return self.player_screen.behind.shrimp + self.player_screen.in_front_of.shrimp

    def __str__(self) -> str:
        return f"{self.color.value.capitalize()} player"

    def supply_report(self) -> str:
        """What the player has on both sides of the screen."""
        return (
            f"In Front of Screen: {self.player_screen.in_front_of}\n"
            f"Behind Screen: {self.player_screen.behind}"
        )
