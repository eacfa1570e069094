"""Data models."""

from collections import Counter
from enum import Enum
from typing import Protocol

from typing_extensions import Annotated
from pydantic import BaseModel, Field, model_validator


class Color(str, Enum):
    """Every color used by any game component."""

    GREY = "grey"
    ORANGE = "orange"
    PINK = "pink"
    WHITE = "white"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    RED = "red"


class ResourceKind(str, Enum):
    """Kind of colored game component."""

    POLYP_TILE = "polyp_tile"
    LARVA_CUBE = "larva_cube"
    ALGA_CYLINDER = "alga_cylinder"
    PLAYER = "player"


class ColoredItem(Protocol):
    """Anything with a color that can be pooled or supplied."""

    @property
    def color(self) -> Color:
        ...


class _Piece(BaseModel):
    """A single-colored game piece."""

    model_config = {"frozen": True}

    color: Color

    def __str__(self) -> str:
        return self.color.value


class PolypTile(_Piece):
    """Polyp tile."""


class LarvaCube(_Piece):
    """Larva cube."""


class AlgaCylinder(_Piece):
    """Alga cylinder."""


class Shrimp(_Piece):
    """Shrimp, in a player's color."""


PIECE_TYPES: dict[ResourceKind, type[_Piece]] = {
    ResourceKind.POLYP_TILE: PolypTile,
    ResourceKind.LARVA_CUBE: LarvaCube,
    ResourceKind.ALGA_CYLINDER: AlgaCylinder,
}


class KindStock(BaseModel):
    """Valid colors of a resource kind, and how many of each the game ships."""

    colors: Annotated[list[Color], Field(min_length=1)]
    quantity: Annotated[int, Field(ge=0)] = 0

    @model_validator(mode="after")
    def _chk_unique(self) -> "KindStock":
        """Ensure no color is listed twice."""
        dupes = [c.value for c, n in Counter(self.colors).items() if n > 1]
        if dupes:
            raise ValueError(f"Duplicate colors: {dupes}")
        return self


class CoralTile(BaseModel):
    """Double-sided coral tile.

    Constructor values describe the starfish side: the first coral is the
    stronger one and the first alga is the one showing. Flipping the tile swaps
    both pairs.
    """

    first_coral: Color
    second_coral: Color
    first_alga: Color
    second_alga: Color
    flipped: bool = False

    @classmethod
    def from_list(cls, colors: list[Color]) -> "CoralTile":
        """Create a coral tile from [coral, coral, alga, alga]."""
        if len(colors) != 4:
            raise ValueError(f"Require 4 colors, got: {colors!r}")
        return cls(
            first_coral=colors[0],
            second_coral=colors[1],
            first_alga=colors[2],
            second_alga=colors[3],
        )

    @property
    def corals(self) -> tuple[Color, Color]:
        """Both corals, sorted; does not depend on orientation."""
        a, b = sorted([self.first_coral, self.second_coral], key=lambda c: c.value)
        return a, b

    def flip(self) -> None:
        """Turn the tile over."""
        self.flipped = not self.flipped

    @property
    def stronger_coral(self) -> Color:
        return self.second_coral if self.flipped else self.first_coral

    @property
    def weaker_coral(self) -> Color:
        return self.first_coral if self.flipped else self.second_coral

    @property
    def showing_alga(self) -> Color:
        return self.second_alga if self.flipped else self.first_alga

    @property
    def background_alga(self) -> Color:
        return self.first_alga if self.flipped else self.second_alga


class LayoutPreset(BaseModel):
    """A named built-in coral reef board layout."""

    name: str
    grid: str

    @property
    def rows(self) -> list[str]:
        """Significant rows of the grid."""
        return [line.strip() for line in self.grid.strip().splitlines()]


LAYOUT_UNPLAYABLE = "x"
LAYOUT_OPEN = "."


class GameInfo(BaseModel):
    """Static game setup data."""

    min_players: int
    max_players: int
    kinds: dict[ResourceKind, KindStock]
    shrimp_per_player: Annotated[int, Field(ge=0)]
    starting_hands: dict[int, list[int]]
    open_sea_tile_batches: list[int]
    layout_letters: dict[str, Color]
    coral_reef_layouts: list[LayoutPreset]
    coral_tiles: list[tuple[Color, Color, Color, Color]]

    def colors_for(self, kind: ResourceKind) -> list[Color]:
        """Valid colors for a resource kind."""
        return list(self.kinds[kind].colors)

    @property
    def player_counts(self) -> list[int]:
        """Supported numbers of players."""
        return sorted(self.starting_hands)

    def initial_distribution(self, kind: ResourceKind) -> list[_Piece]:
        """Create every piece of this kind the game ships with."""
        if kind not in PIECE_TYPES:
            raise ValueError(f"No pieces exist for kind: {kind.value}")
        stock = self.kinds[kind]
        piece_type = PIECE_TYPES[kind]
        return [
            piece_type(color=c) for _ in range(stock.quantity) for c in stock.colors
        ]

    def make_coral_tiles(self) -> list[CoralTile]:
        """Create fresh coral tiles from their definitions."""
        return [CoralTile.from_list(list(defn)) for defn in self.coral_tiles]

    # Validators

    @model_validator(mode="after")
    def _chk_kinds(self) -> "GameInfo":
        """Ensure every kind has its colors defined."""
        missing = set(ResourceKind) - set(self.kinds)
        if missing:
            raise ValueError(f"Missing kinds: {sorted(k.value for k in missing)}")
        n_player_colors = len(self.kinds[ResourceKind.PLAYER].colors)
        if n_player_colors < self.max_players:
            raise ValueError(
                f"Only {n_player_colors} player colors for {self.max_players} players"
            )
        return self

    @model_validator(mode="after")
    def _chk_starting_hands(self) -> "GameInfo":
        """Ensure there is one hand per player for each supported player count."""
        expected = set(range(self.min_players, self.max_players + 1))
        if set(self.starting_hands) != expected:
            raise ValueError(
                f"Starting hands defined for {sorted(self.starting_hands)}, "
                f"expected {sorted(expected)}"
            )
        for n_players, hands in self.starting_hands.items():
            if len(hands) != n_players:
                raise ValueError(f"Expected {n_players} hands, got: {hands}")
        return self

    @model_validator(mode="after")
    def _chk_open_sea_batches(self) -> "GameInfo":
        """Ensure there is one tile batch per open sea space."""
        n_spaces = len(self.kinds[ResourceKind.LARVA_CUBE].colors)
        if len(self.open_sea_tile_batches) != n_spaces:
            raise ValueError(
                f"Expected {n_spaces} open sea tile batches, "
                f"got: {self.open_sea_tile_batches}"
            )
        if any(n < 0 for n in self.open_sea_tile_batches):
            raise ValueError(
                f"Negative open sea tile batch: {self.open_sea_tile_batches}"
            )
        return self

    @model_validator(mode="after")
    def _chk_layouts(self) -> "GameInfo":
        """Ensure presets are well-formed and have one starting slot per tile color."""
        tile_colors = self.colors_for(ResourceKind.POLYP_TILE)
        bad_letters = {
            k: v.value for k, v in self.layout_letters.items() if v not in tile_colors
        }
        if bad_letters:
            raise ValueError(f"Layout letters for non-tile colors: {bad_letters}")
        if len(self.coral_reef_layouts) < self.max_players:
            raise ValueError(
                f"Need at least {self.max_players} layouts, "
                f"got {len(self.coral_reef_layouts)}"
            )
        allowed = {LAYOUT_UNPLAYABLE, LAYOUT_OPEN} | set(self.layout_letters)
        for preset in self.coral_reef_layouts:
            rows = preset.rows
            if len({len(row) for row in rows}) != 1:
                raise ValueError(f"Layout {preset.name!r} is not rectangular")
            chars = "".join(rows)
            unknown = set(chars) - allowed
            if unknown:
                raise ValueError(
                    f"Layout {preset.name!r} has unknown characters: {sorted(unknown)}"
                )
            starting = Counter(
                self.layout_letters[ch] for ch in chars if ch in self.layout_letters
            )
            if sorted(starting.elements()) != sorted(tile_colors):
                raise ValueError(
                    f"Layout {preset.name!r} must have one starting space "
                    "per tile color"
                )
        return self

    @model_validator(mode="after")
    def _chk_coral_tiles(self) -> "GameInfo":
        """Ensure coral tiles use tile colors and each coral pair is unique."""
        tile_colors = self.colors_for(ResourceKind.POLYP_TILE)
        tiles = self.make_coral_tiles()
        for tile in tiles:
            for coral in tile.corals:
                if coral not in tile_colors:
                    raise ValueError(f"Coral color is not a tile color: {coral.value}")
        pairs = [tile.corals for tile in tiles]
        if len(set(pairs)) != len(pairs):
            raise ValueError("Coral tiles must have unique coral pairs")
        return self
