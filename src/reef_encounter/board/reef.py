"""Coral reef boards."""

from typing import Iterator, Sequence

from pydantic import BaseModel

from reef_encounter.data.models import GameInfo, LayoutPreset, PolypTile
from .layout import BoardLayout, Position


class CoralReefBoard(BaseModel):
    """A player's coral reef board."""

    name: str
    layout: BoardLayout

    @classmethod
    def from_preset(cls, preset: LayoutPreset, game_info: GameInfo) -> "CoralReefBoard":
        """Build a board from a named layout."""
        layout = BoardLayout.parse(preset.grid, letters=game_info.layout_letters)
        return cls(name=preset.name, layout=layout)

    @classmethod
    def starting_boards(cls, game_info: GameInfo) -> list["CoralReefBoard"]:
        """All built-in boards."""
        return [cls.from_preset(p, game_info) for p in game_info.coral_reef_layouts]

    def each_position(self) -> Iterator[Position]:
        return self.layout.each_position()

    def count_tiles(self) -> int:
        return self.layout.count_tiles()

    def add_starting_tiles(self, tiles: Sequence[PolypTile]) -> list[PolypTile]:
        return self.layout.add_starting_tiles(tiles)
