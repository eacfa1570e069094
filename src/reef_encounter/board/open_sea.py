"""The open sea board."""

from typing import Iterator

from pydantic import BaseModel

from reef_encounter.data.models import (
    Color,
    CoralTile,
    GameInfo,
    LarvaCube,
    PolypTile,
    ResourceKind,
)


class OpenSeaSpace(BaseModel):
    """Space holding one larva cube of its color and some polyp tiles."""

    larva_cube_color: Color
    larva_cube: LarvaCube | None = None
    tiles: list[PolypTile] = []

    def place_cube(self, cube: LarvaCube) -> None:
        """Put the larva cube on this space."""
        if cube.color != self.larva_cube_color:
            raise ValueError(
                f"Space takes a {self.larva_cube_color.value} cube, "
                f"got {cube.color.value}"
            )
        self.larva_cube = cube

    def add_tiles(self, *tiles: PolypTile) -> None:
        self.tiles.extend(tiles)


class OpenSeaBoard(BaseModel):
    """Shared board with the coral tiles and one space per larva cube color."""

    coral_tiles: list[CoralTile]
    spaces: list[OpenSeaSpace]

    @classmethod
    def from_game_info(cls, game_info: GameInfo) -> "OpenSeaBoard":
        """Create an empty open sea board."""
        return cls(
            coral_tiles=game_info.make_coral_tiles(),
            spaces=[
                OpenSeaSpace(larva_cube_color=c)
                for c in game_info.colors_for(ResourceKind.LARVA_CUBE)
            ],
        )

    def each_space(self) -> Iterator[OpenSeaSpace]:
        """Iterate over spaces in cube color order."""
        yield from self.spaces

    @property
    def cubes(self) -> list[LarvaCube]:
        """Cubes placed so far."""
        return [s.larva_cube for s in self.spaces if s.larva_cube is not None]
