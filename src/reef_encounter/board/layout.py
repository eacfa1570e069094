"""ASCII board layouts.

A layout is a block of text, one character per position:

    x = unplayable (land)
    . = open space
    G/P/Y/O/W = starting space for a tile color (see `layout_letters`)
"""

import logging
import warnings
from enum import Enum
from typing import Iterator, Mapping, Sequence

from pydantic import BaseModel, Field

from reef_encounter.data import base_game
from reef_encounter.data.models import LAYOUT_OPEN, LAYOUT_UNPLAYABLE, Color, PolypTile
from reef_encounter.errors import InvalidLayoutError, NoMatchingTileError

logger = logging.getLogger(__name__)


class PositionState(str, Enum):
    """Initial state of a board position."""

    UNPLAYABLE = "unplayable"
    OPEN = "open"
    STARTING = "starting"


class Position(BaseModel):
    """A single cell of a board.

    Everything but `tile` is fixed at parse time.
    """

    row: int = Field(frozen=True)
    col: int = Field(frozen=True)
    state: PositionState = Field(frozen=True)
    starting_color: Color | None = Field(default=None, frozen=True)
    tile: PolypTile | None = None

    @classmethod
    def from_char(
        cls, char: str, row: int, col: int, letters: Mapping[str, Color]
    ) -> "Position":
        """Classify a layout character."""
        if char == LAYOUT_UNPLAYABLE:
            return cls(row=row, col=col, state=PositionState.UNPLAYABLE)
        if char == LAYOUT_OPEN:
            return cls(row=row, col=col, state=PositionState.OPEN)
        if char in letters:
            return cls(
                row=row,
                col=col,
                state=PositionState.STARTING,
                starting_color=letters[char],
            )
        raise InvalidLayoutError(
            f"Unexpected position character {char!r} at row {row}, column {col}"
        )

    @property
    def is_starting(self) -> bool:
        return self.state == PositionState.STARTING


class BoardLayout(BaseModel):
    """Grid of positions, row-major."""

    rows: list[list[Position]]

    @classmethod
    def parse(
        cls, grid: str, letters: Mapping[str, Color] | None = None
    ) -> "BoardLayout":
        """Parse an ASCII layout.

        Surrounding whitespace of the block and of each line is ignored. Rows
        of different lengths are accepted, with a warning.
        """
        if letters is None:
            letters = base_game.layout_letters
        rows: list[list[Position]] = []
        for r, line in enumerate(grid.strip().splitlines()):
            rows.append(
                [
                    Position.from_char(ch, row=r, col=c, letters=letters)
                    for c, ch in enumerate(line.strip())
                ]
            )
        res = cls(rows=rows)
        if not res.is_rectangular:
            warnings.warn(f"Layout rows have different lengths: {res.row_lengths}")
        return res

    @property
    def row_lengths(self) -> list[int]:
        return [len(row) for row in self.rows]

    @property
    def is_rectangular(self) -> bool:
        """Whether all rows have the same length."""
        return len(set(self.row_lengths)) <= 1

    def each_position(self) -> Iterator[Position]:
        """Iterate over all positions, row by row."""
        for row in self.rows:
            yield from row

    def starting_positions(self) -> list[Position]:
        """Starting positions in scan order."""
        return [p for p in self.each_position() if p.is_starting]

    def count_tiles(self) -> int:
        """Number of positions holding a tile."""
        return sum(1 for p in self.each_position() if p.tile is not None)

    def add_starting_tiles(self, candidates: Sequence[PolypTile]) -> list[PolypTile]:
        """Place a tile of the matching color on every starting position.

        Positions are filled in scan order, each taking the first candidate of
        its color. Returns the candidates that were not placed; `candidates`
        itself is left alone.
        """
        remaining = list(candidates)
        for pos in self.starting_positions():
            idx = next(
                (i for i, t in enumerate(remaining) if t.color == pos.starting_color),
                None,
            )
            if idx is None:
                raise NoMatchingTileError(
                    f"No {pos.starting_color.value} tile for the starting space "
                    f"at row {pos.row}, column {pos.col}"
                )
            pos.tile = remaining.pop(idx)
        logger.debug(f"Placed starting tiles, {len(remaining)} left over")
        return remaining
