"""Shuffled draw pool (the tile bag)."""

import logging
from collections import Counter
from random import Random
from typing import Generic, Iterable, TypeVar

from reef_encounter.data.models import Color, ColoredItem
from reef_encounter.errors import EmptyPoolError, InvalidColorError

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=ColoredItem)


class ShuffledPool(Generic[ItemT]):
    """Randomly ordered multiset of colored items.

    Items are drawn from the end of the internal order. Color-targeted draws
    set mismatches aside and put them back (with a reshuffle) once the target
    is found, so the order of the remaining items is never revealed.
    """

    def __init__(
        self,
        items: Iterable[ItemT],
        *,
        rng: Random | None = None,
        colors: Iterable[Color] | None = None,
    ):
        self._rng = rng if rng is not None else Random()
        self._items: list[ItemT] = list(items)
        self._rng.shuffle(self._items)
        if colors is None:
            self.colors = frozenset(item.color for item in self._items)
        else:
            self.colors = frozenset(colors)

    @property
    def size(self) -> int:
        """Number of items left."""
        return len(self._items)

    def __len__(self) -> int:
        return self.size

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def colors_count(self) -> Counter[Color]:
        """Count of remaining items per color."""
        return Counter(item.color for item in self._items)

    def draw(self) -> ItemT:
        """Draw a single item."""
        if self.is_empty:
            raise EmptyPoolError("Can't draw! The pool is empty!")
        return self._items.pop()

    def draw_many(self, n: int) -> list[ItemT]:
        """Draw `n` items at once."""
        if n < 0:
            raise ValueError(f"Can't draw a negative number of items: {n}")
        if n > self.size:
            raise EmptyPoolError(f"Can't draw {n} items, only {self.size} left")
        if n == 0:
            return []
        res = self._items[-n:]
        del self._items[-n:]
        return res

    def draw_color(self, color: Color) -> ItemT:
        """Draw until an item of `color` turns up; mismatches go back in."""
        if color not in self.colors:
            raise InvalidColorError(
                f"Color {color!r} is not valid here, expected one of: "
                f"{sorted(c.value for c in self.colors)}"
            )
        rejects: list[ItemT] = []
        try:
            item = self.draw()
            while item.color != color:
                rejects.append(item)
                item = self.draw()
        except EmptyPoolError as epe:
            self.replace(*rejects)
            raise EmptyPoolError(f"No {color.value} items left in the pool") from epe
        logger.debug(f"Drew {color.value} after {len(rejects)} rejects")
        self.replace(*rejects)
        return item

    def draw_colors(self, *colors: Color) -> list[ItemT]:
        """Draw one item of each color, in order."""
        return [self.draw_color(c) for c in colors]

    def replace(self, *items: ItemT) -> None:
        """Put items back and reshuffle."""
        self._items.extend(items)
        self._rng.shuffle(self._items)
