"""Color-bucketed supply (the larva cube supply)."""

from typing import Generic, Iterable, TypeVar

from reef_encounter.data.models import Color, ColoredItem
from reef_encounter.errors import EmptyBucketError


ItemT = TypeVar("ItemT", bound=ColoredItem)


class PartitionedSupply(Generic[ItemT]):
    """Items kept in one stack per color.

    Draws are always by color, so nothing is shuffled: within a color the last
    item put in is the first one out.
    """

    def __init__(self, items: Iterable[ItemT]):
        self._by_color: dict[Color, list[ItemT]] = {}
        for item in items:
            self._by_color.setdefault(item.color, []).append(item)

    @property
    def colors(self) -> list[Color]:
        """Colors that have a bucket, even an empty one."""
        return list(self._by_color)

    def count(self, color: Color) -> int:
        """Number of items left of a color."""
        return len(self._by_color.get(color, []))

    @property
    def size(self) -> int:
        """Number of items left in total."""
        return sum(len(bucket) for bucket in self._by_color.values())

    def __len__(self) -> int:
        return self.size

    def draw_color(self, color: Color) -> ItemT:
        """Take one item of the given color."""
        bucket = self._by_color.get(color)
        if not bucket:
            raise EmptyBucketError(f"No {getattr(color, 'value', color)} items left")
        return bucket.pop()

    def draw_colors(self, *colors: Color) -> list[ItemT]:
        """Take one item of each color, in order."""
        return [self.draw_color(c) for c in colors]

    def replace(self, *items: ItemT) -> None:
        """Put items back on their color's stack."""
        for item in items:
            self._by_color.setdefault(item.color, []).append(item)
