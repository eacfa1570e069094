from dataclasses import dataclass

import pytest

from reef_encounter.data.models import Color


@dataclass(frozen=True)
class Marker:
    """Colored item that can be told apart from others of its color."""

    color: Color
    n: int


@pytest.fixture
def markers() -> list[Marker]:
    """Three markers each of grey, pink and white."""
    return [
        Marker(color=c, n=i)
        for i in range(3)
        for c in (Color.GREY, Color.PINK, Color.WHITE)
    ]
