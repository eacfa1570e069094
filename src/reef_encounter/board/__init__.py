"""Boards."""

from .layout import BoardLayout, Position, PositionState
from .open_sea import OpenSeaBoard, OpenSeaSpace
from .reef import CoralReefBoard

__all__ = [
    "BoardLayout",
    "Position",
    "PositionState",
    "OpenSeaBoard",
    "OpenSeaSpace",
    "CoralReefBoard",
]
