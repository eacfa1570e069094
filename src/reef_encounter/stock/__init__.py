"""Stocks of colored pieces."""

from .pool import ShuffledPool
from .supply import PartitionedSupply

__all__ = ["ShuffledPool", "PartitionedSupply"]
