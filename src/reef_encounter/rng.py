"""Random number generator helpers."""

from random import Random

Seed = Random | int | None


def make_rng(seed: Seed = None) -> Random:
    """Get an RNG from a seed, cloning it if it is already an RNG."""
    if isinstance(seed, Random):
        # clone
        rng = Random()
        rng.setstate(seed.getstate())
        return rng
    return Random(seed)
