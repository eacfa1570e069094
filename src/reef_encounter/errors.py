"""Errors raised by the setup engine."""


class ReefEncounterError(Exception):
    """Base class for all setup errors."""


class EmptyStockError(ReefEncounterError, LookupError):
    """A draw was requested but the stock is exhausted."""


class EmptyPoolError(EmptyStockError):
    """The shuffled pool has nothing (suitable) left to draw."""


class EmptyBucketError(EmptyStockError):
    """The supply has no item left of the requested color."""


class InvalidColorError(ReefEncounterError, ValueError):
    """Color is not valid for this kind of item."""


class InvalidLayoutError(ReefEncounterError, ValueError):
    """Unrecognized character in a board layout."""


class NoMatchingTileError(ReefEncounterError, LookupError):
    """No candidate tile of the color a starting slot requires."""


class InvalidPlayerCountError(ReefEncounterError, ValueError):
    """Unsupported number of players."""


class SetupPhaseError(ReefEncounterError, RuntimeError):
    """Operation called in the wrong setup phase."""


class InvalidChoiceError(ReefEncounterError, ValueError):
    """Prompter returned something that was not offered."""
