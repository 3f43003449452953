"""Error types raised by the windmill core."""


class WindmillError(ValueError):
    """Base class for all windmill precondition violations."""


class InvalidInputError(WindmillError):
    """A plane, generator argument or config value is empty or malformed."""


class NoIntersectionError(WindmillError):
    """No point remains that the rotating line could strike next."""
