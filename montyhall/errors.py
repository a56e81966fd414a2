"""
montyhall/errors.py - Error Types

One error for every rejected input. Raised at the call, never caught inside
the package.
"""


class InvalidArgument(ValueError):
    """Raised when a door, game, count or config value is out of range."""
    pass
