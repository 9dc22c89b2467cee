"""
Exceptions raised by the generation, strength and history layers.
"""


class InvalidPolicy(ValueError):
    """A policy has no character class, a field out of range, or an unknown option."""


class RngUnavailable(RuntimeError):
    """The operating system could not supply cryptographically secure randomness."""


class PersistenceError(Exception):
    """Base class for key/value slot failures."""


class PersistenceCorrupt(PersistenceError):
    """A stored slot could not be read or parsed."""


class PersistenceWriteFailed(PersistenceError):
    """A slot could not be written or removed."""
