# identity.py
#
# Sequential identity
#
# Date: 2026-10-17

from typing import TypeAlias

__all__ = [
    "ID",
    "SequentialIDGenerator",
]

ID: TypeAlias = int
"""Identity type. Identifiers assigned to observed objects are of this type."""


class SequentialIDGenerator:
    """Generator of sequential identity.

    This class is used to mint identifiers for objects observed by the
    identity registry. Each call to `next()` advances the sequence by exactly
    one and the sequence never rewinds.

    .. note::

        The generator is not synchronized. The owner of the generator is
        responsible for serializing the access to it.
    """

    _start: ID
    _current: ID

    def __init__(self, start: ID = 0):
        """Create a new sequential ID generator.

        `start` is the first identifier to be generated. It must not be
        negative.
        """
        if start < 0:
            raise ValueError(f"Invalid sequence start: {start}")

        self._start = start
        self._current = start

    @property
    def current(self) -> ID:
        """Identifier that will be returned by the next call to `next()`."""
        return self._current

    @property
    def issued(self) -> int:
        """Number of identifiers generated so far."""
        return self._current - self._start

    def next(self) -> ID:
        """Get a next ID."""
        id = self._current
        self._current += 1
        return id
