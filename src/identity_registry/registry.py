# registry.py
#
# Identity registry
#
# Date: 2026-10-17

import logging
import threading
from typing import Any, Optional

from .errors import IdentityError
from .identity import ID, SequentialIDGenerator
from .weakkey import IdentityWeakKeyDictionary

__all__ = [
    "IdentityRegistry",
    "shared_registry",
    "get_id",
]

logger = logging.getLogger(__name__)


class IdentityRegistry:
    """Registry that assigns a stable integer identity to objects.

    The first time an object is observed it receives the next identifier of
    the registry's sequence. Every later observation of the same object,
    compared by identity and not by equality, returns the same identifier.

    The registry references observed objects weakly: an entry never keeps
    its object alive and it disappears once the object is garbage collected.
    The registry size is therefore bounded by the live objects that were
    observed, not by all objects ever observed.

    Identifiers are unique among the objects that are alive at the same
    time. This implementation never reuses an identifier, but callers must
    not rely on that after an object is gone. Nothing should be inferred
    from the numeric order of identifiers other than the order in which
    objects were first observed.

    The registry is safe to share between threads.
    """

    _entries: IdentityWeakKeyDictionary[Any, ID]
    _generator: SequentialIDGenerator
    _lock: threading.Lock

    def __init__(self, start: ID = 0):
        """Create a new identity registry.

        `start` is the first identifier to be assigned.
        """
        self._entries = IdentityWeakKeyDictionary()
        self._generator = SequentialIDGenerator(start)
        self._lock = threading.Lock()

    def get_or_assign_id(self, obj: Any) -> ID:
        """Get an identifier of `obj`, assigning a new one if the object has
        not been observed yet.

        Raises `IdentityError` when `obj` is `None` or when it does not
        support weak references (for example numbers, strings, tuples, lists
        and dictionaries).
        """
        if obj is None:
            raise IdentityError(obj, "no object")

        with self._lock:
            removed = self._entries.commit_removals()

            id = self._entries.get(obj)
            if id is None:
                id = self._generator.current
                try:
                    self._entries[obj] = id
                except TypeError:
                    raise IdentityError(obj, "object does not support weak references") from None
                self._generator.next()
                created = True
            else:
                created = False

        if removed:
            logger.debug("Removed %d entries of collected objects", removed)
        if created:
            logger.debug("Assigned id %d to %s", id, type(obj).__name__)

        return id

    def lookup(self, obj: Any) -> Optional[ID]:
        """Get an identifier of `obj` if it has been already observed, `None`
        otherwise. No identifier is assigned."""
        if obj is None:
            return None

        with self._lock:
            return self._entries.get(obj)

    def __contains__(self, obj: Any) -> bool:
        return self.lookup(obj) is not None

    def __len__(self) -> int:
        """Number of observed objects that are still alive."""
        with self._lock:
            return len(self._entries)

    @property
    def issued(self) -> int:
        """Number of identifiers assigned so far, including identifiers of
        objects that were already collected."""
        with self._lock:
            return self._generator.issued

    def __str__(self) -> str:
        return f"<IdentityRegistry live={len(self)} issued={self.issued}>"


shared_registry = IdentityRegistry()
"""Process-wide identity registry."""


def get_id(obj: Any) -> ID:
    """Get an identifier of `obj` from the process-wide registry.

    .. seealso::

        `IdentityRegistry.get_or_assign_id()`
    """
    return shared_registry.get_or_assign_id(obj)
