# weakkey.py
#
# Identity-keyed mapping with weakly referenced keys
#
# Date: 2026-10-17

import weakref
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar
from collections.abc import MutableMapping

__all__ = [
    "IdentityWeakKeyDictionary",
]

K = TypeVar("K")
V = TypeVar("V")


class _KeyRef(weakref.ref):
    """Weak reference that remembers the identity of its referent.

    The identity is needed to find the entry once the referent is gone.
    """
    __slots__ = ("key",)

    key: int

    def __new__(cls, obj: Any,
                callback: Optional[Callable[["_KeyRef"], None]] = None):
        self = super().__new__(cls, obj, callback)
        self.key = id(obj)
        return self

    def __init__(self, obj: Any,
                 callback: Optional[Callable[["_KeyRef"], None]] = None):
        super().__init__(obj, callback)


class IdentityWeakKeyDictionary(MutableMapping, Generic[K, V]):
    """Mapping from objects to values where keys are compared by identity and
    are referenced weakly.

    Unlike `weakref.WeakKeyDictionary`, two distinct objects that compare
    equal are two different keys, and keys do not have to be hashable. Keys
    must support weak references, otherwise `TypeError` is raised.

    An entry disappears once its key is garbage collected. The weak reference
    callback only queues the dead reference; the entry is removed by
    `commit_removals()`, which is called by the mutating and size-reporting
    methods. The callback therefore never touches the underlying dictionary
    and never needs the owner's lock.

    .. note::

        The mapping is not synchronized. Owners shared between threads must
        serialize the access to it.
    """

    _data: dict[int, tuple[_KeyRef, V]]
    _pending_removals: list[_KeyRef]

    def __init__(self):
        self._data = dict()
        self._pending_removals = list()

        def remove(ref: _KeyRef, selfref=weakref.ref(self)):
            self = selfref()
            if self is not None:
                self._pending_removals.append(ref)

        self._remove = remove

    def commit_removals(self) -> int:
        """Remove entries of keys that were garbage collected.

        Returns number of removed entries.
        """
        pop = self._pending_removals.pop
        data = self._data
        removed = 0

        while True:
            try:
                ref = pop()
            except IndexError:
                return removed

            entry = data.get(ref.key)
            # The address might have been reused by a newer key.
            if entry is not None and entry[0] is ref:
                del data[ref.key]
                removed += 1

    @property
    def has_pending_removals(self) -> bool:
        return bool(self._pending_removals)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        entry = self._data.get(id(key))
        if entry is None or entry[0]() is not key:
            return default
        return entry[1]

    def __getitem__(self, key: K) -> V:
        entry = self._data.get(id(key))
        if entry is None or entry[0]() is not key:
            raise KeyError(key)
        return entry[1]

    def __setitem__(self, key: K, value: V):
        self.commit_removals()
        self._data[id(key)] = (_KeyRef(key, self._remove), value)

    def __delitem__(self, key: K):
        self.commit_removals()
        entry = self._data.get(id(key))
        if entry is None or entry[0]() is not key:
            raise KeyError(key)
        del self._data[id(key)]

    def __contains__(self, key: object) -> bool:
        entry = self._data.get(id(key))
        return entry is not None and entry[0]() is key

    def __iter__(self) -> Iterator[K]:
        for ref, _ in list(self._data.values()):
            obj = ref()
            if obj is not None:
                yield obj

    def __len__(self) -> int:
        self.commit_removals()
        return len(self._data)

    def __str__(self) -> str:
        return f"<{type(self).__name__} with {len(self)} entries>"
