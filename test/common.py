# common.py
#
# Common structures for tests.
#
# Date: 2026-10-17
#

class Thing:
    """Plain object that supports weak references."""
    name: str
    def __init__(self, name: str = ""):
        self.name = name


class EqualThing:
    """Object that compares equal to any other `EqualThing` and is not
    hashable."""
    def __eq__(self, other: object) -> bool:
        return isinstance(other, EqualThing)


class Node:
    """Object that can be a part of a reference cycle."""
    other: "Node | None"
    def __init__(self):
        self.other = None
