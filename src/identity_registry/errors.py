# errors.py
#
# Date: 2026-10-17

from typing import Any

__all__ = [
    "IdentityError",
]

class IdentityError(TypeError):
    """Error raised when an object can not be assigned an identity."""
    object: Any

    def __init__(self, object: Any, reason: str):
        super().__init__(f"Can not assign identity to {type(object).__name__}: {reason}")
        self.object = object
