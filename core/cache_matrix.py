# core/cache_matrix.py
"""
Memoizing holder for a matrix and its (lazily computed) inverse.

The cache only tracks *validity*: replacing the subject always drops the
cached inverse. Computing a fresh inverse is left to ``core.solver``.
"""
from typing import Any, Optional

import numpy as np


class CacheMatrix:
    """
    Holds one subject matrix and at most one cached inverse.

    The inverse slot is either absent (``None``) or present. ``set_subject``
    always empties it; ``set_inverse`` fills it without checking the value
    against the subject.
    """
    __slots__ = ("_subject", "_inverse")

    def __init__(self, x: Any = None):
        self._subject = None
        self._inverse = None
        self.set_subject(np.empty((0, 0)) if x is None else x)

    def set_subject(self, matrix: Any) -> None:
        """Replace the subject and drop any cached inverse, even if *matrix* is unchanged."""
        self._subject = matrix
        self._inverse = None

    def get_subject(self) -> Any:
        return self._subject

    def set_inverse(self, matrix: Any) -> None:
        # Trusted as-is: a wrong inverse here is the caller's problem.
        self._inverse = matrix

    def get_inverse(self) -> Optional[Any]:
        """Return the cached inverse, or None if none was stored since the last set_subject()."""
        return self._inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    # short names used by the original cache object
    set = set_subject
    get = get_subject

    def __repr__(self):
        shape = getattr(self._subject, "shape", None)
        return f"<CacheMatrix subject shape={shape}, cached={self.has_inverse}>"


def make_cache_matrix(x: Any = None) -> CacheMatrix:
    """Build a cache around *x* (default: an empty 0x0 matrix)."""
    return CacheMatrix(x)
