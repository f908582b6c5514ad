# core/solver.py
from typing import Any, Callable, Optional

from core.cache_matrix import CacheMatrix
from utils.linops import invert
from utils.logging_config import get_logger

logger = get_logger(__name__)


def cache_solve(cache: CacheMatrix, *args, inverter: Optional[Callable[..., Any]] = None, **kwargs) -> Any:
    """
    Return the inverse of ``cache``'s subject, computing it only on a miss.

    Args:
        cache: The CacheMatrix to query and, on a miss, populate.
        *args, **kwargs: Forwarded unchanged to the inverter.
        inverter: Inversion routine; defaults to ``utils.linops.invert``.

    Returns:
        The cached or freshly computed inverse.

    Any error raised by the inverter propagates; the cache is left without
    an inverse so the next call computes again.
    """
    inverse = cache.get_inverse()
    if inverse is not None:
        logger.info("Getting cached inverse.")
        return inverse

    data = cache.get_subject()
    inverse = (inverter or invert)(data, *args, **kwargs)
    cache.set_inverse(inverse)
    return inverse
