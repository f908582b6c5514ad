# core/exceptions.py

class CacheMatrixError(Exception):
    """Base exception for cachematrix errors."""
    pass

class MatrixLoadError(CacheMatrixError):
    """Raised when a subject matrix cannot be read from an input file."""
    pass
