# utils/linops.py
from __future__ import annotations
import numpy as np
import scipy.linalg as la
import scipy.sparse as sp
import scipy.sparse.linalg as sla

def _sparse_inv(A: "sp.spmatrix", **kwargs) -> "sp.csc_matrix":
    if A.shape[0] != A.shape[1]:
        raise ValueError(f"expected square matrix, got shape {A.shape}")
    try:
        fac = sla.splu(A.tocsc(), **kwargs)           # SuperLU factorisation
    except RuntimeError as exc:                       # "Factor is exactly singular"
        raise np.linalg.LinAlgError(str(exc)) from exc
    return sp.csc_matrix(fac.solve(np.eye(A.shape[0], dtype=np.result_type(A.dtype, np.float64))))

def invert(A: "sp.spmatrix|np.ndarray", **kwargs) -> "sp.spmatrix|np.ndarray":
    """
    Invert a dense or sparse square matrix.

    Sparse input is LU-factorised with SuperLU (``kwargs`` go to ``splu``) and
    returned as CSC; anything else is turned into an ndarray and handed to
    ``scipy.linalg.inv`` with ``kwargs`` (e.g. ``check_finite``, ``overwrite_a``).

    Raises:
        numpy.linalg.LinAlgError: if A is singular.
        ValueError: if A is not square.
    """
    if sp.issparse(A):
        return _sparse_inv(A, **kwargs)
    return la.inv(np.asarray(A), **kwargs)
