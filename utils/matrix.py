import numpy as np
import scipy.sparse as sp

def is_inverse(A, A_inv, rtol: float = 1e-7, atol: float = 1e-9) -> bool:
    """Check whether ``A @ A_inv`` is the identity within tolerance.

    Shape mismatches return False rather than raising.
    """
    A = A.toarray() if sp.issparse(A) else np.asarray(A)
    A_inv = A_inv.toarray() if sp.issparse(A_inv) else np.asarray(A_inv)
    if A.ndim != 2 or A.shape[0] != A.shape[1] or A.shape != A_inv.shape:
        return False
    return bool(np.allclose(A @ A_inv, np.eye(A.shape[0]), rtol=rtol, atol=atol))
