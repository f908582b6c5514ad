import numpy as np
import pytest
import scipy.sparse as sp
from utils.linops import invert

def test_invert_dense():
    A = np.array([[1, 2], [3, 4]], dtype=complex)
    A_inv = invert(A)
    np.testing.assert_allclose(A @ A_inv, np.eye(2), rtol=1e-6, atol=1e-8)

def test_invert_accepts_nested_lists():
    A_inv = invert([[2.0, 0.0], [0.0, 4.0]])
    np.testing.assert_allclose(A_inv, np.diag([0.5, 0.25]))

def test_invert_sparse_returns_sparse():
    A = sp.csr_matrix(np.array([[4.0, 0.0, 1.0], [0.0, 2.0, 0.0], [1.0, 0.0, 3.0]]))
    A_inv = invert(A)
    assert sp.issparse(A_inv)
    np.testing.assert_allclose((A @ A_inv).toarray(), np.eye(3), atol=1e-10)

def test_invert_singular_dense_raises():
    with pytest.raises(np.linalg.LinAlgError):
        invert(np.array([[1.0, 2.0], [2.0, 4.0]]))

def test_invert_singular_sparse_raises():
    A = sp.csc_matrix(np.array([[1.0, 0.0], [0.0, 0.0]]))
    with pytest.raises(np.linalg.LinAlgError):
        invert(A)

@pytest.mark.parametrize("A", [np.ones((2, 3)), sp.csc_matrix(np.ones((3, 2)))])
def test_invert_non_square_raises(A):
    with pytest.raises(ValueError):
        invert(A)

def test_invert_checks_finite_by_default():
    A = np.array([[np.inf, 0.0], [0.0, 1.0]])
    with pytest.raises(ValueError):
        invert(A)

def test_invert_forwards_options_to_scipy(monkeypatch):
    import utils.linops as linops
    seen = {}
    def fake_inv(a, **kwargs):
        seen.update(kwargs)
        return a
    monkeypatch.setattr(linops.la, "inv", fake_inv)
    invert(np.eye(2), check_finite=False, overwrite_a=True)
    assert seen == {"check_finite": False, "overwrite_a": True}
