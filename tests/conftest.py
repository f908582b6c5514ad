import numpy as np
import pytest
from utils.linops import invert

@pytest.fixture
def well_conditioned():
    return np.array([[4.0, 7.0], [2.0, 6.0]])

@pytest.fixture
def singular():
    # second row is twice the first
    return np.array([[1.0, 2.0], [2.0, 4.0]])

class CountingInverter:
    """Wraps the default inverter and records every call."""
    def __init__(self):
        self.calls = []

    def __call__(self, matrix, *args, **kwargs):
        self.calls.append((matrix, args, kwargs))
        return invert(matrix, *args, **kwargs)

@pytest.fixture
def counting_inverter():
    return CountingInverter()

@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog
