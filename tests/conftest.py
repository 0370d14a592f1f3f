import numpy as np
import pytest

from scalar_aad.nn import Neuron


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def identity_neuron():
    """Linear one-input neuron computing exactly x (w = 1, b = 0)."""
    n = Neuron(1, nonlin=False, rng=np.random.default_rng(0))
    n.w[0].val = np.float64(1.0)
    return n
