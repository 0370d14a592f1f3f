import numpy as np
import pytest

from scalar_aad.aad import Scalar
from scalar_aad.nn import Layer, MLP, Model, Neuron


def test_neuron(rng):
    n = Neuron(4, rng=rng)

    assert len(n.w) == 4
    assert n.b.val == 0.0
    assert str(n) == 'ReLU Neuron(4)'
    assert str(Neuron(3, nonlin=False, rng=rng)) == 'Linear Neuron(3)'
    assert all(-1.0 <= w.val < 1.0 for w in n.w)
    assert all(w.is_leaf for w in n.parameters())


def test_neuron_output(rng):
    n = Neuron(3, nonlin=False, rng=rng)
    x = [1.0, -1.0, 4.0]
    out = n(x)
    assert len(out) == 1
    expected = sum(w.val * xi for w, xi in zip(n.w, x)) + n.b.val
    assert out[0].val == pytest.approx(expected)

    relu_neuron = Neuron(3, rng=rng)
    assert all(relu_neuron([xi, -xi, 2.0 * xi])[0].val >= 0.0 for xi in (-3.0, 0.5, 2.0))


def test_neuron_needs_inputs():
    with pytest.raises(ValueError):
        Neuron(0)


def test_layer(rng):
    l = Layer(4, 4, rng=rng)

    assert len(l.neurons) == 4
    assert str(l) == 'Layer of [ReLU Neuron(4), ReLU Neuron(4), ReLU Neuron(4), ReLU Neuron(4)]'

    out = l([Scalar(1.0), Scalar(-1.0), Scalar(4.0), Scalar(0.5)])
    assert len(out) == 4


def test_mlp(rng):
    nn = MLP(2, [2, 2, 1], rng=rng)

    assert len(nn.layers) == 3
    assert str(nn) == ('MLP of [Layer of [ReLU Neuron(2), ReLU Neuron(2)], '
                       'Layer of [ReLU Neuron(2), ReLU Neuron(2)], '
                       'Layer of [Linear Neuron(2)]]')
    assert nn.layers[-1].neurons[0].nonlin is False
    assert nn.n_params() == (2 * 2 + 2) + (2 * 2 + 2) + (2 + 1)

    out = nn([1.0, 4.0])
    assert len(out) == 1
    assert isinstance(out[0], Scalar)


def test_mlp_without_nonlinearity(rng):
    nn = MLP(2, [4, 4, 1], nonlin=False, rng=rng)
    assert all(not n.nonlin for layer in nn.layers for n in layer.neurons)
    assert str(nn).count('Linear Neuron') == 9


def test_parameters_are_stable(rng):
    nn = MLP(2, [3, 1], rng=rng)
    first = nn.parameters()
    second = nn.parameters()
    assert len(first) == len(second) == 13
    assert all(p is q for p, q in zip(first, second))


def test_zero_grad(rng):
    nn = MLP(2, [3, 1], rng=rng)
    out = nn([0.5, -2.0])[0]
    (out * out).backward()
    nn.zero_grad()
    assert all(p.grad == 0.0 for p in nn.parameters())


def test_same_seed_same_weights():
    a = MLP(3, [4, 2], rng=np.random.default_rng(7))
    b = MLP(3, [4, 2], rng=np.random.default_rng(7))
    assert [p.val for p in a.parameters()] == [p.val for p in b.parameters()]


def test_backward_reaches_every_parameter(rng):
    nn = MLP(2, [3, 1], nonlin=False, rng=rng)
    out = nn([1.0, 2.0])[0]
    out.backward()
    # linear network: the output bias always has gradient 1
    assert nn.layers[-1].neurons[0].b.grad == 1.0


def test_model_is_abstract():
    with pytest.raises(TypeError):
        Model()
