"""
Fully connected networks built from Scalars.

- Neuron: sum(w_i * x_i) + b, optionally followed by ReLU
- Layer:  nout neurons applied to the same inputs
- MLP:    layers chained in order; every layer but the last uses ReLU

Example:
    >>> model = MLP(2, [8, 8, 1])
    >>> out = model([1.0, 4.0])
    >>> len(out)
    1
"""

import numpy as np
from functools import reduce
from typing import List, Optional, Sequence

from ..aad.core.scalar import Scalar
from ..aad.ops.arithmetic import _as_scalar
from ..utils.rng import get_rng
from .base_model import Model


class Neuron(Model):
    """
    A single neuron.

    Weights start uniform in [-1, 1), the bias at 0.

    Args:
        nin: number of inputs
        nonlin: apply ReLU to the weighted sum
        rng: random source for the weights (process-wide default if None)
    """

    def __init__(self, nin: int, nonlin: bool = True,
                 rng: Optional[np.random.Generator] = None):
        if nin < 1:
            raise ValueError(f"Neuron needs at least one input, got nin={nin}")
        rng = get_rng(rng)
        self.w = [Scalar(rng.uniform(-1.0, 1.0)) for _ in range(nin)]
        self.b = Scalar(0.0)
        self.nonlin = nonlin

    def evaluate(self, x: Sequence) -> List[Scalar]:
        # w · x + b
        act = reduce(lambda p, c: p.add(c),
                     (wi.mul(_as_scalar(xi)) for wi, xi in zip(self.w, x)))
        act = act.add(self.b)
        return [act.relu() if self.nonlin else act]

    def parameters(self) -> List[Scalar]:
        return self.w + [self.b]

    def __repr__(self):
        return f"{'ReLU' if self.nonlin else 'Linear'} Neuron({len(self.w)})"


class Layer(Model):
    """nout neurons with nin inputs each and a shared nonlinearity flag."""

    def __init__(self, nin: int, nout: int, nonlin: bool = True,
                 rng: Optional[np.random.Generator] = None):
        rng = get_rng(rng)
        self.neurons = [Neuron(nin, nonlin=nonlin, rng=rng) for _ in range(nout)]

    def evaluate(self, x: Sequence) -> List[Scalar]:
        x = [_as_scalar(xi) for xi in x]
        return [n.evaluate(x)[0] for n in self.neurons]

    def parameters(self) -> List[Scalar]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Model):
    """
    Multi-layer perceptron with layer sizes [nin] + nouts.

    With nonlin=True every hidden layer uses ReLU and the final layer stays
    linear; with nonlin=False no layer uses ReLU.
    """

    def __init__(self, nin: int, nouts: Sequence[int], nonlin: bool = True,
                 rng: Optional[np.random.Generator] = None):
        rng = get_rng(rng)
        sz = [nin] + list(nouts)
        last = len(nouts) - 1
        self.layers = [Layer(sz[i], sz[i + 1], nonlin=nonlin and i != last, rng=rng)
                       for i in range(len(nouts))]

    def evaluate(self, x: Sequence) -> List[Scalar]:
        for layer in self.layers:
            x = layer.evaluate(x)
        return x

    def parameters(self) -> List[Scalar]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
