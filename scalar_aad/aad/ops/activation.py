# scalar_aad/aad/ops/activation.py
import numpy as np
from ..core.node import Op
from ..core.scalar import Scalar
from .arithmetic import _as_scalar


def relu(x):
    """
    Primitive: out.val = max(0, x.val).

    The local partial is 1 where the output is strictly positive and 0
    otherwise, so the kink at x == 0 passes no gradient.
    """
    x = _as_scalar(x)
    out = Scalar(np.float64(0.0) if x.val < 0 else x.val, (x,), Op.RELU)

    def _backward():
        x.grad += float(out.val > 0) * out.grad

    out._backward = _backward
    return out
