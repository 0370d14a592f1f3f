# scalar_aad/aad/ops/arithmetic.py
import numpy as np
from ..core.node import Op
from ..core.scalar import Scalar


def _as_scalar(x):
    """Ensure x is a Scalar; otherwise wrap it as a fresh leaf."""
    return x if isinstance(x, Scalar) else Scalar(x)


def add(x, y):
    """
    Primitive addition:
      out.val = x.val + y.val
      ∂out/∂x = ∂out/∂y = 1
    """
    x = _as_scalar(x)
    y = _as_scalar(y)
    out = Scalar(x.val + y.val, (x, y), Op.ADD)

    def _backward():
        x.grad += out.grad
        y.grad += out.grad

    out._backward = _backward
    return out


def mul(x, y):
    """
    Primitive multiplication:
      out.val = x.val * y.val
      ∂out/∂x = y.val, ∂out/∂y = x.val
    """
    x = _as_scalar(x)
    y = _as_scalar(y)
    out = Scalar(x.val * y.val, (x, y), Op.MUL)

    def _backward():
        x.grad += y.val * out.grad
        y.grad += x.val * out.grad

    out._backward = _backward
    return out


def pow(x, k):
    """
    Power by a constant exponent:
      out.val = x.val ** k
      ∂out/∂x = k * x^(k-1)

    The exponent is a plain number and receives no gradient. Domains are not
    guarded: a fractional power of a negative base yields nan (float64
    semantics) and the nan flows through forward and backward.
    """
    if isinstance(k, Scalar) or isinstance(k, bool) \
            or not isinstance(k, (int, float, np.integer, np.floating)):
        raise TypeError(f"pow only supports int/float exponents, but got {type(k)}")
    x = _as_scalar(x)
    k = np.float64(k)
    out = Scalar(np.power(x.val, k), (x,), Op.POW)

    def _backward():
        x.grad += k * np.power(x.val, k - 1.0) * out.grad

    out._backward = _backward
    return out


def neg(x):
    """-x, expressed as x * -1."""
    return mul(x, -1.0)


def sub(x, y):
    """x - y, expressed as x + (-y)."""
    return add(x, neg(_as_scalar(y)))


def div(x, y):
    """x / y, expressed as x * y^-1."""
    return mul(x, pow(_as_scalar(y), -1.0))
