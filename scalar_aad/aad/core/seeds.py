# scalar_aad/aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .scalar import Scalar
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Scalar; pass through plain numbers unchanged."""
    return x.val if isinstance(x, Scalar) else x


def _ensure_scalar(v: Any, *, name: str) -> Scalar:
    """Wrap a plain value as a leaf Scalar if needed; otherwise return the Scalar itself."""
    return v if isinstance(v, Scalar) else Scalar(v, name=name)


def _as_output(y: Any) -> Scalar:
    if not isinstance(y, Scalar):
        # constant output: every gradient is zero
        y = Scalar(y, name="y")
    return y


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Scalar], Scalar], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Builds a fresh graph and runs one backward pass.
    """
    x = _ensure_scalar(x0, name="x")
    x.grad = 0.0
    y = _as_output(f(x))
    backward(y)
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Scalar]], Scalar],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of a scalar function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE backward pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Scalar} and returning a Scalar
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: numeric}  # gradients in the same key order as `inputs`
    """
    xs: Dict[str, Scalar] = {k: _ensure_scalar(v, name=k) for k, v in inputs.items()}
    for x in xs.values():
        x.grad = 0.0
    y = _as_output(f(xs))
    backward(y)
    return {k: xs[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Scalar]], Scalar],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Scalar] = [_ensure_scalar(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    for x in xs:
        x.grad = 0.0
    y = _as_output(f(xs))
    backward(y)
    return [x.grad for x in xs]


def numerical_grad(f: Callable[[float], float], x0: float, h: float = 1e-5) -> float:
    """Central finite difference (f(x+h) - f(x-h)) / 2h, for checking gradients."""
    return (f(x0 + h) - f(x0 - h)) / (2.0 * h)
