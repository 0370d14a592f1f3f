# scalar_aad/aad/core/__init__.py

"""
Core public API for the scalar AAD package.

This module exposes the minimal set of symbols that users of the engine should
import from `scalar_aad.aad.core`.

Exports:
    Scalar            : Graph node holding one value and its gradient.
    Op                : Operator tag recorded on each node.
    topological_order : Leaves-first ordering of a graph.
    backward          : Run a single reverse pass to accumulate gradients.
    zero_grad         : Reset gradients of the given nodes to zero.
    grad, grads, grads_list : Convenience: gradients of a function at a point.
    numerical_grad    : Central finite difference, for checks.
    value             : Convenience: extract the primal value from a Scalar.
"""

from .node import Op
from .scalar import Scalar
from .engine import topological_order, backward, zero_grad
from .seeds import grad, grads, grads_list, numerical_grad, value

__all__ = [
    "Op", "Scalar",
    "topological_order", "backward", "zero_grad",
    "grad", "grads", "grads_list", "numerical_grad", "value",
]
