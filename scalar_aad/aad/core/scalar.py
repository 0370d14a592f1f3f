# scalar_aad/aad/core/scalar.py
from __future__ import annotations
import numpy as np
from typing import Any, Callable, Optional, Tuple

from .node import Op


def _noop():
    pass


class Scalar:
    """
    A single node of the dynamically built computation graph.

    Attributes
    ----------
    val : np.float64
        Forward (primal) value. Never changed by graph operations; only the
        optimizer writes to a leaf's `val` in place.
    grad : float
        Reverse-mode gradient accumulator, d(root)/d(self) after a backward pass.
    children : Tuple[Scalar, ...]
        Operands that produced this node (empty for leaves). Operands are shared,
        so the graph is a DAG.
    op : Op
        Tag of the operation that produced this node.
    name : Optional[str]
        Optional debug name.
    """

    __slots__ = ("val", "grad", "children", "op", "name", "_backward")

    def __init__(self, val: Any, children: Tuple["Scalar", ...] = (),
                 op: Op = Op.NOP, *, name: Optional[str] = None):
        # Type check: only plain numeric scalars are accepted
        if isinstance(val, bool) or not isinstance(val, (int, float, np.integer, np.floating)):
            raise TypeError(
                f"Scalar only accepts numeric types (int, float), but got {type(val)}"
            )

        # float64 so that undefined powers give nan instead of raising
        self.val = np.float64(val)
        self.grad = 0.0
        self.children = tuple(children)
        self.op = op
        self.name = name
        self._backward: Callable[[], None] = _noop

    def __repr__(self):
        return f"Scalar(val={self.val!r}, grad={self.grad!r})"

    def __float__(self):
        return float(self.val)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    # ---- primitive and derived operations ----
    def add(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def mul(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def pow(self, exponent):
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    def relu(self):
        from ..ops.activation import relu
        return relu(self)

    def neg(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def sub(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def div(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    # ---- reverse mode ----
    def backward(self, validate: bool = False):
        """Populate `grad` on every node reachable from this one."""
        from .engine import backward
        backward(self, validate=validate)

    def zero_grad(self):
        self.grad = 0.0

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        return self.sub(other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        return self.mul(other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        return self.div(other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        return self.neg()

    def __pow__(self, exponent):
        return self.pow(exponent)
