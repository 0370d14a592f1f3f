# scalar_aad/aad/ops/__init__.py

# Convenience re-exports so users can do: from scalar_aad.aad.ops import mul, relu, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .activation import relu

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "relu",
]
