# scalar_aad/aad/__init__.py
# Reverse-mode automatic differentiation over scalars

from .core.node import Op
from .core.scalar import Scalar
from .core.engine import (
    topological_order,
    backward,
    zero_grad,
)
from .core.seeds import grad, grads, grads_list, numerical_grad, value
from .core.graph_utils import get_graph_stats, print_graph_summary, has_cycle

# Ensure the operation modules are loaded
from . import ops
from .ops import relu

__all__ = [
    # Core
    'Op',
    'Scalar',
    # Engine
    'topological_order',
    'backward',
    'zero_grad',
    # Convenience
    'grad',
    'grads',
    'grads_list',
    'numerical_grad',
    'value',
    'relu',
    # Diagnostics
    'get_graph_stats',
    'print_graph_summary',
    'has_cycle',
]
