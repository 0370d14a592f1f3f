"""
Network components.

- Model: common interface (evaluate / parameters / zero_grad)
- Neuron, Layer, MLP: fully connected building blocks
"""

from .base_model import Model
from .mlp import Neuron, Layer, MLP

__all__ = ['Model', 'Neuron', 'Layer', 'MLP']
