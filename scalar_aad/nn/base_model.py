"""
Base abstract class for network components.

Neuron, Layer and MLP share one interface so that loss functions and the
optimizer can treat any of them as "a model":

    outputs = model(inputs)        # forward pass, list of Scalars
    model.parameters()             # trainable leaves, stable order
    model.zero_grad()              # reset gradients of those leaves
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..aad.core.scalar import Scalar
from ..aad.core.engine import zero_grad


class Model(ABC):
    """
    Abstract base class for everything built out of Scalars with trainable
    parameters.
    """

    @abstractmethod
    def evaluate(self, x: Sequence) -> List[Scalar]:
        """
        Forward pass.

        Args:
            x: input features, Scalars or plain numbers (coerced to leaves)

        Returns:
            list of output Scalars
        """
        pass

    @abstractmethod
    def parameters(self) -> List[Scalar]:
        """
        All trainable leaves owned by this component.

        The order is stable across calls and exhaustive; it is used both for
        the descent step and for L2 regularization.
        """
        pass

    def __call__(self, x: Sequence) -> List[Scalar]:
        return self.evaluate(x)

    def zero_grad(self):
        zero_grad(self.parameters())

    def n_params(self) -> int:
        return len(self.parameters())
