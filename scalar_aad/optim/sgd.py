"""
Stochastic gradient descent with linear learning-rate decay.

Each step:
    1. build the loss graph (fresh every step)
    2. zero every parameter gradient
    3. backward pass from the total loss
    4. lr = base_step * (1 - 0.9 * step / n_iter)
    5. p.val -= lr * p.grad for every parameter
"""

import numpy as np
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from ..nn.base_model import Model
from .losses import LossFunction


@dataclass
class SGDConfig:
    """Configuration for an SGD training run."""
    base_step: float = 1.0             # initial learning rate
    n_iter: int = 100                  # number of update steps
    batch_size: Optional[int] = None   # None: full dataset every step

    # Logging
    verbose: bool = True
    log_every: int = 1


class SGD:
    """
    Stochastic gradient descent optimizer.

    Usage:
        >>> model = MLP(2, [8, 8, 1])
        >>> history = SGD().train(model, MaxMargin(), X, y,
        ...                       SGDConfig(base_step=0.5, n_iter=50, verbose=False))
        >>> history['final_accuracy']
    """

    @staticmethod
    def learning_rate(base_step: float, step: int, n_iter: int) -> float:
        """Linear decay from base_step down to 0.1 * base_step."""
        return base_step * (1.0 - 0.9 * step / n_iter)

    def train(self,
              model: Model,
              loss_function: LossFunction,
              X: Sequence[Sequence[float]],
              y: Sequence[float],
              config: Optional[SGDConfig] = None,
              rng: Optional[np.random.Generator] = None,
              callback: Optional[Callable[[int, float, float], None]] = None) -> Dict:
        """
        Train `model` in place.

        Args:
            model: network whose parameters are updated
            loss_function: builds (total_loss, accuracy) for the model
            X: feature rows
            y: labels
            config: run configuration (defaults if None)
            rng: random source for batch sampling
            callback: called as callback(step, loss, accuracy) after every step

        Returns:
            Dictionary with:
                - loss_history: total loss per step
                - accuracy_history: accuracy per step
                - learning_rates: learning rate used per step
                - final_loss, final_accuracy: values of the last step
                - n_iterations: steps performed
        """
        config = config or SGDConfig()
        if config.n_iter < 0:
            raise ValueError(f"n_iter must be non-negative, got {config.n_iter}")
        if config.log_every < 1:
            raise ValueError(f"log_every must be positive, got {config.log_every}")

        loss_history = []
        accuracy_history = []
        learning_rates = []

        for i in range(config.n_iter):
            # Forward
            total_loss, acc = loss_function.loss(model, X, y,
                                                 batch_size=config.batch_size, rng=rng)

            # Backward
            model.zero_grad()
            total_loss.backward()

            # Gradient descent
            lr = self.learning_rate(config.base_step, i, config.n_iter)
            for p in model.parameters():
                p.val -= lr * p.grad

            loss_value = float(total_loss.val)
            loss_history.append(loss_value)
            accuracy_history.append(acc)
            learning_rates.append(lr)

            if config.verbose and i % config.log_every == 0:
                print(f"step {i} loss {loss_value:.6f}, accuracy {acc * 100:.1f}%")
            if callback is not None:
                callback(i, loss_value, acc)

        return {
            'loss_history': loss_history,
            'accuracy_history': accuracy_history,
            'learning_rates': learning_rates,
            'final_loss': loss_history[-1] if loss_history else None,
            'final_accuracy': accuracy_history[-1] if accuracy_history else None,
            'n_iterations': config.n_iter,
        }
