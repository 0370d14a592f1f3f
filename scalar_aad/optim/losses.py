"""
Loss functions for training Scalar networks.

Both losses share the same recipe:

    total = mean_i( term(model(X_i), y_i) ) + alpha * Σ_p p²

where `term` is the per-sample data loss and the second part is L2
regularization over every model parameter. Each also returns an accuracy:
the fraction of (sampled) rows the model gets right.

- MaxMargin: hinge term relu(1 - y·score), labels in {-1, +1}
- L2Loss:    squared error (y - prediction)², a row counts as correct when
             the error is within `accuracy_tolerance`
"""

import numpy as np
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import reduce
from typing import List, Optional, Sequence, Tuple

from ..aad.core.scalar import Scalar
from ..nn.base_model import Model
from ..utils.data_io import random_permutation


@dataclass
class LossConfig:
    """Constants shared by the loss functions."""
    alpha: float = 1e-4               # L2 regularization strength
    accuracy_tolerance: float = 0.01  # L2Loss: squared error counted as correct


def _sum(terms: List[Scalar]) -> Scalar:
    return reduce(lambda p, c: p.add(c), terms)


class LossFunction(ABC):
    """
    Abstract base class for loss functions.

    Subclasses define the per-sample term and when a sample counts as correct;
    batching, averaging and regularization live here.
    """

    def __init__(self, config: Optional[LossConfig] = None):
        self.config = config or LossConfig()

    @abstractmethod
    def sample_loss(self, score: Scalar, label: float) -> Scalar:
        """Data loss of one sample given the model's first output."""
        pass

    @abstractmethod
    def is_correct(self, score: Scalar, label: float, term: Scalar) -> bool:
        """Whether one sample counts towards accuracy."""
        pass

    def loss(self, model: Model, X: Sequence[Sequence[float]], y: Sequence[float],
             batch_size: Optional[int] = None,
             rng: Optional[np.random.Generator] = None) -> Tuple[Scalar, float]:
        """
        Build the loss graph for (a batch of) the dataset.

        Args:
            model: network to evaluate
            X: feature rows, one per sample
            y: one label per sample
            batch_size: if given, use that many rows drawn without replacement
                from a random permutation; otherwise every row in order
            rng: random source for the permutation

        Returns:
            (total_loss, accuracy)
        """
        Xb, yb = self._select_batch(X, y, batch_size, rng)

        terms = []
        correct = 0
        for features, label in zip(Xb, yb):
            label = float(label)
            # Feed forward on fresh input leaves
            score = model([Scalar(v) for v in features])[0]
            term = self.sample_loss(score, label)
            if self.is_correct(score, label, term):
                correct += 1
            terms.append(term)

        accuracy = correct / len(terms)
        data_loss = _sum(terms).mul(1.0 / len(terms))
        total_loss = data_loss.add(self.regularization(model))

        return total_loss, accuracy

    __call__ = loss

    def regularization(self, model: Model) -> Scalar:
        """alpha * Σ p² over all parameters."""
        return _sum([p.pow(2) for p in model.parameters()]).mul(self.config.alpha)

    @staticmethod
    def _select_batch(X, y, batch_size, rng):
        n = len(X)
        if n == 0:
            raise ValueError("loss() needs at least one sample")
        if len(y) != n:
            raise ValueError(f"X has {n} rows but y has {len(y)} labels")
        if batch_size is None:
            return X, y
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        ri = random_permutation(n, rng)[:batch_size]
        return [X[i] for i in ri], [y[i] for i in ri]


class MaxMargin(LossFunction):
    """
    Support vector machine (max-margin / hinge) loss for binary classification.

    Labels must be -1 or +1. A score of exactly 0 counts as a negative
    prediction.
    """

    def sample_loss(self, score: Scalar, label: float) -> Scalar:
        # relu(1 - y * score)
        return Scalar(1.0).add(score.mul(-label)).relu()

    def is_correct(self, score: Scalar, label: float, term: Scalar) -> bool:
        return (label > 0.0) == (score.val > 0.0)


class L2Loss(LossFunction):
    """Mean squared error for regression."""

    def sample_loss(self, score: Scalar, label: float) -> Scalar:
        return Scalar(label).sub(score).pow(2)

    def is_correct(self, score: Scalar, label: float, term: Scalar) -> bool:
        return term.val <= self.config.accuracy_tolerance
