"""
Training: loss functions and the SGD optimizer.
"""

from .losses import LossConfig, LossFunction, MaxMargin, L2Loss
from .sgd import SGD, SGDConfig

__all__ = [
    'LossConfig',
    'LossFunction',
    'MaxMargin',
    'L2Loss',
    'SGD',
    'SGDConfig',
]
