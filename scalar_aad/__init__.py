# scalar_aad/__init__.py
# Scalar reverse-mode autodiff, small MLPs on top of it, and SGD training

from .aad import Scalar, Op, backward, zero_grad, relu
from .nn import Model, Neuron, Layer, MLP
from .optim import LossConfig, LossFunction, MaxMargin, L2Loss, SGD, SGDConfig
from .utils import load_csv, save_csv, random_permutation

__version__ = "0.1.0"

__all__ = [
    # Engine
    'Scalar',
    'Op',
    'backward',
    'zero_grad',
    'relu',
    # Networks
    'Model',
    'Neuron',
    'Layer',
    'MLP',
    # Training
    'LossConfig',
    'LossFunction',
    'MaxMargin',
    'L2Loss',
    'SGD',
    'SGDConfig',
    # Data
    'load_csv',
    'save_csv',
    'random_permutation',
]
