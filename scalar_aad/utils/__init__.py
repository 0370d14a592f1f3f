"""
Utilities around the engine: random source, data files and plots.
"""

from .rng import get_rng, set_default_seed
from .data_io import load_csv, save_csv, random_permutation

__all__ = [
    'get_rng', 'set_default_seed',
    'load_csv', 'save_csv', 'random_permutation',
]
