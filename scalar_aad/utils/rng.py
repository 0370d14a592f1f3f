"""
Random source shared by weight initialisation and batch sampling.

Every consumer accepts an optional `numpy.random.Generator`; when none is
given the process-wide generator below is used (unseeded).
"""

import numpy as np
from typing import Optional

_default_rng = np.random.default_rng()


def get_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return `rng` if given, otherwise the process-wide generator."""
    return _default_rng if rng is None else rng


def set_default_seed(seed: Optional[int]) -> np.random.Generator:
    """Replace the process-wide generator with one seeded by `seed`."""
    global _default_rng
    _default_rng = np.random.default_rng(seed)
    return _default_rng
