"""
Dataset ingestion, result export and permutation sampling.
"""

import numpy as np
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from .rng import get_rng

PathLike = Union[str, Path]


def load_csv(path: PathLike, header: bool = True) -> np.ndarray:
    """
    Load a comma-separated numeric table.

    Args:
        path: CSV file
        header: skip the first line

    Returns:
        2-D float64 array, one row per line

    Raises:
        ValueError: if a field is not numeric (raised by numpy)
        FileNotFoundError: if the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    return np.loadtxt(path, delimiter=",", skiprows=1 if header else 0,
                      dtype=np.float64, ndmin=2)


def save_csv(path: PathLike, rows: Iterable[Sequence[float]],
             header: Optional[str] = None) -> Path:
    """
    Write rows as comma-space separated text, e.g. `x, y, prediction`.

    Returns:
        the path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    table = np.asarray([[float(v) for v in row] for row in rows], dtype=np.float64)
    np.savetxt(path, np.atleast_2d(table), delimiter=", ", fmt="%s",
               header=header or "", comments="")
    return path


def random_permutation(n: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Uniformly random permutation of 0..n-1 (Fisher-Yates shuffle)."""
    return get_rng(rng).permutation(n)
