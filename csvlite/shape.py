from __future__ import annotations

from typing import Any, Tuple

import numpy as np

ARRAY_TYPES = (list, tuple)


def is_array_like(value: Any) -> bool:
    """Liste, tuple e ndarray (almeno 1D) sono array-like; le stringhe no."""
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, ARRAY_TYPES)


def data_dimensions(data: Any) -> Tuple[int, int]:
    """
    Restituisce (righe, colonne) di un dataset 1D o 2D.

    - input non array-like -> (-1, -1)
    - primo elemento array-like -> (len(data), len(data[0])), senza verificare
      che le altre righe abbiano la stessa lunghezza
    - altrimenti (dataset piatto o vuoto) -> (len(data), -1)
    """
    if not is_array_like(data):
        return -1, -1
    if len(data) and is_array_like(data[0]):
        return len(data), len(data[0])
    return len(data), -1
