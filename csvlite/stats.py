from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from .logger import LogManager
from .shape import is_array_like
from .validation import is_valid_number, to_number

log = LogManager("stats").get_logger()


def _is_flat(dataset: Any) -> bool:
    if not is_array_like(dataset):
        log.debug("Dataset non array-like (%s): risultato 0", type(dataset).__name__)
        return False
    if any(is_array_like(item) for item in dataset):
        log.debug("Dataset annidato (%d elementi): risultato 0", len(dataset))
        return False
    return True


def _numeric_values(dataset: Sequence[Any]) -> np.ndarray:
    """Estrae i soli numeri validi come array float64, nell'ordine originale."""
    return np.array(
        [to_number(item) for item in dataset if is_valid_number(item)],
        dtype=np.float64,
    )


def valid_count(dataset: Any) -> int:
    """Numero di celle che superano is_valid_number() in un dataset piatto."""
    if not _is_flat(dataset):
        return 0
    return sum(1 for item in dataset if is_valid_number(item))


def find_total(dataset: Any) -> float:
    """
    Somma dei valori numerici validi di un dataset piatto.

    Le celle non numeriche contribuiscono 0. Restituisce 0 per input non
    array-like, annidato o vuoto.
    """
    if not _is_flat(dataset):
        return 0
    return float(_numeric_values(dataset).sum())


def calculate_mean(dataset: Any) -> float:
    """Media aritmetica dei numeri validi; 0 se non ce ne sono o l'input non è valido."""
    if not _is_flat(dataset):
        return 0
    values = _numeric_values(dataset)
    if not values.size:
        return 0
    return float(values.mean())


def calculate_median(dataset: Any) -> float:
    """
    Mediana dei numeri validi ordinati in modo crescente.

    Con un numero pari di valori restituisce la media dei due centrali.
    0 se non ci sono numeri validi o l'input non è valido.
    """
    if not _is_flat(dataset):
        return 0
    values = np.sort(_numeric_values(dataset))
    if not values.size:
        return 0
    mid = values.size // 2
    if values.size % 2:
        return float(values[mid])
    return float((values[mid - 1] + values[mid]) / 2)
