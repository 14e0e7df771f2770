from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np

from .logger import LogManager
from .shape import data_dimensions, is_array_like
from .validation import is_valid_number, to_number

log = LogManager("transform").get_logger()

WILDCARD = "*"


def _cell(row: Any, index: int) -> Any:
    """Cella all'indice dato, None se la riga è troppo corta o non è una riga."""
    if not is_array_like(row) or index < 0 or index >= len(row):
        return None
    return row[index]


def _matches(cell: Any, pattern: Any) -> bool:
    """Uguaglianza senza coercizione bool <-> numero (True non vale 1)."""
    if isinstance(cell, bool) != isinstance(pattern, bool):
        return False
    return cell == pattern


def convert_to_number(table: Any, col: int) -> int:
    """
    Converte in-place le stringhe numeriche della colonna `col` in float.

    La riga 0 è considerata header e non viene toccata. Le righe troppo corte
    per `col` vengono saltate. Restituisce il numero di celle convertite
    (0 se la tabella non è valida, è vuota, `col` è negativo o la tabella è
    un ndarray con dtype diverso da object).
    """
    if not is_array_like(table) or not len(table) or col < 0:
        log.debug("convert_to_number: input non valido (col=%s)", col)
        return 0
    # Un ndarray tipizzato (es. '<U4') riconvertirebbe il float nel suo dtype
    if isinstance(table, np.ndarray) and table.dtype != object:
        log.debug("convert_to_number: ndarray con dtype %s non modificabile", table.dtype)
        return 0

    converted = 0
    for row in table[1:]:
        value = _cell(row, col)
        if is_valid_number(value):
            row[col] = to_number(value)
            converted += 1

    log.debug("convert_to_number: colonna %d, %d celle convertite", col, converted)
    return converted


def flatten(table: Any) -> List[Any]:
    """Appiattisce una tabella a colonna singola in una lista; [] se le colonne non sono 1."""
    _, cols = data_dimensions(table)
    if cols != 1:
        return []
    return [row[0] for row in table]


def create_slice(
    table: Any,
    column_index: int,
    pattern: Any,
    export_columns: Sequence[int] = (),
) -> List[List[Any]]:
    """
    Seleziona le righe in cui la colonna `column_index` vale `pattern`.

    - pattern "*" seleziona tutte le righe;
    - il confronto è un'uguaglianza senza coercizione ("1" != 1, True != 1);
    - export_columns proietta ogni riga sulle colonne indicate, nell'ordine
      dato (duplicati ammessi); vuoto = riga intera.

    Restituisce sempre una nuova tabella: l'input non viene modificato.
    """
    if not is_array_like(table) or column_index < 0:
        log.debug("create_slice: input non valido (column_index=%s)", column_index)
        return []

    result: List[List[Any]] = []
    for row in table:
        if pattern != WILDCARD and not _matches(_cell(row, column_index), pattern):
            continue
        if len(export_columns):
            result.append([_cell(row, i) for i in export_columns])
        else:
            result.append(list(row) if is_array_like(row) else row)
    return result
