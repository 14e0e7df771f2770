"""
Report descrittivo per colonna di una tabella caricata con load_csv().

Ogni colonna viene estratta con create_slice() + flatten() e aggregata con
le funzioni di stats; il risultato può essere passato a pandas per la
visualizzazione o l'esportazione.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from .logger import LogManager
from .shape import data_dimensions, is_array_like
from .stats import calculate_mean, calculate_median, find_total, valid_count
from .transform import WILDCARD, create_slice, flatten
from .validation import is_valid_number

log = LogManager("report").get_logger()

MAX_NON_NUMERIC_EXAMPLES = 5
SUMMARY_COLUMNS = ("name", "index", "total", "valid", "total_sum", "mean", "median")


@dataclass
class ColumnSummary:
    name: str
    index: int
    total: int
    valid: int
    total_sum: float
    mean: float
    median: float
    examples_non_numeric: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "index": self.index,
            "total": self.total,
            "valid": self.valid,
            "total_sum": self.total_sum,
            "mean": self.mean,
            "median": self.median,
            "examples_non_numeric": self.examples_non_numeric,
        }


def _default_name(index: int) -> str:
    return f"Column_{index}"


def summarize_column(table: Any, col: int, header: bool = True) -> ColumnSummary:
    """Riassume la colonna `col`; con header=True la riga 0 fornisce il nome."""
    column = flatten(create_slice(table, 0, WILDCARD, [col]))

    name = _default_name(col)
    values = column
    if header and column:
        if column[0] is not None:
            name = str(column[0]).strip() or name
        values = column[1:]

    examples = [
        str(value)
        for value in values
        if value is not None and not is_valid_number(value)
    ][:MAX_NON_NUMERIC_EXAMPLES]

    return ColumnSummary(
        name=name,
        index=col,
        total=len(values),
        valid=valid_count(values),
        total_sum=find_total(values),
        mean=calculate_mean(values),
        median=calculate_median(values),
        examples_non_numeric=examples,
    )


def summarize_table(
    table: Any,
    columns: Optional[Iterable[int]] = None,
    header: bool = True,
) -> List[ColumnSummary]:
    """
    Restituisce un ColumnSummary per ogni colonna richiesta.

    - columns=None -> tutte le colonne della prima riga.
    - tabella non array-like o vuota -> [].
    """
    if not is_array_like(table) or not len(table):
        log.debug("summarize_table: tabella non valida o vuota")
        return []

    if columns is None:
        _, cols = data_dimensions(table)
        columns = range(max(cols, 0))

    summaries = [summarize_column(table, col, header=header) for col in columns]
    log.info(
        "Report generato: %d colonne, %d con valori numerici",
        len(summaries),
        sum(1 for s in summaries if s.valid),
    )
    return summaries


def summary_frame(summaries: Iterable[ColumnSummary]) -> pd.DataFrame:
    """DataFrame con una riga per colonna, indicizzato per nome (senza esempi)."""
    records = [
        {key: value for key, value in s.to_dict().items() if key in SUMMARY_COLUMNS}
        for s in summaries
    ]
    frame = pd.DataFrame(records, columns=list(SUMMARY_COLUMNS))
    return frame.set_index("name")


def to_dataframe(table: Any, header: bool = True) -> pd.DataFrame:
    """
    Converte una tabella in DataFrame.

    Con header=True la riga 0 diventa l'intestazione; le colonne senza
    intestazione ricevono nomi 'Column_<i>'. Le righe corte vengono completate
    da pandas con valori mancanti.
    """
    if not is_array_like(table) or not len(table):
        return pd.DataFrame()

    rows = [list(row) if is_array_like(row) else [row] for row in table]
    labels: List[str] = []
    if header:
        labels = [str(cell) for cell in rows[0]]
        rows = rows[1:]

    frame = pd.DataFrame(rows)
    if len(labels) > frame.shape[1]:
        frame = frame.reindex(columns=range(len(labels)))
    frame.columns = labels + [
        _default_name(i) for i in range(len(labels), frame.shape[1])
    ]
    return frame
