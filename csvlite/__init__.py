"""
csvlite: caricamento di file delimitati in tabelle (liste di righe),
validazione/conversione numerica delle celle, statistiche descrittive
(somma, media, mediana) e semplici trasformazioni (flatten, slice).

Le funzioni di report passano i risultati a pandas: Copy-on-Write viene
abilitato globalmente per evitare copie inutili dei DataFrame.
"""

import pandas as pd

# Copy-on-Write: opzionale in Pandas 2.x, sempre attivo (e deprecato come opzione) da Pandas 3.0
PANDAS_MAJOR = int(pd.__version__.split(".")[0])
if PANDAS_MAJOR < 3:
    pd.options.mode.copy_on_write = True

from .loader import file_exists, load_csv  # noqa: E402
from .report import (  # noqa: E402
    ColumnSummary,
    summarize_column,
    summarize_table,
    summary_frame,
    to_dataframe,
)
from .shape import data_dimensions, is_array_like  # noqa: E402
from .stats import calculate_mean, calculate_median, find_total, valid_count  # noqa: E402
from .transform import WILDCARD, convert_to_number, create_slice, flatten  # noqa: E402
from .validation import is_valid_number, to_number  # noqa: E402

__version__ = "1.0.0"

__all__ = [
    "ColumnSummary",
    "WILDCARD",
    "calculate_mean",
    "calculate_median",
    "convert_to_number",
    "create_slice",
    "data_dimensions",
    "file_exists",
    "find_total",
    "flatten",
    "is_array_like",
    "is_valid_number",
    "load_csv",
    "summarize_column",
    "summarize_table",
    "summary_frame",
    "to_dataframe",
    "to_number",
    "valid_count",
]
