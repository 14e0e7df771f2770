from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .logger import LogManager

log = LogManager("loader").get_logger()

DEFAULT_DELIMITER = ","
DEFAULT_ENCODING = "utf-8"

Table = List[List[str]]


def file_exists(path_str: Union[str, Path]) -> bool:
    """True se il percorso indica un file regolare esistente."""
    return Path(path_str).is_file()


def load_csv(
    path_str: Union[str, Path],
    ignore_rows: Iterable[int] = (),
    ignore_cols: Iterable[int] = (),
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> Tuple[Table, int, int]:
    """
    Carica un file delimitato in una tabella (lista di righe di stringhe).

    - Nessuna gestione di virgolette/escape: ogni delimitatore separa una cella.
    - ignore_rows/ignore_cols: indici della tabella ORIGINALE da escludere.
    - Restituisce (tabella_filtrata, righe_totali, colonne_totali), dove i
      totali si riferiscono ai dati non filtrati (colonne = celle della prima riga).
    - File inesistente -> ([], -1, -1).
    """
    path = Path(path_str)
    if not file_exists(path):
        log.warning("File non trovato: %s", path)
        return [], -1, -1

    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Errore in lettura file (%s): %s", path.name, exc, exc_info=True)
        raise

    data = [line.split(delimiter) for line in text.strip().split("\n")]
    total_rows = len(data)
    total_cols = len(data[0])

    skip_rows = set(ignore_rows)
    skip_cols = set(ignore_cols)
    table = [
        [cell for col_idx, cell in enumerate(row) if col_idx not in skip_cols]
        for row_idx, row in enumerate(data)
        if row_idx not in skip_rows
    ]

    log.info(
        "File caricato: %s (righe=%d, colonne=%d, righe escluse=%d)",
        path.name,
        total_rows,
        total_cols,
        total_rows - len(table),
    )
    return table, total_rows, total_cols
