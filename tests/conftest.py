"""Configurazione pytest e fixtures condivise."""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, List

import pytest

# I log dei test finiscono in una cartella temporanea, non in logs/ del progetto.
# Va impostato prima che csvlite venga importato dai moduli di test.
os.environ.setdefault("CSVLITE_LOG_DIR", tempfile.mkdtemp(prefix="csvlite_logs_"))


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    """Scrive un file di testo in tmp_path e ne restituisce il percorso."""
    def _write(content: str, name: str = "data.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_csv_basic(write_csv) -> Path:
    """CSV base con header, una colonna testuale e due numeriche."""
    return write_csv(
        "name,group,score,weight\n"
        "alpha,A,10,1.5\n"
        "beta,B,20,2.5\n"
        "gamma,A,x,3.5\n"
        "delta,B,40,n/a\n"
    )


@pytest.fixture
def grouped_table() -> List[List[str]]:
    """Tabella in memoria con header alla riga 0."""
    return [
        ["name", "group", "score"],
        ["a", "A", "1"],
        ["b", "B", "2"],
        ["c", "A", "3"],
    ]
