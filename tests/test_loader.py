from __future__ import annotations

from pathlib import Path

import pytest

from csvlite.loader import file_exists, load_csv


def test_load_csv_basic(sample_csv_basic: Path) -> None:
    table, total_rows, total_cols = load_csv(str(sample_csv_basic))

    assert total_rows == 5
    assert total_cols == 4
    assert table[0] == ["name", "group", "score", "weight"]
    assert table[1] == ["alpha", "A", "10", "1.5"]
    # Nessuna conversione automatica: le celle restano stringhe
    assert all(isinstance(cell, str) for row in table for cell in row)


def test_load_csv_accepts_path_object(sample_csv_basic: Path) -> None:
    table, total_rows, _ = load_csv(sample_csv_basic)
    assert len(table) == total_rows


def test_load_csv_ignore_rows_and_cols(sample_csv_basic: Path) -> None:
    table, total_rows, total_cols = load_csv(
        str(sample_csv_basic),
        ignore_rows=[0, 3],
        ignore_cols=[1, 3],
    )

    assert table == [["alpha", "10"], ["beta", "20"], ["delta", "40"]]
    # I totali si riferiscono sempre ai dati originali
    assert (total_rows, total_cols) == (5, 4)


def test_load_csv_ignore_out_of_range_indices(write_csv) -> None:
    path = write_csv("a,b\n1,2\n")
    table, total_rows, total_cols = load_csv(str(path), ignore_rows=[7], ignore_cols=[-1, 9])

    assert table == [["a", "b"], ["1", "2"]]
    assert (total_rows, total_cols) == (2, 2)


def test_load_csv_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.csv"
    assert load_csv(str(missing)) == ([], -1, -1)


def test_load_csv_directory_fails_closed(tmp_path: Path) -> None:
    assert load_csv(tmp_path) == ([], -1, -1)


def test_load_csv_trims_surrounding_whitespace(write_csv) -> None:
    path = write_csv("\n\na,b\n1,2\n\n\n")
    table, total_rows, _ = load_csv(str(path))

    assert table == [["a", "b"], ["1", "2"]]
    assert total_rows == 2


def test_load_csv_no_quote_handling(write_csv) -> None:
    """Una virgola fra virgolette è comunque un separatore."""
    path = write_csv('label,value\nx,"1,5"\n')
    table, _, total_cols = load_csv(str(path))

    assert total_cols == 2
    assert table[1] == ["x", '"1', '5"']


def test_load_csv_ragged_rows(write_csv) -> None:
    """Righe di lunghezza diversa non vengono riconciliate."""
    path = write_csv("a,b,c\n1,2\n3,4,5,6\n")
    table, total_rows, total_cols = load_csv(str(path))

    assert (total_rows, total_cols) == (3, 3)
    assert table[1] == ["1", "2"]
    assert table[2] == ["3", "4", "5", "6"]


def test_load_csv_empty_file(write_csv) -> None:
    path = write_csv("")
    assert load_csv(str(path)) == ([[""]], 1, 1)


def test_load_csv_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "windows.csv"
    path.write_bytes(b"a,b\r\n1,2\r\n")

    table, _, _ = load_csv(str(path))
    assert table == [["a", "b"], ["1", "2"]]


def test_load_csv_semicolon_delimiter(write_csv) -> None:
    path = write_csv("x;y;z\n10;20;30\n40;50;60\n")
    table, total_rows, total_cols = load_csv(str(path), delimiter=";")

    assert (total_rows, total_cols) == (3, 3)
    assert table[2] == ["40", "50", "60"]


def test_load_csv_invalid_encoding_raises(tmp_path: Path) -> None:
    path = tmp_path / "binary.csv"
    path.write_bytes(b"a,b\n\xff\xfe,\x80\n")

    with pytest.raises(UnicodeDecodeError):
        load_csv(str(path))


def test_file_exists(sample_csv_basic: Path, tmp_path: Path) -> None:
    assert file_exists(sample_csv_basic) is True
    assert file_exists(str(sample_csv_basic)) is True
    assert file_exists(tmp_path / "nope.csv") is False
    assert file_exists(tmp_path) is False
