from __future__ import annotations

from pathlib import Path

import pytest

from wavespectrum.errors import InputDataError
from wavespectrum.readers import read_floats_csv


def test_reads_single_comma_separated_line(tmp_path: Path) -> None:
    path = tmp_path / "values.csv"
    path.write_text("1.5,-2,3e-1,\n", encoding="utf-8")
    buf = read_floats_csv(path)
    assert buf.size == 3
    assert buf.values.tolist() == pytest.approx([1.5, -2.0, 0.3])


def test_reads_values_across_rows(tmp_path: Path) -> None:
    path = tmp_path / "values.csv"
    path.write_text("1, 2\n3\n\n4,\n", encoding="utf-8")
    assert read_floats_csv(path).values.tolist() == [1.0, 2.0, 3.0, 4.0]


def test_stops_at_first_non_numeric_cell(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "values.csv"
    path.write_text("1,2,oops,4\n", encoding="utf-8")
    buf = read_floats_csv(path)
    assert buf.values.tolist() == [1.0, 2.0]
    assert "not a number" in caplog.text


def test_missing_file_raises_input_error(tmp_path: Path) -> None:
    with pytest.raises(InputDataError, match="could not open file"):
        read_floats_csv(tmp_path / "absent.csv")


@pytest.mark.parametrize("content", ["", "\n", "header,\n"])
def test_file_without_numbers_raises_input_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "empty.csv"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InputDataError, match="no data found"):
        read_floats_csv(path)
