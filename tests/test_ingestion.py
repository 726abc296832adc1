"""Tests for reading finding spreadsheets."""

from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path

import pytest

from conftest import HEADERS, finding
from vulnreport.errors import SourceError
from vulnreport.ingestion import WorkbookReader
from vulnreport.ingestion.workbook import cell_to_text
from vulnreport.pipeline import run_pipeline


class TestCellToText:
    """Tests for cell_to_text."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            ("高危", "高危"),
            (42, "42"),
            (42.0, "42"),
            (2.5, "2.5"),
            (True, "true"),
            (datetime(2024, 3, 1, 9, 30), "2024-03-01 09:30:00"),
            (date(2024, 3, 1), "2024-03-01"),
        ],
    )
    def test_conversion(self, value: object, expected: str) -> None:
        """Test cell values render as text."""
        assert cell_to_text(value) == expected


class TestWorkbookReader:
    """Tests for WorkbookReader."""

    def test_read_xlsx(self, write_workbook: Callable[..., Path]) -> None:
        """Test header and data rows of the first worksheet."""
        path = write_workbook(
            "scan.xlsx",
            [HEADERS, finding("1", "缓冲区溢出", "高危"), finding("2", "SQL注入", "中危")],
        )

        table = WorkbookReader().read(path)

        assert table.headers == HEADERS
        assert table.row_count == 2
        assert table.rows[1][1] == "SQL注入"
        assert table.source == str(path)

    def test_numeric_cells_as_text(self, write_workbook: Callable[..., Path]) -> None:
        """Test numeric cells read back without a float suffix."""
        path = write_workbook("scan.xlsx", [["编号", "行号"], [7, 120]])
        table = WorkbookReader().read(path)
        assert table.rows == [["7", "120"]]

    def test_empty_cells_as_empty_text(self, write_workbook: Callable[..., Path]) -> None:
        """Test empty cells inside a row read as ''."""
        path = write_workbook("scan.xlsx", [["A", "B", "C"], ["x", None, "z"]])
        table = WorkbookReader().read(path)
        assert table.rows == [["x", "", "z"]]

    def test_header_only_workbook(self, write_workbook: Callable[..., Path]) -> None:
        """Test a workbook without data rows is rejected."""
        path = write_workbook("scan.xlsx", [HEADERS])
        with pytest.raises(SourceError, match="only a header row"):
            WorkbookReader().read(path)

    def test_read_csv(self, tmp_path: Path) -> None:
        """Test CSV exports read every cell as text."""
        path = tmp_path / "scan.csv"
        path.write_text("编号,问题名称,严重性\n001,SQL注入,中危\n002,,高危\n", encoding="utf-8")

        table = WorkbookReader().read(path)

        assert table.headers == ["编号", "问题名称", "严重性"]
        assert table.rows == [["001", "SQL注入", "中危"], ["002", "", "高危"]]

    def test_read_csv_ragged_rows(self, tmp_path: Path) -> None:
        """Test rows wider than the first line are cut instead of rejected."""
        path = tmp_path / "scan.csv"
        path.write_text("A,B,C,D\nx,P1,,High\ny,P2,,Low,extra\nz,P3\n", encoding="utf-8")

        table = WorkbookReader().read(path)

        assert table.headers == ["A", "B", "C", "D"]
        assert table.rows == [
            ["x", "P1", "", "High"],
            ["y", "P2", "", "Low"],
            ["z", "P3", "", ""],
        ]

    def test_ragged_csv_runs_through_pipeline(self, tmp_path: Path) -> None:
        """Test a ragged CSV export is merged like a workbook would be."""
        path = tmp_path / "scan.csv"
        path.write_text("A,B,C,D\nx,P1,,High\ny,P2,,Low,extra\n", encoding="utf-8")

        run = run_pipeline([path])

        assert run.result.total_records == 2
        assert [key for key, _ in run.result.ordered_groups] == ["P1|High", "P2|Low"]

    def test_read_csv_with_bom(self, tmp_path: Path) -> None:
        """Test a UTF-8 BOM does not leak into the first header."""
        path = tmp_path / "scan.csv"
        path.write_text("编号,级别\n1,高\n", encoding="utf-8-sig")
        assert WorkbookReader().read(path).headers == ["编号", "级别"]

    def test_read_csv_gb18030(self, tmp_path: Path) -> None:
        """Test CSV files saved in GB18030 are decoded."""
        path = tmp_path / "scan.csv"
        path.write_bytes("编号,问题名称\n1,缓冲区溢出\n".encode("gb18030"))

        table = WorkbookReader().read(path)

        assert table.headers == ["编号", "问题名称"]
        assert table.rows == [["1", "缓冲区溢出"]]

    def test_empty_csv(self, tmp_path: Path) -> None:
        """Test an empty file is rejected as empty."""
        path = tmp_path / "scan.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(SourceError, match="source is empty"):
            WorkbookReader().read(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file names the source."""
        path = tmp_path / "missing.xlsx"
        with pytest.raises(SourceError, match="file not found") as exc_info:
            WorkbookReader().read(path)
        assert exc_info.value.source == str(path)

    def test_unsupported_format(self, tmp_path: Path) -> None:
        """Test other file types are rejected."""
        path = tmp_path / "scan.txt"
        path.write_text("a,b\n1,2\n", encoding="utf-8")
        with pytest.raises(SourceError, match="unsupported file format: .txt"):
            WorkbookReader().read(path)

    def test_corrupt_workbook(self, tmp_path: Path) -> None:
        """Test a file that is not a workbook is reported as unreadable."""
        path = tmp_path / "scan.xlsx"
        path.write_bytes(b"not a zip archive")
        with pytest.raises(SourceError, match="cannot open workbook"):
            WorkbookReader().read(path)
