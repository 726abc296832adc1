"""
Spreadsheet ingestion.

Reads the first worksheet of an Excel workbook, or a CSV export, into
rows of text cells.
"""

import zipfile
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

import openpyxl
import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from vulnreport.errors import SourceError
from vulnreport.ingestion.base import TableReader
from vulnreport.utils.logging import get_logger

log = get_logger(__name__)

EXCEL_SUFFIXES = frozenset({".xlsx", ".xlsm"})
CSV_SUFFIXES = frozenset({".csv"})


def cell_to_text(value: Any) -> str:
    """
    Render a worksheet cell value as text.

    Empty cells become "", integral floats lose their ".0" suffix so that
    numeric identifiers compare equal to their typed-in form.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


class WorkbookReader(TableReader):
    """Reader for .xlsx/.xlsm workbooks and .csv exports."""

    def _read_rows(self, path: Path) -> list[list[str]]:
        """Dispatch on file extension."""
        if not path.is_file():
            raise SourceError(str(path), "file not found")

        suffix = path.suffix.lower()

        if suffix in EXCEL_SUFFIXES:
            return self._read_excel(path)
        if suffix in CSV_SUFFIXES:
            return self._read_csv(path)

        raise SourceError(str(path), f"unsupported file format: {suffix or '(none)'}")

    def _read_excel(self, path: Path) -> list[list[str]]:
        """Read the first worksheet of a workbook in read-only mode."""
        try:
            wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
            raise SourceError(str(path), f"cannot open workbook: {e}") from e

        try:
            if not wb.sheetnames:
                raise SourceError(str(path), "workbook has no worksheets")
            ws = wb[wb.sheetnames[0]]
            log.debug("Reading worksheet", source=str(path), sheet=ws.title)
            return [
                [cell_to_text(value) for value in row]
                for row in ws.iter_rows(values_only=True)
            ]
        finally:
            wb.close()

    def _read_csv(self, path: Path) -> list[list[str]]:
        """
        Read a CSV export with every cell kept as text.

        Try UTF-8 (with BOM) first, fall back to GB18030 for exports
        saved by Chinese-locale spreadsheet applications. Rows with more
        fields than the first line are kept with the extra cells cut off.
        """
        wide_rows: list[list[str]] = []

        def _keep_wide_row(fields: list[str]) -> list[str]:
            wide_rows.append(fields)
            return fields

        read_kwargs: dict[str, Any] = {
            "header": None,
            "dtype": str,
            "keep_default_na": False,
            "skip_blank_lines": False,
            "engine": "python",
            "on_bad_lines": _keep_wide_row,
        }
        try:
            try:
                df = pd.read_csv(path, encoding="utf-8-sig", **read_kwargs)
            except UnicodeDecodeError:
                log.warning(
                    "UTF-8 decode failed, retrying with GB18030",
                    source=str(path),
                )
                wide_rows.clear()
                df = pd.read_csv(path, encoding="gb18030", **read_kwargs)
        except pd.errors.EmptyDataError:
            return []
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise SourceError(str(path), f"cannot parse CSV: {e}") from e

        if wide_rows:
            log.warning(
                "Cells beyond the first line's width were dropped",
                source=str(path),
                rows=len(wide_rows),
            )
        return df.fillna("").astype(str).to_numpy().tolist()
