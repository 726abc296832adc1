"""
Record normalization.

Turns positional text rows into a findings frame with spreadsheet-style
column names, trimmed cells and explicit nulls for empty cells.
"""

import pandas as pd
from openpyxl.utils import get_column_letter

from vulnreport.ingestion.base import RawTable
from vulnreport.processing.models import Record
from vulnreport.schemas.findings import findings_schema
from vulnreport.utils.logging import get_logger

log = get_logger(__name__)


def column_names(count: int) -> list[str]:
    """Spreadsheet column names for the first `count` positions (A, B, ..., Z, AA, ...)."""
    return [get_column_letter(i) for i in range(1, count + 1)]


def _clean_cell(value: str) -> str | None:
    cleaned = value.strip()
    return cleaned or None


def normalize_rows(table: RawTable) -> pd.DataFrame:
    """
    Build the findings frame for a merged table.

    The column count is taken from the first data row. Cells beyond it are
    dropped and short rows leave their trailing columns null; neither is
    an error. Empty cells hold None, cells past the end of a short row
    hold pd.NA so that to_records can leave them out.

    Args:
        table: Merged table (headers are not used for naming).

    Returns:
        Object-dtype DataFrame, one row per data row, validated against
        the findings schema.
    """
    rows = table.rows
    count = len(rows[0]) if rows else 0
    names = column_names(count)

    data = [
        [_clean_cell(cell) for cell in row[:count]] + [pd.NA] * (count - len(row))
        for row in rows
    ]
    if names:
        df = pd.DataFrame(data, columns=names, dtype=object)
    else:
        df = pd.DataFrame(index=pd.RangeIndex(len(rows)))

    log.debug("Normalized records", records=len(df), columns=names)
    return findings_schema(names).validate(df)


def to_records(df: pd.DataFrame) -> list[Record]:
    """
    Convert a findings frame to records in row order.

    Empty cells map to None; columns a short row never reached are absent
    from its record.
    """
    if df.columns.empty:
        return [{} for _ in range(len(df))]
    return [
        {
            column: None if pd.isna(value) else value
            for column, value in row.items()
            if value is not pd.NA
        }
        for row in df.astype(object).to_dict(orient="records")
    ]
