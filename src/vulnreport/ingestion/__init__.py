"""
Data ingestion layer for reading and merging finding spreadsheets.

All source reading happens through this module so that empty sources and
header mismatches are rejected at the system boundary.
"""

from vulnreport.ingestion.base import RawTable, TableReader
from vulnreport.ingestion.merge import TableMerger, validate_headers
from vulnreport.ingestion.workbook import WorkbookReader

__all__ = ["RawTable", "TableMerger", "TableReader", "WorkbookReader", "validate_headers"]
