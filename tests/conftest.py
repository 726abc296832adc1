"""Pytest configuration and shared fixtures."""

from collections.abc import Callable, Iterator
from pathlib import Path

import openpyxl
import pytest
import structlog

from vulnreport.ingestion.base import RawTable, TableReader
from vulnreport.utils.logging import configure_library_defaults

HEADERS = [
    "编号",
    "问题名称",
    "规则",
    "严重性",
    "状态",
    "模块",
    "行号",
    "工具",
    "文件路径",
    "相关代码",
    "漏洞说明",
    "分类",
    "CWE",
    "整改建议",
]


class MemoryReader(TableReader):
    """Reader serving rows from a dict, recording the sources it was asked for."""

    def __init__(self, tables: dict[str, list[list[str]]]) -> None:
        self.tables = tables
        self.requested: list[str] = []

    def _read_rows(self, path: Path) -> list[list[str]]:
        self.requested.append(str(path))
        return self.tables[str(path)]


def finding(
    number: str,
    problem: str,
    severity: str,
    *,
    path: str = "root/src/app.c",
    code: str = "strcpy(buf, input);",
) -> list[str]:
    """A full-width finding row in the standard 14-column layout."""
    return [
        number,
        problem,
        "rule-1",
        severity,
        "open",
        "core",
        "42",
        "scanner",
        path,
        code,
        f"{problem} may be exploitable",
        "security",
        "CWE-120",
        f"Fix {problem}",
    ]


@pytest.fixture
def memory_reader() -> Callable[[dict[str, list[list[str]]]], MemoryReader]:
    """Factory for in-memory readers."""
    return MemoryReader


@pytest.fixture
def sample_table() -> RawTable:
    """Merged table with duplicates and mixed severities."""
    rows = [
        finding("1", "缓冲区溢出", "高危"),
        finding("2", "SQL注入", "中危"),
        finding("1", "缓冲区溢出", "高危"),  # exact duplicate of row 1
        finding("3", "缓冲区溢出", "高危", path="root/src/net.c"),
        finding("4", "日志泄露", "低危"),
        finding("5", "SQL注入", "中危"),
    ]
    return RawTable(headers=list(HEADERS), rows=rows, source="sample.xlsx")


@pytest.fixture
def write_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing rows to an .xlsx file in tmp_path."""

    def _write(name: str, rows: list[list[object]]) -> Path:
        wb = openpyxl.Workbook()
        ws = wb.active
        for row in rows:
            ws.append(row)
        path = tmp_path / name
        wb.save(path)
        return path

    return _write


@pytest.fixture(autouse=True)
def _restore_logging_defaults() -> Iterator[None]:
    """Undo logging configuration made by a test, e.g. through the CLI callback."""
    yield
    structlog.reset_defaults()
    configure_library_defaults()
