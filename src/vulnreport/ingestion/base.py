"""
Base classes and utilities for reading finding tables.

Provides the RawTable container and the reader contract every source
format implements.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from vulnreport.errors import SourceError
from vulnreport.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class RawTable:
    """
    Header row and data rows of one source, as text cells.

    Rows are not required to have the same length as the header;
    spreadsheets commonly drop trailing empty cells.

    Attributes:
        headers: Header cells in column order.
        rows: Data rows in source order.
        source: Identifier of the source the table came from.
    """

    headers: list[str]
    rows: list[list[str]] = field(default_factory=list)
    source: str = ""

    @property
    def row_count(self) -> int:
        """Number of data rows (header excluded)."""
        return len(self.rows)


class TableReader(ABC):
    """
    Abstract base class for table readers.

    Subclasses return every row of the source, header first; this class
    rejects empty and header-only sources uniformly.
    """

    @abstractmethod
    def _read_rows(self, path: Path) -> list[list[str]]:
        """Read all rows of a source as text cells. Implemented by subclasses."""
        ...

    def read(self, source: str | Path) -> RawTable:
        """
        Read a source into a RawTable.

        Args:
            source: Path of the source file.

        Returns:
            RawTable with the first row as headers.

        Raises:
            SourceError: If the source is missing, unreadable, empty,
                or contains only a header row.
        """
        path = Path(source)
        name = str(source)
        log.debug("Reading source", reader=self.__class__.__name__, source=name)

        rows = self._read_rows(path)

        if not rows:
            raise SourceError(name, "source is empty")
        if len(rows) == 1:
            raise SourceError(name, "source has only a header row and no data rows")

        table = RawTable(headers=rows[0], rows=rows[1:], source=name)
        log.info(
            "Read source",
            source=name,
            columns=len(table.headers),
            rows=table.row_count,
        )
        return table
