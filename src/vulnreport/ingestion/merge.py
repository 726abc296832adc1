"""
Multi-source table merging.

Checks that every source shares the header shape of the first one and
concatenates their data rows in source order.
"""

from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from vulnreport.errors import ValidationError
from vulnreport.ingestion.base import RawTable, TableReader
from vulnreport.utils.logging import get_logger

log = get_logger(__name__)


def validate_headers(reference: RawTable, table: RawTable) -> None:
    """
    Check that a table's headers match the reference headers.

    Headers match when they have the same count and every pair of
    corresponding cells is equal after trimming whitespace.

    Args:
        reference: Table whose headers are authoritative.
        table: Table to check.

    Raises:
        ValidationError: On a count mismatch, or at the first column whose
            text differs (reported 1-based, with both values).
    """
    if len(table.headers) != len(reference.headers):
        raise ValidationError(
            f"Source {table.source} has {len(table.headers)} header columns, "
            f"expected {len(reference.headers)} as in {reference.source}",
            source=table.source,
            expected=len(reference.headers),
            actual=len(table.headers),
        )

    for index, (current, expected) in enumerate(
        zip(table.headers, reference.headers), start=1
    ):
        if current.strip() != expected.strip():
            raise ValidationError(
                f"Source {table.source} header column {index} is {current!r}, "
                f"expected {expected!r} as in {reference.source}",
                source=table.source,
                column=index,
                expected=expected,
                actual=current,
            )


def _require_data(table: RawTable) -> None:
    """Reject tables without data rows from readers that do not check it."""
    if not table.headers and not table.rows:
        msg = f"Source {table.source} yielded no rows"
        raise ValidationError(msg, source=table.source)
    if not table.rows:
        msg = f"Source {table.source} has only a header row and no data rows"
        raise ValidationError(msg, source=table.source)


def _prepare(source: str | Path, table: RawTable) -> RawTable:
    """Name a table after its source if the reader left it unnamed, and require data."""
    if not table.source:
        table.source = str(source)
    _require_data(table)
    return table


class TableMerger:
    """
    Merges several sources into one RawTable under a common header.

    Reads can run in a thread pool; results are always re-sequenced by
    source position, so the merged row order and the reported error are
    the same as for a sequential merge.
    """

    def __init__(
        self,
        reader: TableReader,
        *,
        parallel: bool = False,
        max_workers: int = 4,
    ) -> None:
        """
        Initialize table merger.

        Args:
            reader: Reader used to materialize each source.
            parallel: Whether to read sources concurrently.
            max_workers: Maximum number of concurrent reads.
        """
        self.reader = reader
        self.parallel = parallel
        self.max_workers = max_workers

    def merge(self, sources: Sequence[str | Path]) -> RawTable:
        """
        Read, validate and concatenate sources.

        Args:
            sources: Source identifiers in merge order.

        Returns:
            RawTable with the first source's headers and all data rows.

        Raises:
            ValidationError: If no sources are given or headers disagree.
            SourceError: If a source cannot be read.
        """
        if not sources:
            msg = "no sources provided"
            raise ValidationError(msg)

        log.info("Merging sources", n_sources=len(sources), parallel=self.parallel)

        if self.parallel and len(sources) > 1:
            tables = (future.result() for future in self._read_parallel(sources))
        else:
            tables = (self.reader.read(source) for source in sources)

        pairs = zip(sources, tables)

        reference = _prepare(*next(pairs))
        log.debug("Reference headers", source=reference.source, headers=reference.headers)
        merged_rows = list(reference.rows)

        for source, table in pairs:
            table = _prepare(source, table)
            validate_headers(reference, table)
            merged_rows.extend(table.rows)
            log.debug("Merged source", source=table.source, rows=table.row_count)

        log.info("Merge complete", rows=len(merged_rows))

        return RawTable(
            headers=list(reference.headers),
            rows=merged_rows,
            source=reference.source,
        )

    def _read_parallel(
        self, sources: Sequence[str | Path]
    ) -> list[Future[RawTable]]:
        """
        Read all sources in a thread pool and wait for every read to finish.

        Futures are returned in source order. A failed read is re-raised only
        when its position is reached, so a header mismatch in an earlier
        source wins over a later read error.
        """
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(self.reader.read, source) for source in sources]
        return futures
