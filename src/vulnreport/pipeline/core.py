"""
Consolidation pipeline.

Runs Read -> Merge -> Normalize -> Deduplicate -> Group -> Order ->
Summarize as one linear pass. Any stage failure propagates to the caller
and the remaining stages are skipped.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from vulnreport.config.settings import AppConfig
from vulnreport.errors import ReportError
from vulnreport.ingestion.base import RawTable, TableReader
from vulnreport.ingestion.merge import TableMerger
from vulnreport.ingestion.workbook import WorkbookReader
from vulnreport.pipeline.progress import LogLevel, NullObserver, ProgressObserver
from vulnreport.processing.dedup import dedup_key_columns, deduplicate
from vulnreport.processing.grouping import group_records
from vulnreport.processing.models import ProcessResult, StatisticItem
from vulnreport.processing.ordering import order_groups
from vulnreport.processing.records import normalize_rows
from vulnreport.processing.severity import RiskLevel, SeverityClassifier
from vulnreport.processing.summary import summarize
from vulnreport.utils.logging import get_logger, log_context, new_run_id

log = get_logger(__name__)

STAGES: tuple[str, ...] = (
    "merge",
    "normalize",
    "deduplicate",
    "group",
    "order",
    "summarize",
)


@dataclass
class PipelineResult:
    """
    Result of a full pipeline run.

    Attributes:
        result: Ordered groups handed to the renderer.
        statistics: Per-group statistics rows in group order.
        headers: Header row shared by all merged sources.
        merged_rows: Number of data rows before deduplication.
    """

    result: ProcessResult
    statistics: list[StatisticItem]
    headers: list[str]
    merged_rows: int

    @property
    def duplicates_removed(self) -> int:
        """Rows dropped by deduplication."""
        return self.merged_rows - self.result.total_records


class ReportPipeline:
    """
    Consolidates finding spreadsheets into priority-ordered groups.

    All state lives in the call; a pipeline instance can be reused for
    several runs.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        reader: TableReader | None = None,
        observer: ProgressObserver | None = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            config: Tool configuration (defaults to the standard layout).
            reader: Source reader (defaults to WorkbookReader).
            observer: Receiver of per-stage notifications.
        """
        self.config = config or AppConfig()
        self.reader = reader or WorkbookReader()
        self.observer: ProgressObserver = observer or NullObserver()
        self.classifier = SeverityClassifier(self.config.severity)

    def _completed(self, stage: str, message: str) -> None:
        self.observer.stage_completed(stage, STAGES.index(stage) + 1, len(STAGES), message)

    def merge(self, sources: Sequence[str | Path]) -> RawTable:
        """Read and merge sources, validating header consistency."""
        merger = TableMerger(
            self.reader,
            parallel=self.config.reading.parallel,
            max_workers=self.config.reading.max_workers,
        )
        table = merger.merge(sources)
        self._completed("merge", f"Merged {len(sources)} source(s), {table.row_count} rows")
        return table

    def process(self, table: RawTable) -> ProcessResult:
        """
        Normalize, deduplicate, group and order a merged table.

        Args:
            table: Merged table.

        Returns:
            ProcessResult with groups most severe first.
        """
        columns = self.config.columns

        df = normalize_rows(table)
        self._completed("normalize", f"Normalized {len(df)} records")

        key_columns = dedup_key_columns(list(df.columns), columns.dedup_key_width)
        df = deduplicate(df, key_columns, columns.separator)
        self._completed("deduplicate", f"{len(df)} records after deduplication")

        groups = group_records(df, columns.problem, columns.severity, columns.separator)
        self._completed("group", f"{len(groups)} groups")

        result = order_groups(groups, self.classifier, total_records=len(df))
        self._completed("order", "Groups ordered by severity")
        return result

    def run(self, sources: Sequence[str | Path] | None = None) -> PipelineResult:
        """
        Run the full pipeline.

        Args:
            sources: Sources to merge; defaults to the configured sources.

        Returns:
            PipelineResult with ordered groups and statistics.

        Raises:
            ValidationError: If no sources are given or headers disagree.
            SourceError: If a source cannot be read.
        """
        sources = list(self.config.sources if sources is None else sources)

        with log_context(run_id=new_run_id()):
            log.info("Starting pipeline", n_sources=len(sources))
            self.observer.log(LogLevel.INFO, f"Merging {len(sources)} source file(s)")

            try:
                table = self.merge(sources)
                result = self.process(table)
                statistics = summarize(result, self.classifier)
            except ReportError as e:
                self.observer.log(LogLevel.ERROR, f"Processing failed: {e}")
                raise
            self._completed("summarize", f"{len(statistics)} statistics rows")

            unknown = [
                group.severity_text
                for group in result.groups
                if self.classifier.level(group.severity_text) is RiskLevel.UNKNOWN
            ]
            if unknown:
                log.info("Unrecognized severity labels", labels=sorted(set(unknown)))
                self.observer.log(
                    LogLevel.WARNING,
                    f"{len(unknown)} group(s) have an unrecognized severity level",
                )

            log.info(
                "Pipeline complete",
                merged_rows=table.row_count,
                records=result.total_records,
                groups=result.total_groups,
            )
            self.observer.log(
                LogLevel.SUCCESS,
                f"Processed {result.total_records} records in {result.total_groups} groups",
            )

        return PipelineResult(
            result=result,
            statistics=statistics,
            headers=table.headers,
            merged_rows=table.row_count,
        )


def run_pipeline(
    sources: Sequence[str | Path],
    config: AppConfig | None = None,
    observer: ProgressObserver | None = None,
) -> PipelineResult:
    """
    Convenience function to run the pipeline with the workbook reader.

    Args:
        sources: Spreadsheets to merge, in order.
        config: Tool configuration.
        observer: Receiver of per-stage notifications.

    Returns:
        PipelineResult with ordered groups and statistics.
    """
    pipeline = ReportPipeline(config, observer=observer)
    return pipeline.run(sources)
