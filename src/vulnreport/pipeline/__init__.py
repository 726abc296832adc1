"""
Consolidation pipeline for security finding spreadsheets.

Orchestrates merging, normalization, deduplication, grouping and ordering.
"""

from vulnreport.pipeline.core import STAGES, PipelineResult, ReportPipeline, run_pipeline
from vulnreport.pipeline.progress import (
    LogLevel,
    LogMessage,
    NullObserver,
    ProgressInfo,
    ProgressObserver,
    ProgressRecorder,
)

__all__ = [
    "STAGES",
    "LogLevel",
    "LogMessage",
    "NullObserver",
    "PipelineResult",
    "ProgressInfo",
    "ProgressObserver",
    "ProgressRecorder",
    "ReportPipeline",
    "run_pipeline",
]
