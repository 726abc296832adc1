"""
Consolidation stages: normalize, deduplicate, group, order, summarize.
"""

from vulnreport.processing.dedup import composite_key, dedup_key_columns, deduplicate
from vulnreport.processing.grouping import group_records
from vulnreport.processing.models import Group, ProcessResult, Record, StatisticItem
from vulnreport.processing.ordering import order_groups
from vulnreport.processing.records import column_names, normalize_rows, to_records
from vulnreport.processing.severity import RiskInfo, RiskLevel, SeverityClassifier
from vulnreport.processing.summary import statistics_frame, summarize

__all__ = [
    "Group",
    "ProcessResult",
    "Record",
    "RiskInfo",
    "RiskLevel",
    "SeverityClassifier",
    "StatisticItem",
    "column_names",
    "composite_key",
    "dedup_key_columns",
    "deduplicate",
    "group_records",
    "normalize_rows",
    "order_groups",
    "statistics_frame",
    "summarize",
    "to_records",
]
