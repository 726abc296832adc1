"""
Statistics table derived from the ordered groups.
"""

from dataclasses import asdict

import pandas as pd

from vulnreport.processing.models import ProcessResult, StatisticItem
from vulnreport.processing.severity import SeverityClassifier
from vulnreport.schemas.statistics import StatisticsSchema


def summarize(result: ProcessResult, classifier: SeverityClassifier) -> list[StatisticItem]:
    """
    One statistics row per group, numbered from 1 in final group order.

    Args:
        result: Ordered processing result.
        classifier: Classifier used to derive the single-character label.

    Returns:
        Statistics rows in group order.
    """
    return [
        StatisticItem(
            seq_num=seq_num,
            problem_name=group.problem_name,
            severity_level=classifier.label(group.severity_text),
            problem_count=group.record_count,
        )
        for seq_num, (_, group) in enumerate(result.ordered_groups, start=1)
    ]


def statistics_frame(items: list[StatisticItem]) -> pd.DataFrame:
    """Statistics rows as a DataFrame validated against StatisticsSchema."""
    df = pd.DataFrame(
        [asdict(item) for item in items],
        columns=["seq_num", "problem_name", "severity_level", "problem_count"],
    )
    return StatisticsSchema.validate(df)
