"""
Grouping of findings by problem name and severity text.
"""

import pandas as pd

from vulnreport.processing.dedup import composite_key
from vulnreport.processing.models import Group
from vulnreport.processing.records import to_records
from vulnreport.utils.logging import get_logger

log = get_logger(__name__)


def _column_text(df: pd.DataFrame, column: str) -> pd.Series:
    """Values of a column with nulls, and a missing column, read as ''."""
    if column not in df.columns:
        return pd.Series("", index=df.index, dtype=object)
    values = df[column].astype(object)
    return values.where(values.notna(), "")


def group_records(
    df: pd.DataFrame,
    problem_column: str,
    severity_column: str,
    separator: str = "|",
) -> dict[str, Group]:
    """
    Partition findings into groups keyed by "problem|severity".

    Groups appear in the order their first record appears, and records
    keep their relative order inside a group. The mapping order is what
    makes the later sort's tie-breaks deterministic.

    Args:
        df: Deduplicated findings frame.
        problem_column: Column holding the problem name.
        severity_column: Column holding the raw severity label.
        separator: Separator for the composite group key.

    Returns:
        Insertion-ordered mapping from group key to Group.
    """
    keys = composite_key(df, [problem_column, severity_column], separator)
    problems = _column_text(df, problem_column)
    severities = _column_text(df, severity_column)

    groups: dict[str, Group] = {}
    for key, frame in df.groupby(keys, sort=False):
        first = frame.index[0]
        groups[key] = Group(
            problem_name=problems.at[first],
            severity_text=severities.at[first],
            records=to_records(frame),
        )

    log.info("Grouped records", records=len(df), groups=len(groups))
    return groups
