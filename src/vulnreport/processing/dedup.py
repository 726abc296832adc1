"""
Composite-key deduplication.

Findings exported from overlapping scans repeat verbatim; rows that agree
on the leading key columns are collapsed to their first occurrence.
"""

from collections.abc import Sequence

import pandas as pd

from vulnreport.utils.logging import get_logger

log = get_logger(__name__)


def composite_key(
    df: pd.DataFrame,
    columns: Sequence[str],
    separator: str = "|",
) -> pd.Series:
    """
    Join the values of `columns` into one key string per row.

    Nulls and columns missing from the frame contribute "". Comparison of
    the resulting keys is exact and case-sensitive.

    Args:
        df: Findings frame.
        columns: Key columns, in key order.
        separator: String placed between values.

    Returns:
        Series of key strings aligned with df's index.
    """
    if not columns:
        return pd.Series("", index=df.index, dtype=object)
    parts = df.reindex(columns=list(columns)).astype(object)
    parts = parts.where(parts.notna(), "")
    return pd.Series(
        [separator.join(values) for values in parts.itertuples(index=False, name=None)],
        index=df.index,
        dtype=object,
    )


def dedup_key_columns(columns: Sequence[str], width: int) -> list[str]:
    """The first `width` columns of the batch, or all of them if there are fewer."""
    return list(columns[:width])


def deduplicate(
    df: pd.DataFrame,
    key_columns: Sequence[str],
    separator: str = "|",
) -> pd.DataFrame:
    """
    Drop rows whose composite key was already seen.

    The first row for each key is kept and the relative order of kept rows
    is unchanged, so applying this twice gives the same frame.

    Args:
        df: Findings frame.
        key_columns: Columns forming the duplicate key.
        separator: Separator for the composite key.

    Returns:
        Deduplicated frame with a fresh RangeIndex.
    """
    keys = composite_key(df, key_columns, separator)
    unique = df.loc[~keys.duplicated(keep="first").to_numpy()].reset_index(drop=True)

    log.info(
        "Deduplicated records",
        before=len(df),
        after=len(unique),
        key_columns=list(key_columns),
    )
    return unique
