"""
Pandera schema for normalized finding records.

Finding spreadsheets have no fixed header vocabulary, so the schema is
built per batch from the positional column names.
"""

from collections.abc import Sequence

import pandera.pandas as pa


def _is_trimmed_text(value: object) -> bool:
    return isinstance(value, str) and value != "" and value == value.strip()


def findings_schema(columns: Sequence[str]) -> pa.DataFrameSchema:
    """
    Build the schema for a normalized findings frame.

    Every column holds trimmed, non-empty text or null; empty cells must
    already have been mapped to null.

    Args:
        columns: Positional column names of the batch, in order.

    Returns:
        Strict, ordered DataFrameSchema.
    """
    return pa.DataFrameSchema(
        {
            name: pa.Column(
                object,
                nullable=True,
                checks=pa.Check(
                    _is_trimmed_text,
                    element_wise=True,
                    error="cell must be trimmed, non-empty text",
                ),
            )
            for name in columns
        },
        name="FindingsSchema",
        strict=True,
        ordered=True,
    )
