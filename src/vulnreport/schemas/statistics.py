"""
Pandera schema for the per-group statistics table.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series

SEVERITY_LABELS = ["高", "中", "低", "未知"]


class StatisticsSchema(pa.DataFrameModel):
    """
    Schema for the statistics table printed at the top of the report.

    One row per group, in final group order.
    """

    seq_num: Series[int] = pa.Field(ge=1, unique=True, description="1-based sequence number")
    problem_name: Series[str] = pa.Field(description="Problem name of the group")
    severity_level: Series[str] = pa.Field(
        isin=SEVERITY_LABELS,
        description="Single-character severity label",
    )
    problem_count: Series[int] = pa.Field(ge=1, description="Number of findings in the group")

    @pa.dataframe_check
    def seq_num_is_consecutive(cls, df: pd.DataFrame) -> bool:
        """Sequence numbers run 1..n in row order."""
        return df["seq_num"].tolist() == list(range(1, len(df) + 1))

    class Config:
        """Schema configuration."""

        name = "StatisticsSchema"
        strict = True
        coerce = True
