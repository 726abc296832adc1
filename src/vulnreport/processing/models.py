"""
Data structures passed between the processing stages.

Records are plain dicts keyed by spreadsheet column name; groups and
results are dataclasses so the renderer can rely on their shape.
"""

from dataclasses import dataclass, field
from typing import Any

# Column name ("A", "B", ...) -> trimmed cell text, None when the cell is empty;
# columns past the end of a short row are absent
Record = dict[str, str | None]


@dataclass
class Group:
    """
    Findings sharing a problem name and a raw severity text.

    Attributes:
        problem_name: Value of the problem column ("" when absent).
        severity_text: Unclassified value of the severity column ("" when absent).
        records: Member records in their original relative order.
    """

    problem_name: str
    severity_text: str
    records: list[Record] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        """Number of records in the group."""
        return len(self.records)

    def to_dict(self) -> dict[str, Any]:
        return {
            "problem_name": self.problem_name,
            "severity_text": self.severity_text,
            "record_count": self.record_count,
            "records": self.records,
        }


@dataclass
class ProcessResult:
    """
    Consolidated, priority-ordered findings handed to the renderer.

    Attributes:
        total_records: Number of records after deduplication.
        total_groups: Number of groups.
        ordered_groups: (group key, group) pairs, most severe first. Both the
            group order and the record order inside each group are meaningful.
    """

    total_records: int
    total_groups: int
    ordered_groups: list[tuple[str, Group]] = field(default_factory=list)

    def __post_init__(self) -> None:
        counted = sum(group.record_count for _, group in self.ordered_groups)
        if counted != self.total_records:
            msg = f"Groups hold {counted} records, expected {self.total_records}"
            raise ValueError(msg)
        if len(self.ordered_groups) != self.total_groups:
            msg = f"Result has {len(self.ordered_groups)} groups, expected {self.total_groups}"
            raise ValueError(msg)

    @property
    def groups(self) -> list[Group]:
        """Groups in final order, without their keys."""
        return [group for _, group in self.ordered_groups]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation preserving group and record order."""
        return {
            "total_records": self.total_records,
            "total_groups": self.total_groups,
            "ordered_groups": [
                {"key": key, **group.to_dict()} for key, group in self.ordered_groups
            ],
        }


@dataclass(frozen=True)
class StatisticItem:
    """One row of the per-group statistics table."""

    seq_num: int
    problem_name: str
    severity_level: str
    problem_count: int
