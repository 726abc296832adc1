"""
Severity classification.

Maps free-text severity labels onto a closed set of risk levels by
keyword matching. High keywords are checked first, then medium, then low.
"""

from dataclasses import dataclass
from enum import Enum

from vulnreport.config.settings import SeverityConfig

UNKNOWN_PRIORITY = 999


class RiskLevel(Enum):
    """Coarse risk level of a finding."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"

    @property
    def priority(self) -> int:
        """Sort priority; lower is more severe, unknown sorts last."""
        return _PRIORITIES[self]

    @property
    def display_text(self) -> str:
        """Checkbox annotation printed in the report's severity row."""
        return _DISPLAY_TEXT[self]

    @property
    def label(self) -> str:
        """Single-character label used in the statistics table."""
        return _LABELS[self]


_PRIORITIES: dict[RiskLevel, int] = {
    RiskLevel.HIGH: 1,
    RiskLevel.MEDIUM: 2,
    RiskLevel.LOW: 3,
    RiskLevel.UNKNOWN: UNKNOWN_PRIORITY,
}

_DISPLAY_TEXT: dict[RiskLevel, str] = {
    RiskLevel.HIGH: "☑ 高危风险  ☐ 中危风险  ☐ 低危风险",
    RiskLevel.MEDIUM: "☐ 高危风险  ☑ 中危风险  ☐ 低危风险",
    RiskLevel.LOW: "☐ 高危风险  ☐ 中危风险  ☑ 低危风险",
    RiskLevel.UNKNOWN: "☐ 高危风险  ☐ 中危风险  ☐ 低危风险",
}

_LABELS: dict[RiskLevel, str] = {
    RiskLevel.HIGH: "高",
    RiskLevel.MEDIUM: "中",
    RiskLevel.LOW: "低",
    RiskLevel.UNKNOWN: "未知",
}


@dataclass(frozen=True)
class RiskInfo:
    """Risk level of a severity label with its priority and display text."""

    level: RiskLevel
    priority: int
    display_text: str

    @classmethod
    def for_level(cls, level: RiskLevel) -> "RiskInfo":
        return cls(level=level, priority=level.priority, display_text=level.display_text)


class SeverityClassifier:
    """
    Keyword-based severity classifier.

    Labels and keywords are compared case-insensitively, so "HIGH" and
    "High" both match the keyword "high".
    """

    def __init__(self, config: SeverityConfig | None = None) -> None:
        config = config or SeverityConfig()
        self._tiers: list[tuple[RiskLevel, tuple[str, ...]]] = [
            (RiskLevel.HIGH, tuple(k.casefold() for k in config.high_keywords)),
            (RiskLevel.MEDIUM, tuple(k.casefold() for k in config.medium_keywords)),
            (RiskLevel.LOW, tuple(k.casefold() for k in config.low_keywords)),
        ]

    def level(self, severity: str | None) -> RiskLevel:
        """Classify a label; labels matching no keyword are UNKNOWN."""
        text = (severity or "").casefold()
        for level, keywords in self._tiers:
            if any(keyword in text for keyword in keywords):
                return level
        return RiskLevel.UNKNOWN

    def classify(self, severity: str | None) -> RiskInfo:
        """Classify a label into a RiskInfo."""
        return RiskInfo.for_level(self.level(severity))

    def label(self, severity: str | None) -> str:
        """Single-character summary label (高/中/低/未知) for a severity text."""
        return self.level(severity).label
