"""Tests for severity classification."""

import pytest

from vulnreport.config import SeverityConfig
from vulnreport.processing.severity import (
    UNKNOWN_PRIORITY,
    RiskInfo,
    RiskLevel,
    SeverityClassifier,
)


@pytest.fixture
def classifier() -> SeverityClassifier:
    """Classifier with the default keyword sets."""
    return SeverityClassifier()


class TestSeverityClassifier:
    """Tests for SeverityClassifier."""

    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("高危", RiskLevel.HIGH),
            ("中危", RiskLevel.MEDIUM),
            ("低危", RiskLevel.LOW),
            ("未知", RiskLevel.UNKNOWN),
            ("高危漏洞", RiskLevel.HIGH),
            ("中危风险", RiskLevel.MEDIUM),
            ("未知类型", RiskLevel.UNKNOWN),
            ("Critical", RiskLevel.HIGH),
            ("MEDIUM", RiskLevel.MEDIUM),
            ("low", RiskLevel.LOW),
            ("Unknown", RiskLevel.UNKNOWN),
            ("", RiskLevel.UNKNOWN),
        ],
    )
    def test_level(self, classifier: SeverityClassifier, label: str, expected: RiskLevel) -> None:
        """Test labels map to the expected level."""
        assert classifier.level(label) == expected

    def test_none_is_unknown(self, classifier: SeverityClassifier) -> None:
        """Test a missing label classifies as unknown."""
        assert classifier.level(None) == RiskLevel.UNKNOWN

    def test_high_takes_precedence_over_low(self, classifier: SeverityClassifier) -> None:
        """Test a label with both high and low keywords is high."""
        assert classifier.level("低危/高危") == RiskLevel.HIGH
        assert classifier.level("high or low") == RiskLevel.HIGH

    def test_medium_takes_precedence_over_low(self, classifier: SeverityClassifier) -> None:
        """Test a label with medium and low keywords is medium."""
        assert classifier.level("中低") == RiskLevel.MEDIUM

    def test_custom_keywords(self) -> None:
        """Test configured keyword sets replace the defaults."""
        classifier = SeverityClassifier(
            SeverityConfig(high_keywords=["P1"], medium_keywords=["P2"], low_keywords=["P3"])
        )
        assert classifier.level("p1") == RiskLevel.HIGH
        assert classifier.level("P3") == RiskLevel.LOW
        assert classifier.level("高危") == RiskLevel.UNKNOWN


class TestRiskInfo:
    """Tests for priorities, display text and labels."""

    def test_priorities(self, classifier: SeverityClassifier) -> None:
        """Test priority ordering High < Medium < Low < Unknown."""
        priorities = [classifier.classify(s).priority for s in ("高危", "中危", "低危", "其他")]
        assert priorities == [1, 2, 3, UNKNOWN_PRIORITY]

    def test_display_text(self, classifier: SeverityClassifier) -> None:
        """Test the checkbox annotation marks exactly the classified level."""
        assert classifier.classify("高危").display_text == "☑ 高危风险  ☐ 中危风险  ☐ 低危风险"
        assert classifier.classify("中危").display_text == "☐ 高危风险  ☑ 中危风险  ☐ 低危风险"
        assert classifier.classify("低危").display_text == "☐ 高危风险  ☐ 中危风险  ☑ 低危风险"
        assert "☑" not in classifier.classify("?").display_text

    def test_labels(self, classifier: SeverityClassifier) -> None:
        """Test single-character summary labels."""
        assert [classifier.label(s) for s in ("高危", "中危", "低危", "x")] == [
            "高",
            "中",
            "低",
            "未知",
        ]

    def test_for_level(self) -> None:
        """Test RiskInfo is derived from the level."""
        info = RiskInfo.for_level(RiskLevel.MEDIUM)
        assert info.level == RiskLevel.MEDIUM
        assert info.priority == 2
