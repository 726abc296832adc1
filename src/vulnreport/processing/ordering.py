"""
Group ordering by severity priority and group size.
"""

from vulnreport.processing.models import Group, ProcessResult
from vulnreport.processing.severity import SeverityClassifier
from vulnreport.utils.logging import get_logger

log = get_logger(__name__)


def order_groups(
    groups: dict[str, Group],
    classifier: SeverityClassifier,
    total_records: int,
) -> ProcessResult:
    """
    Sort groups most severe first, larger groups first within a level.

    The sort is stable, so groups tied on priority and size stay in the
    order of the input mapping (first-seen order from grouping).

    Args:
        groups: Insertion-ordered mapping from group key to Group.
        classifier: Classifier for the groups' severity texts.
        total_records: Number of deduplicated records.

    Returns:
        ProcessResult with the ordered (key, group) pairs.
    """
    ranked = [
        (key, group, classifier.classify(group.severity_text).priority)
        for key, group in groups.items()
    ]
    ranked.sort(key=lambda item: (item[2], -item[1].record_count))

    result = ProcessResult(
        total_records=total_records,
        total_groups=len(ranked),
        ordered_groups=[(key, group) for key, group, _ in ranked],
    )
    log.debug("Ordered groups", order=[key for key, _ in result.ordered_groups])
    return result
