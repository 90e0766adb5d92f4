"""Contains the label filter that decides whether an item is added to a project."""

from collections.abc import Iterable

import structlog

from add_to_project.configuration.models import LabelOperator

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def parse_labeled(raw_labeled: str | None) -> list[str]:
    """Split a comma-separated label list into trimmed, lower-cased, non-empty labels."""
    if not raw_labeled:
        return []
    labels = (label.strip().lower() for label in raw_labeled.split(","))
    return [label for label in labels if label]


def parse_label_operator(raw_operator: str | None) -> LabelOperator:
    """Parse the label operator input. Anything but `and` or `not` means `or`."""
    operator = (raw_operator or "").strip().lower()
    if operator == LabelOperator.AND.value:
        return LabelOperator.AND
    if operator == LabelOperator.NOT.value:
        return LabelOperator.NOT
    return LabelOperator.OR


def item_matches_label_filter(
    item_labels: Iterable[str],
    labeled: Iterable[str],
    operator: LabelOperator,
    item_number: int | None = None,
) -> bool:
    """Decide whether an item passes the `labeled` filter.

    Both label collections are expected to be lower-cased already. An empty
    filter lets every item through, whichever operator is configured.

    Args:
        item_labels: Labels on the issue or pull request.
        labeled: Labels configured through the `labeled` input.
        operator: How the configured labels are combined.
        item_number: Issue or pull request number, only used for logging.

    Returns:
        True if the item should be added to the project.
    """
    item_label_set = set(item_labels)
    labeled_list = list(labeled)
    labeled_text = ", ".join(labeled_list)

    if operator == LabelOperator.AND:
        if not all(label in item_label_set for label in labeled_list):
            logger.info("Skipping item because it doesn't match all the labels", item_number=item_number, labels=labeled_text)
            return False
    elif operator == LabelOperator.NOT:
        if labeled_list and any(label in item_label_set for label in labeled_list):
            logger.info("Skipping item because it contains one of the labels", item_number=item_number, labels=labeled_text)
            return False
    else:
        if labeled_list and not any(label in item_label_set for label in labeled_list):
            logger.info("Skipping item because it does not have one of the labels", item_number=item_number, labels=labeled_text)
            return False
    return True
