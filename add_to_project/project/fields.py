"""Resolves the custom single-select field an item should be routed into.

The `label-map` input is a JSON object keyed by field name, each value being a
list of `{"label": ..., "fieldValue": ...}` entries, for example::

    {"Priority": [{"label": "p1", "fieldValue": "High"}, {"label": "p2", "fieldValue": "Low"}]}

Field names are tried in the order they appear in the JSON object and the first
entry whose label is on the item wins.
"""

import json
from collections.abc import Sequence
from typing import Any

import structlog

from add_to_project.schemas.project import FieldResolution, ProjectField

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

LabelFieldMap = list[tuple[str, Any]]


def parse_label_map(labels_map: str) -> LabelFieldMap:
    """Parse the label map into (field name, entries) pairs, keeping key order.

    Raises:
        json.JSONDecodeError: If the label map is not valid JSON.
    """
    parsed = json.loads(labels_map)
    if not isinstance(parsed, dict):
        logger.warning("Label map is not a JSON object, ignoring it", label_map_type=type(parsed).__name__)
        return []
    return list(parsed.items())


def get_field_value(labels_map: str | None, item_labels: Sequence[str]) -> FieldResolution | None:
    """Find the field name and value for the first mapped label present on the item.

    Mapped labels are compared exactly as written in the label map. A missing
    or malformed label map is not an error; the item is then added without
    setting any custom field.
    """
    if not isinstance(labels_map, str):
        return None

    try:
        label_field_map = parse_label_map(labels_map)
    except json.JSONDecodeError as exc:
        logger.error("Error parsing label map", error=str(exc))
        return None

    for field_name, entries in label_field_map:
        logger.debug("Checking label map field", field_name=field_name, entries=entries, labels=list(item_labels))
        if not isinstance(entries, list):
            continue
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            if entry.get("label") in item_labels:
                field_value = entry.get("fieldValue")
                if not isinstance(field_value, str):
                    # Option names are strings.
                    logger.warning("Label map entry has no string fieldValue", field_name=field_name, field_value=field_value)
                    return None
                resolution = FieldResolution(field_name=field_name, field_value=field_value)
                logger.info("Resolved custom field from label map", field_name=resolution.field_name, field_value=resolution.field_value)
                return resolution
    return None


def find_field_option_ids(fields: Sequence[ProjectField], resolution: FieldResolution) -> tuple[str | None, str | None]:
    """Translate a field resolution into the field ID and option ID on the project.

    An unknown field name or option value yields None for the missing IDs.
    """
    field = next((f for f in fields if f.name == resolution.field_name), None)
    if field is None:
        logger.warning("Custom field not found on project", field_name=resolution.field_name)
        return None, None

    option = next((o for o in field.options if o.name == resolution.field_value), None)
    if option is None:
        logger.warning("Custom field option not found on project", field_name=field.name, field_value=resolution.field_value)
        return field.id, None

    logger.info("Found custom field option", field_id=field.id, option_id=option.id)
    return field.id, option.id
