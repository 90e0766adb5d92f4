"""Orchestrates adding an issue or pull request to a project."""

import structlog

from add_to_project.configuration.models import AddToProjectConfig
from add_to_project.github.abc import ProjectClientBase
from add_to_project.project.fields import find_field_option_ids, get_field_value
from add_to_project.project.labels import item_matches_label_filter
from add_to_project.project.url import parse_project_url
from add_to_project.schemas.event import EventPayload, ProjectItemContent
from add_to_project.synchronize.results import AddToProjectDecision, AddToProjectResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_add_to_project_workflow(
    config: AddToProjectConfig,
    payload: EventPayload,
    client: ProjectClientBase,
) -> AddToProjectResult:
    """Run the add-to-project workflow for the item that triggered the event.

    Items rejected by the label filter are skipped without any API call. Items
    from a repository owned by the project owner are added directly, and get
    their custom field set when the label map resolves to an existing field
    option. Items from other owners are added as draft issues titled with the
    item URL.

    Adding is not idempotent: running twice for the same item asks GitHub to
    add it twice.
    """
    item = ProjectItemContent.from_event(payload)
    logger.info("Issue/PR details", owner=item.owner_login, labels=", ".join(item.labels), number=item.number)

    if not item_matches_label_filter(item.labels, config.labeled, config.label_operator, item_number=item.number):
        return AddToProjectResult(AddToProjectDecision.SKIPPED)

    logger.info("Getting field value from label map", label_map=config.label_map, labels=item.labels)
    resolution = get_field_value(config.label_map, item.labels)

    project = parse_project_url(config.project_url)

    # Each remote call depends on an ID returned by the previous one.
    project_id = await client.resolve_project_id(project.owner_type, project.owner_name, project.project_number)
    logger.info("Resolved project node ID", project_id=project_id, content_id=item.content_id)

    field_id: str | None = None
    option_id: str | None = None
    if resolution is not None:
        fields = await client.get_custom_fields(project_id)
        field_id, option_id = find_field_option_ids(fields, resolution)

    if item.owner_login == project.owner_name:
        logger.info("Creating project item", project_id=project_id, content_id=item.content_id)
        item_id = await client.attach_item(project_id, item.content_id)

        field_set = False
        if field_id is not None and option_id is not None:
            logger.info("Setting custom field value", item_id=item_id, field_id=field_id, option_id=option_id)
            await client.set_single_select_field(project_id, item_id, field_id, option_id)
            field_set = True
        elif resolution is not None:
            logger.info("Not setting custom field value, no matching field or option on project", field_name=resolution.field_name)

        return AddToProjectResult(AddToProjectDecision.ADDED_ITEM, item_id=item_id, project_id=project_id, field_set=field_set)

    logger.info("Creating draft issue in project", project_id=project_id, title=item.html_url)
    item_id = await client.create_draft_issue(project_id, item.html_url)
    return AddToProjectResult(AddToProjectDecision.ADDED_DRAFT_ISSUE, item_id=item_id, project_id=project_id)
