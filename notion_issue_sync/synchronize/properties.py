"""Maps GitHub issues onto the Notion database schema."""

from typing import Any

from notion_issue_sync.schemas.issue import IssueModel
from notion_issue_sync.utils.constants import (
    ISSUE_NUMBER_PROPERTY,
    ISSUE_URL_PROPERTY,
    NAME_PROPERTY,
    NUMBER_OF_COMMENTS_PROPERTY,
    STATE_PROPERTY,
    TYPE_PROPERTY,
)


def get_properties_from_issue(issue: IssueModel) -> dict[str, Any]:
    """Return the issue as a Notion property payload.

    The payload always carries every property, so an update overwrites the page
    rather than merging into it.
    """
    return {
        NAME_PROPERTY: {
            "title": [{"type": "text", "text": {"content": issue.title}}],
        },
        ISSUE_NUMBER_PROPERTY: {
            "number": issue.number,
        },
        STATE_PROPERTY: {
            "select": {"name": issue.state},
        },
        NUMBER_OF_COMMENTS_PROPERTY: {
            "number": issue.comment_count,
        },
        ISSUE_URL_PROPERTY: {
            "url": issue.url,
        },
        TYPE_PROPERTY: {
            "multi_select": [{"name": label} for label in issue.labels],
        },
    }
