"""Data models shared by the synchronization stages."""

from dataclasses import dataclass, field
from enum import Enum

from notion_issue_sync.schemas.issue import IssueModel


class SyncDecision(str, Enum):
    """Action to take in Notion for a fetched GitHub issue."""

    CREATE = "create"
    UPDATE = "update"


@dataclass(frozen=True)
class NotionIndexEntry:
    """A Notion page and the GitHub issue number stored on it."""

    page_id: str
    issue_number: int


@dataclass
class PageUpdate:
    """An issue paired with the Notion page that already mirrors it."""

    page_id: str
    issue: IssueModel


@dataclass
class NotionOperations:
    """Fetched issues partitioned into pages to create and pages to update."""

    pages_to_create: list[IssueModel] = field(default_factory=list)
    pages_to_update: list[PageUpdate] = field(default_factory=list)


@dataclass
class FetchedIssues:
    """Issues fetched from GitHub, plus the numbers of issues left out of this run."""

    issues: list[IssueModel] = field(default_factory=list)
    dropped: list[int] = field(default_factory=list)
