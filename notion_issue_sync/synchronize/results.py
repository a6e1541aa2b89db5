"""Contains results of application execution."""

from notion_issue_sync.schemas.issue import IssueModel


class CreatePagesResult:
    """Contains results of creating Notion pages for new issues."""

    def __init__(self, created: list[IssueModel], failed: list[IssueModel]) -> None:
        """Initialize the result with the issues that were and were not created."""
        self.created = created
        self.failed = failed


class SyncResult:
    """Contains results of a GitHub to Notion synchronization run."""

    def __init__(
        self,
        fetched_issue_count: int,
        created_count: int = 0,
        failed_creations: list[int] | None = None,
        updated_count: int = 0,
        dropped_issues: list[int] | None = None,
        dry_run: bool = False,
    ) -> None:
        """Initialize the result with per-stage counts."""
        self.fetched_issue_count = fetched_issue_count
        self.created_count = created_count
        self.failed_creations = failed_creations or []
        self.updated_count = updated_count
        self.dropped_issues = dropped_issues or []
        self.dry_run = dry_run
