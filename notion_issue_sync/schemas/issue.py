"""Pydantic schema for a GitHub issue as it is mirrored into Notion."""

from typing import Literal

from githubkit.versions.latest.models import Issue
from pydantic import BaseModel, Field


class IssueModel(BaseModel):
    """Pydantic model for a GitHub issue enriched with its label names."""

    number: int = Field(gt=0)
    title: str
    state: Literal["open", "closed"]
    comment_count: int = Field(ge=0)
    url: str
    labels: list[str] = Field(default_factory=list)

    @classmethod
    def from_github_issue(cls, github_issue: Issue, labels: list[str]) -> "IssueModel":
        """Build the model from a githubkit issue and the label names fetched for it."""
        return cls(
            number=github_issue.number,
            title=github_issue.title,
            state=github_issue.state,
            comment_count=github_issue.comments,
            url=github_issue.html_url,
            labels=labels,
        )
