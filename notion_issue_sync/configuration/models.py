"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass
from enum import Enum

from notion_issue_sync.utils.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CONFLICT_RETRY_DELAY,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_MAX_CONFLICT_RETRIES,
)


class LabelErrorPolicy(str, Enum):
    """What to do with an issue whose labels could not be fetched from GitHub."""

    DROP = "drop"
    EMPTY = "empty"


@dataclass
class SyncConfig:
    """Configuration class for the sync command."""

    github_token: str
    notion_token: str
    notion_database_id: str
    repo_owner: str
    repo_name: str
    github_api_url: str = DEFAULT_GITHUB_API_URL
    batch_size: int = DEFAULT_BATCH_SIZE
    max_conflict_retries: int = DEFAULT_MAX_CONFLICT_RETRIES
    conflict_retry_delay: float = DEFAULT_CONFLICT_RETRY_DELAY
    label_error_policy: LabelErrorPolicy = LabelErrorPolicy.DROP
    dry_run: bool = False
    debug: bool = False
