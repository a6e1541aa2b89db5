"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_CONFLICT_RETRY_DELAY,
    DEFAULT_MAX_CONFLICT_RETRIES,
    GITHUB_ISSUES_PAGE_SIZE,
)
from .retry import UpdateErrorKind, classify_update_error, retry_on_conflict

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "DEFAULT_CONFLICT_RETRY_DELAY",
    "DEFAULT_MAX_CONFLICT_RETRIES",
    "GITHUB_ISSUES_PAGE_SIZE",
    "UpdateErrorKind",
    "classify_update_error",
    "retry_on_conflict",
]
