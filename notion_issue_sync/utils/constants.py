"""Shared constants used across the application."""

# Synchronization Constants
# -------------------------

DEFAULT_BATCH_SIZE = 10
"""Number of Notion create/update requests issued concurrently per chunk."""

DEFAULT_MAX_CONFLICT_RETRIES = 3
"""Number of retries for a Notion page update that fails with a conflict error."""

DEFAULT_CONFLICT_RETRY_DELAY = 1.0
"""Fixed delay in seconds between conflict retries."""

GITHUB_ISSUES_PAGE_SIZE = 100
"""Page size used when listing issues and labels from GitHub."""

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub REST API base URL."""

# Notion Database Schema
# ----------------------

NAME_PROPERTY = "Name"
ISSUE_NUMBER_PROPERTY = "Issue Number"
STATE_PROPERTY = "State"
NUMBER_OF_COMMENTS_PROPERTY = "Number of Comments"
ISSUE_URL_PROPERTY = "Issue URL"
TYPE_PROPERTY = "Type"
