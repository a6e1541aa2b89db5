"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio

from notion_issue_sync.configuration import reconcile
from notion_issue_sync.configuration.models import LabelErrorPolicy, SyncConfig


def get_sync_config(
    github_token: str | None = None,
    notion_token: str | None = None,
    notion_database_id: str | None = None,
    repo_owner: str | None = None,
    repo_name: str | None = None,
    github_api_url: str | None = None,
    batch_size: int | None = None,
    max_conflict_retries: int | None = None,
    conflict_retry_delay: float | None = None,
    label_error_policy: LabelErrorPolicy = LabelErrorPolicy.DROP,
    dry_run: bool = False,
    debug: bool = False,
) -> SyncConfig:
    """Synchronously get the reconciled sync configuration."""
    return asyncio.run(
        reconcile.reconcile_sync_configuration(
            cli_github_token=github_token,
            cli_notion_token=notion_token,
            cli_notion_database_id=notion_database_id,
            cli_repo_owner=repo_owner,
            cli_repo_name=repo_name,
            cli_github_api_url=github_api_url,
            cli_batch_size=batch_size,
            cli_max_conflict_retries=max_conflict_retries,
            cli_conflict_retry_delay=conflict_retry_delay,
            cli_label_error_policy=label_error_policy,
            cli_dry_run=dry_run,
            cli_debug=debug,
        )
    )
