"""Reconciles configuration between CLI arguments and environment variables."""

import structlog

from notion_issue_sync.configuration.env import Settings, get_settings
from notion_issue_sync.configuration.exceptions import InvalidConfigurationElementError, RequiredConfigurationElementError
from notion_issue_sync.configuration.models import LabelErrorPolicy, SyncConfig

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def _require(cli_value: str | None, env_value: str | None, name: str, cli_name: str, env_name: str) -> str:
    """Return the CLI value if given, else the environment value, else raise."""
    value = cli_value if cli_value else env_value
    if not value:
        raise RequiredConfigurationElementError(name=name, cli_name=cli_name, env_name=env_name)
    return value


async def reconcile_sync_configuration(
    cli_github_token: str | None = None,
    cli_notion_token: str | None = None,
    cli_notion_database_id: str | None = None,
    cli_repo_owner: str | None = None,
    cli_repo_name: str | None = None,
    cli_github_api_url: str | None = None,
    cli_batch_size: int | None = None,
    cli_max_conflict_retries: int | None = None,
    cli_conflict_retry_delay: float | None = None,
    cli_label_error_policy: LabelErrorPolicy = LabelErrorPolicy.DROP,
    cli_dry_run: bool = False,
    cli_debug: bool = False,
    settings: Settings | None = None,
) -> SyncConfig:
    """Reconciles the sync configuration.

    Values passed on the command line take precedence over values read from the
    environment (or a `.env` file).

    Raises:
        RequiredConfigurationElementError: If a credential, the database ID, or the repository is missing.
        InvalidConfigurationElementError: If a numeric write setting is out of range.

    Returns:
        SyncConfig: The resolved configuration.
    """
    if settings is None:
        settings = get_settings()

    github_token = await _require(cli_github_token, settings.GH_KEY, "GitHub token", "github-token", "GH_KEY")
    notion_token = await _require(cli_notion_token, settings.NOTION_KEY, "Notion token", "notion-token", "NOTION_KEY")
    notion_database_id = await _require(
        cli_notion_database_id, settings.NOTION_DATABASE_ID, "Notion database ID", "notion-database-id", "NOTION_DATABASE_ID"
    )
    repo_owner = await _require(cli_repo_owner, settings.GH_REPO_OWNER, "GitHub repository owner", "repo-owner", "GH_REPO_OWNER")
    repo_name = await _require(cli_repo_name, settings.GH_REPO_NAME, "GitHub repository name", "repo-name", "GH_REPO_NAME")

    batch_size = cli_batch_size if cli_batch_size is not None else settings.BATCH_SIZE
    if batch_size < 1:
        raise InvalidConfigurationElementError("batch size", batch_size, "must be at least 1")

    max_conflict_retries = cli_max_conflict_retries if cli_max_conflict_retries is not None else settings.MAX_CONFLICT_RETRIES
    if max_conflict_retries < 0:
        raise InvalidConfigurationElementError("max conflict retries", max_conflict_retries, "must not be negative")

    conflict_retry_delay = cli_conflict_retry_delay if cli_conflict_retry_delay is not None else settings.CONFLICT_RETRY_DELAY
    if conflict_retry_delay < 0:
        raise InvalidConfigurationElementError("conflict retry delay", conflict_retry_delay, "must not be negative")

    config = SyncConfig(
        github_token=github_token,
        notion_token=notion_token,
        notion_database_id=notion_database_id,
        repo_owner=repo_owner,
        repo_name=repo_name,
        github_api_url=cli_github_api_url or settings.GITHUB_API_URL,
        batch_size=batch_size,
        max_conflict_retries=max_conflict_retries,
        conflict_retry_delay=conflict_retry_delay,
        label_error_policy=cli_label_error_policy,
        dry_run=cli_dry_run,
        debug=cli_debug or settings.DEBUG,
    )
    logger.debug(
        "Reconciled sync configuration",
        repo_owner=config.repo_owner,
        repo_name=config.repo_name,
        notion_database_id=config.notion_database_id,
        batch_size=config.batch_size,
        dry_run=config.dry_run,
    )
    return config
