"""Unit tests for the configuration.reconcile module."""

from typing import Any

import pytest
from pytest import MonkeyPatch

from notion_issue_sync.configuration.env import Settings
from notion_issue_sync.configuration.exceptions import InvalidConfigurationElementError, RequiredConfigurationElementError
from notion_issue_sync.configuration.models import LabelErrorPolicy
from notion_issue_sync.configuration.reconcile import reconcile_sync_configuration

ENV_NAMES = [
    "GH_KEY",
    "NOTION_KEY",
    "NOTION_DATABASE_ID",
    "GH_REPO_OWNER",
    "GH_REPO_NAME",
    "GITHUB_API_URL",
    "DEBUG",
    "BATCH_SIZE",
    "MAX_CONFLICT_RETRIES",
    "CONFLICT_RETRY_DELAY",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: MonkeyPatch) -> None:
    """Remove configuration variables from the environment for every test."""
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def make_settings(**overrides: Any) -> Settings:
    """Build settings with every required element present, ignoring any .env file."""
    values: dict[str, Any] = {
        "GH_KEY": "env-gh-token",
        "NOTION_KEY": "env-notion-token",
        "NOTION_DATABASE_ID": "env-db-id",
        "GH_REPO_OWNER": "env-owner",
        "GH_REPO_NAME": "env-repo",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)  # type: ignore[call-arg]


@pytest.mark.asyncio
async def test_reconcile_from_environment_only() -> None:
    """Test that the environment alone supplies a complete configuration with defaults."""
    config = await reconcile_sync_configuration(settings=make_settings())

    assert config.github_token == "env-gh-token"
    assert config.notion_token == "env-notion-token"
    assert config.notion_database_id == "env-db-id"
    assert config.repo_owner == "env-owner"
    assert config.repo_name == "env-repo"
    assert config.github_api_url == "https://api.github.com"
    assert config.batch_size == 10
    assert config.max_conflict_retries == 3
    assert config.conflict_retry_delay == 1.0
    assert config.label_error_policy is LabelErrorPolicy.DROP
    assert config.dry_run is False
    assert config.debug is False


@pytest.mark.asyncio
async def test_reconcile_cli_takes_precedence() -> None:
    """Test that values given on the command line override the environment."""
    config = await reconcile_sync_configuration(
        cli_github_token="cli-gh-token",
        cli_notion_token="cli-notion-token",
        cli_notion_database_id="cli-db-id",
        cli_repo_owner="cli-owner",
        cli_repo_name="cli-repo",
        cli_github_api_url="https://github.example.com/api/v3",
        cli_batch_size=4,
        cli_max_conflict_retries=0,
        cli_conflict_retry_delay=0.5,
        cli_label_error_policy=LabelErrorPolicy.EMPTY,
        cli_dry_run=True,
        cli_debug=True,
        settings=make_settings(BATCH_SIZE=20, MAX_CONFLICT_RETRIES=5),
    )

    assert config.github_token == "cli-gh-token"
    assert config.notion_token == "cli-notion-token"
    assert config.notion_database_id == "cli-db-id"
    assert config.repo_owner == "cli-owner"
    assert config.repo_name == "cli-repo"
    assert config.github_api_url == "https://github.example.com/api/v3"
    assert config.batch_size == 4
    assert config.max_conflict_retries == 0
    assert config.conflict_retry_delay == 0.5
    assert config.label_error_policy is LabelErrorPolicy.EMPTY
    assert config.dry_run is True
    assert config.debug is True


@pytest.mark.asyncio
async def test_reconcile_write_settings_from_environment() -> None:
    """Test that batch and retry settings are read from the environment when not given on the command line."""
    config = await reconcile_sync_configuration(settings=make_settings(BATCH_SIZE=25, MAX_CONFLICT_RETRIES=1, CONFLICT_RETRY_DELAY=2.5, DEBUG=True))

    assert config.batch_size == 25
    assert config.max_conflict_retries == 1
    assert config.conflict_retry_delay == 2.5
    assert config.debug is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "missing, env_name",
    [
        pytest.param("GH_KEY", "GH_KEY", id="github token"),
        pytest.param("NOTION_KEY", "NOTION_KEY", id="notion token"),
        pytest.param("NOTION_DATABASE_ID", "NOTION_DATABASE_ID", id="database id"),
        pytest.param("GH_REPO_OWNER", "GH_REPO_OWNER", id="repository owner"),
        pytest.param("GH_REPO_NAME", "GH_REPO_NAME", id="repository name"),
    ],
)
async def test_reconcile_missing_required_element(missing: str, env_name: str) -> None:
    """Test that each missing required element raises RequiredConfigurationElementError naming it."""
    with pytest.raises(RequiredConfigurationElementError) as exc_info:
        await reconcile_sync_configuration(settings=make_settings(**{missing: None}))

    assert exc_info.value.env_name == env_name
    assert env_name in str(exc_info.value)


@pytest.mark.asyncio
async def test_reconcile_empty_value_counts_as_missing() -> None:
    """Test that an empty token is treated the same as a missing one."""
    with pytest.raises(RequiredConfigurationElementError, match="GitHub token"):
        await reconcile_sync_configuration(cli_github_token="", settings=make_settings(GH_KEY=""))


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kwargs, element",
    [
        pytest.param({"cli_batch_size": 0}, "batch size", id="zero batch size"),
        pytest.param({"cli_batch_size": -3}, "batch size", id="negative batch size"),
        pytest.param({"cli_max_conflict_retries": -1}, "max conflict retries", id="negative retries"),
        pytest.param({"cli_conflict_retry_delay": -0.5}, "conflict retry delay", id="negative delay"),
    ],
)
async def test_reconcile_invalid_write_settings(kwargs: dict[str, Any], element: str) -> None:
    """Test that out-of-range write settings raise InvalidConfigurationElementError."""
    with pytest.raises(InvalidConfigurationElementError) as exc_info:
        await reconcile_sync_configuration(settings=make_settings(), **kwargs)

    assert exc_info.value.name == element
