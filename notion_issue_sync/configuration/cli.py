"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio

import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from notion_issue_sync.configuration.driver import get_sync_config
from notion_issue_sync.configuration.exceptions import InvalidConfigurationElementError, RequiredConfigurationElementError
from notion_issue_sync.configuration.models import LabelErrorPolicy
from notion_issue_sync.synchronize.driver import run_sync_workflow_from_config
from notion_issue_sync.utils.logs import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.callback()
def main_callback() -> None:
    """Synchronize GitHub issues into a Notion database."""


@typer_app.command(name="sync")
def sync_cli(
    github_token: Annotated[str | None, Option(envvar="GH_KEY", help="GitHub token used to read issues.")] = None,
    notion_token: Annotated[str | None, Option(envvar="NOTION_KEY", help="Notion integration token.")] = None,
    notion_database_id: Annotated[str | None, Option(envvar="NOTION_DATABASE_ID", help="ID of the target Notion database.")] = None,
    repo_owner: Annotated[str | None, Option(envvar="GH_REPO_OWNER", help="Owner of the source GitHub repository.")] = None,
    repo_name: Annotated[str | None, Option(envvar="GH_REPO_NAME", help="Name of the source GitHub repository.")] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    batch_size: Annotated[int | None, Option(envvar="BATCH_SIZE", help="Number of concurrent Notion writes per batch.")] = None,
    max_conflict_retries: Annotated[
        int | None, Option(envvar="MAX_CONFLICT_RETRIES", help="Retries for a page update that hits a Notion conflict error.")
    ] = None,
    conflict_retry_delay: Annotated[
        float | None, Option(envvar="CONFLICT_RETRY_DELAY", help="Seconds to wait between conflict retries.")
    ] = None,
    on_label_error: Annotated[
        LabelErrorPolicy,
        Option(
            envvar="ON_LABEL_ERROR",
            case_sensitive=False,
            help="What to do with an issue whose labels cannot be fetched: drop it from this run, or sync it with no labels.",
        ),
    ] = LabelErrorPolicy.DROP,
    dry_run: Annotated[bool, Option(envvar="DRY_RUN", help="Compute the Notion operations without writing anything.")] = False,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Create or update a Notion page for every issue in the GitHub repository."""
    configure_logging(debug=debug)
    try:
        config = get_sync_config(
            github_token=github_token,
            notion_token=notion_token,
            notion_database_id=notion_database_id,
            repo_owner=repo_owner,
            repo_name=repo_name,
            github_api_url=github_api_url,
            batch_size=batch_size,
            max_conflict_retries=max_conflict_retries,
            conflict_retry_delay=conflict_retry_delay,
            label_error_policy=on_label_error,
            dry_run=dry_run,
            debug=debug,
        )
    except (RequiredConfigurationElementError, InvalidConfigurationElementError) as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Syncing issues from {config.repo_owner}/{config.repo_name} to Notion database {config.notion_database_id}")
    result = asyncio.run(run_sync_workflow_from_config(config))

    if result.dry_run:
        typer.echo(f"Dry run: {result.fetched_issue_count} issues fetched, nothing written to Notion.")
    else:
        typer.echo(
            f"Notion database is synced with GitHub: {result.created_count} created, "
            f"{len(result.failed_creations)} failed to create, {result.updated_count} updated."
        )
    if result.dropped_issues:
        typer.echo(
            f"Skipped {len(result.dropped_issues)} issues whose labels could not be fetched: "
            + ", ".join(f"#{number}" for number in result.dropped_issues)
        )


if __name__ == "__main__":
    typer_app()
