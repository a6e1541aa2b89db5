"""Fixtures for unit tests."""

from types import SimpleNamespace
from typing import Any, Callable, Generator

import httpx
import pytest
import structlog
from notion_client import APIErrorCode, APIResponseError


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def notion_api_error() -> Callable[[APIErrorCode], APIResponseError]:
    """Return a factory for Notion API errors carrying the given error code."""

    def _make(code: APIErrorCode, status_code: int = 409) -> APIResponseError:
        return APIResponseError(httpx.Response(status_code), f"Notion API error: {code.value}", code)

    return _make


@pytest.fixture
def github_issue() -> Callable[..., SimpleNamespace]:
    """Return a factory for stand-ins of githubkit issue models."""

    def _make(
        number: int,
        title: str | None = None,
        state: str = "open",
        comments: int = 0,
        pull_request: Any = None,
    ) -> SimpleNamespace:
        return SimpleNamespace(
            number=number,
            title=title or f"Issue {number}",
            state=state,
            comments=comments,
            html_url=f"https://github.com/octocat/hello-world/issues/{number}",
            pull_request=pull_request,
        )

    return _make
