"""Retry decorator for Notion page updates that hit conflict errors.

Notion answers concurrent writes to the same page (or to pages sharing a parent
database) with a `409 conflict_error`. Those are transient, so an update is retried
a bounded number of times with a fixed delay. Every other error class is raised
immediately.
"""

import asyncio
import functools
import inspect
from enum import Enum
from typing import Any, Callable, TypeVar

import structlog
from notion_client import APIErrorCode, APIResponseError

from notion_issue_sync.utils.constants import DEFAULT_CONFLICT_RETRY_DELAY, DEFAULT_MAX_CONFLICT_RETRIES

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class UpdateErrorKind(str, Enum):
    """Discriminant for errors raised while updating a Notion page."""

    CONFLICT = "conflict"
    OTHER = "other"


def classify_update_error(exc: BaseException) -> UpdateErrorKind:
    """Classify an update error as a retryable conflict or anything else."""
    if isinstance(exc, APIResponseError) and exc.code == APIErrorCode.ConflictError:
        return UpdateErrorKind.CONFLICT
    return UpdateErrorKind.OTHER


def retry_on_conflict(
    max_retries: int = DEFAULT_MAX_CONFLICT_RETRIES,
    delay: float = DEFAULT_CONFLICT_RETRY_DELAY,
) -> Callable[[F], F]:
    """Decorator for retrying async functions when Notion reports a conflict.

    The wrapped coroutine is attempted at most `max_retries + 1` times. The delay
    between attempts is constant.

    Args:
        max_retries: Maximum number of retry attempts after the first one (default: 3)
        delay: Delay in seconds between attempts (default: 1.0)

    Returns:
        Decorated function with retry logic

    Example:
        @retry_on_conflict()
        async def update(page_id: str, properties: dict[str, Any]):
            return await notion.pages.update(page_id=page_id, properties=properties)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            attempt = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    if classify_update_error(e) is UpdateErrorKind.OTHER:
                        raise

                    if attempt == max_retries:
                        logger.error(
                            "Max retries reached for Notion conflict error",
                            function=func.__name__,
                            attempts=attempt + 1,
                            error=str(e),
                        )
                        raise

                    attempt += 1
                    logger.warning(
                        f"Notion conflict error, retrying in {delay} seconds",
                        function=func.__name__,
                        attempt=attempt,
                        retries_left=max_retries - attempt + 1,
                    )
                    await asyncio.sleep(delay)

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            """Sync version of the retry wrapper - raises error since we only support async."""
            raise RuntimeError(
                f"Function {func.__name__} decorated with @retry_on_conflict must be async. This decorator only supports async functions."
            )

        if inspect.iscoroutinefunction(func):
            return async_wrapper  # type: ignore
        else:
            return sync_wrapper  # type: ignore

    return decorator
