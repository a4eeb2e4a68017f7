import asyncio
import logging
from datetime import date
from typing import Awaitable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def join_required(*aws: Awaitable[T]) -> list[T]:
    """Run concurrently and wait for every outcome; then raise the first failure (in input order).

    Nothing is left running when this returns or raises.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)

    first_error: Exception | None = None
    for i, result in enumerate(results):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            if first_error is None:
                first_error = result
            else:
                logger.error(f"Required task #{i + 1} also failed: {result}")

    if first_error is not None:
        raise first_error
    return list(results)


async def join_best_effort(aws: list[Awaitable[T]], label: str = "task") -> list[T]:
    """Run concurrently, wait for every outcome, keep only the successes (in input order).

    Failures are logged and dropped. Callers apply their own minimum-success rule.
    """
    results = await asyncio.gather(*aws, return_exceptions=True)

    successes: list[T] = []
    for i, result in enumerate(results):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result  # cancellation and friends are not outcomes
            logger.error(f"{label} #{i + 1} failed: {result}")
            continue
        successes.append(result)
    return successes


def to_slug(text: str) -> str:
    """Convert text to slug format: lowercase, no spaces.

    Example: "Digital Planner" -> "digitalplanner"
    """
    return text.lower().replace(" ", "").replace("/", "-")


def today_date() -> str:
    """Return today's date (YYYY-MM-DD)."""
    return date.today().isoformat()
