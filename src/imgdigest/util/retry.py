"""Retry helper for image downloads."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")

logger = logging.getLogger("imgdigest.retry")


def retry(
    operation: Callable[[], T],
    *,
    attempts: int,
    backoff_seconds: float,
    give_up_on: tuple[type[BaseException], ...] = (),
) -> T:
    """Execute `operation` with retry semantics; exceptions in `give_up_on` are raised at once."""
    if attempts < 1:
        raise ValueError("attempts must be >= 1")

    last_error: Exception | None = None
    for attempt in range(attempts):
        try:
            return operation()
        except give_up_on:
            raise
        except Exception as exc:  # noqa: BLE001 - propagate last error after retries
            last_error = exc
            if attempt == attempts - 1:
                break
            delay = backoff_seconds * (2**attempt)
            logger.info("Attempt %s/%s failed (%s); retrying in %.2fs", attempt + 1, attempts, exc, delay)
            time.sleep(delay)
    assert last_error is not None  # for type checkers
    raise last_error


__all__ = ["retry"]
