"""HTTP helpers shared by the vendor fetchers.

Every failure leaving this module is an :class:`~ipmetaindex.errors.IndexBuildError`
subclass carrying the caller's terse reason; the underlying ``requests`` or
OS error is kept as ``__cause__``.
"""

from __future__ import annotations

import logging
import os
import random
import tempfile
import time
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import requests

from .errors import ConnectionFailure, IoFailure, SerializationFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")

CHUNK_SIZE = 1 << 20


def _is_transient(exc: requests.RequestException) -> bool:
    if isinstance(exc, requests.HTTPError):
        response = exc.response
        # 4xx (bad license key, missing edition) will not improve on retry
        return response is None or response.status_code >= 500 or response.status_code == 429
    return isinstance(exc, (requests.ConnectionError, requests.Timeout))


def with_retries(
    max_retries: int = 2,
    backoff_base: float = 1.0,
    backoff_factor: float = 2.0,
    jitter: bool = True,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator retrying transient HTTP failures with exponential backoff.

    Args:
        max_retries: Retry attempts after the first call
        backoff_base: Base backoff time in seconds
        backoff_factor: Multiplier for exponential backoff
        jitter: Whether to add random jitter to backoff times

    Returns:
        Decorator wrapping the target function with retry logic

    Examples:
        @with_retries(max_retries=3)
        def fetch():
            ...
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except requests.RequestException as e:
                    if attempt == max_retries or not _is_transient(e):
                        raise
                    backoff = backoff_base * (backoff_factor**attempt)
                    if jitter:
                        backoff *= 0.5 + random.random() * 0.5
                    logger.debug(f"Transient HTTP failure ({e}); retry {attempt + 1}/{max_retries} in {backoff:.1f}s")
                    time.sleep(backoff)
            raise RuntimeError("Retry loop completed without result")

        return wrapper

    return decorator


def redact(url: str, secret: Optional[str]) -> str:
    """Replace ``secret`` in ``url`` so it can be logged."""
    if not secret:
        return url
    return url.replace(secret, "***")


def fetch_json(
    url: str,
    *,
    reason: str,
    timeout: float,
    retries: int = 0,
    session: Optional[requests.Session] = None,
) -> Any:
    """GET ``url`` and decode its JSON body.

    Raises:
        ConnectionFailure: The request failed or returned an error status
        SerializationFailure: The body is not valid JSON
    """
    http = session or requests

    @with_retries(max_retries=retries)
    def _get() -> requests.Response:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        return response

    try:
        response = _get()
    except requests.RequestException as e:
        logger.error(f"{reason}: {e}")
        raise ConnectionFailure(reason) from e

    try:
        return response.json()
    except ValueError as e:
        logger.error(f"{reason}: invalid JSON body ({e})")
        raise SerializationFailure(reason) from e


def download_to_file(
    url: str,
    dest_dir: Path,
    *,
    prefix: str,
    suffix: str,
    reason: str,
    timeout: float,
    retries: int = 0,
    secret: Optional[str] = None,
    session: Optional[requests.Session] = None,
) -> Path:
    """Stream the body of ``url`` into a new uniquely named file in ``dest_dir``.

    The file name starts with ``prefix`` followed by a nanosecond timestamp so
    overlapping runs never share a path. A partially written file is removed
    before the error propagates.

    Raises:
        ConnectionFailure: The request or the body transfer failed
        IoFailure: The destination file could not be created or written
    """
    http = session or requests
    try:
        fd, name = tempfile.mkstemp(prefix=f"{prefix}-{time.time_ns()}-", suffix=suffix, dir=dest_dir)
    except OSError as e:
        logger.error(f"{reason}: cannot create file in {dest_dir} ({e})")
        raise IoFailure(reason) from e
    path = Path(name)

    @with_retries(max_retries=retries)
    def _transfer() -> int:
        written = 0
        with http.get(url, timeout=timeout, stream=True) as response:
            response.raise_for_status()
            with open(path, "wb") as handle:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        handle.write(chunk)
                        written += len(chunk)
        return written

    logger.info(f"Downloading {redact(url, secret)} -> {path}")
    try:
        os.close(fd)
        written = _transfer()
    except requests.RequestException as e:
        path.unlink(missing_ok=True)
        logger.error(f"{reason}: {redact(str(e), secret)}")
        raise ConnectionFailure(reason) from e
    except OSError as e:
        path.unlink(missing_ok=True)
        logger.error(f"{reason}: {e}")
        raise IoFailure(reason) from e

    logger.debug(f"Downloaded {written} bytes to {path}")
    return path


__all__ = ["with_retries", "redact", "fetch_json", "download_to_file"]
