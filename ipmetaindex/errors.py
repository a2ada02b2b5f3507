"""Failure taxonomy for index builds.

Step failures (network, JSON shape, filesystem, archive) abort the current
build and carry a short ``reason`` meant for the scheduler's report. Row-level
problems use :class:`RowParseError` and never leave the file pass that raised
them.
"""

from __future__ import annotations


class IndexBuildError(RuntimeError):
    """A build step failed; prior store contents must be left untouched."""

    def __init__(self, reason: str) -> None:
        """Create the error with the terse, operator-facing reason."""
        super().__init__(reason)
        self.reason = reason


class ConnectionFailure(IndexBuildError):
    """Network fetch failed or timed out."""


class SerializationFailure(IndexBuildError):
    """A JSON document did not match the expected vendor schema."""


class IoFailure(IndexBuildError):
    """Filesystem read, write or create failed."""


class ArchiveFailure(IndexBuildError):
    """Archive extraction failed: corrupt, unsupported or ambiguous layout."""


class RowParseError(ValueError):
    """A single CSV row or field could not be interpreted."""


__all__ = [
    "IndexBuildError",
    "ConnectionFailure",
    "SerializationFailure",
    "IoFailure",
    "ArchiveFailure",
    "RowParseError",
]
