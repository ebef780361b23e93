"""Exception hierarchy for the tracker backend."""

from __future__ import annotations

from typing import Any


class TrackerError(Exception):
    """Base exception for all tracker errors."""


class IngestError(TrackerError):
    """A location report could not be ingested."""


class MalformedReport(IngestError):
    """The payload is not a valid delimited location report."""

    def __init__(
        self,
        message: str,
        *,
        received: str = "",
        data: dict[str, Any] | None = None,
    ) -> None:
        self.received = received
        self.data = data
        super().__init__(message)


class StoreError(IngestError):
    """The location store rejected or failed a write."""
