# errors.py  (2026-10-12)
"""Fatal error types. Skipped links are not errors and never land here."""

from __future__ import annotations


class GraphBuildError(Exception):
    """Base class for anything that should abort a run."""


class ConfigError(GraphBuildError):
    pass


class FetchError(GraphBuildError):
    """GET failed at the network level or came back with a non-2xx status."""

    def __init__(self, url: str, reason: str, status: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f"Fetch {url} -> {status if status is not None else reason}")


class FeedError(GraphBuildError):
    pass


class EmptyFeedError(GraphBuildError):
    pass
