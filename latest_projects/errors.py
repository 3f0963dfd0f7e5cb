"""Exception hierarchy for the latest-projects feed."""

from __future__ import annotations


class FeedError(RuntimeError):
    """Base class for failures that abort a feed run."""


class AuthenticationError(FeedError):
    """Missing token or a token the API rejected."""


class QueryError(FeedError):
    """The GraphQL request failed or returned an unusable payload."""


class StagingFileError(FeedError):
    """The staging README could not be appended to or renamed."""


__all__ = ["FeedError", "AuthenticationError", "QueryError", "StagingFileError"]
