"""Exceptions raised by issuescribe_core.

Nothing in the core terminates the process. Every failure is raised as one of
these and handed to the CLI, which turns it into a single error exit.
"""

from __future__ import annotations


class IssueScribeError(Exception):
    """Base class for every core failure."""


class ConfigurationError(IssueScribeError):
    """Missing credential or an unusable settings file."""


class TransportError(IssueScribeError):
    """The request could not be sent, or the server did not answer 200 OK."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(IssueScribeError):
    """A response body was not the JSON shape we expect."""


class OutputError(IssueScribeError):
    """The transcript file could not be created or written."""
