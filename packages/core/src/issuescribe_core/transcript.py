"""Plain-text rendering of an issue thread.

Layout::

    Issue Title: <title>
    Issue Body: <body>
    Issue Author: <login>
    Created At: 2024-01-02 03:04:05
    Updated At: 2024-01-02 03:04:05

    Comment 1 by <login> at 2024-01-02 03:04:05:
    <body>

    Comment 2 by <login> at 2024-01-02 03:04:05:
    <body>
"""

from __future__ import annotations

from datetime import datetime
from typing import TextIO

from issuescribe_core.models import Comment, Issue


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as YYYY-MM-DD HH:MM:SS in the offset it carries."""
    # isoformat() zero-pads the year; strftime("%Y") does not on every platform.
    return value.replace(tzinfo=None, microsecond=0).isoformat(sep=" ")


def format_issue(issue: Issue) -> str:
    return (
        f"Issue Title: {issue.title}\n"
        f"Issue Body: {issue.body}\n"
        f"Issue Author: {issue.author_login}\n"
        f"Created At: {format_timestamp(issue.created_at)}\n"
        f"Updated At: {format_timestamp(issue.updated_at)}\n\n"
    )


def format_comment(index: int, comment: Comment) -> str:
    """Render one comment block; ``index`` is 1-based."""
    return f"Comment {index} by {comment.author_login} at {format_timestamp(comment.created_at)}:\n{comment.body}\n"


def write_issue(fh: TextIO, issue: Issue) -> None:
    fh.write(format_issue(issue))


def write_comments(fh: TextIO, comments: list[Comment]) -> None:
    for i, comment in enumerate(comments):
        if i > 0:
            fh.write("\n")
        fh.write(format_comment(i + 1, comment))
