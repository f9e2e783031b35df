"""Fetch one issue thread and write it out as a transcript."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from issuescribe_core.errors import OutputError
from issuescribe_core.gh.client import DEFAULT_BASE_URL, IssueClient
from issuescribe_core.transcript import write_comments, write_issue

logger = logging.getLogger(__name__)


@dataclass
class ThreadSummary:
    """What fetch_thread wrote, for the CLI to report."""

    output_path: Path
    title: str
    total_comments: int


def fetch_thread(
    owner: str,
    repo: str,
    issue_number: str,
    token: str | None,
    output_path: str | Path = "comments.txt",
    base_url: str = DEFAULT_BASE_URL,
    client: IssueClient | None = None,
) -> ThreadSummary:
    """Download the issue and its comments into ``output_path``.

    The output file is only created once the issue itself has been fetched.
    Comments are requested afterwards, so a failed comments request leaves a
    transcript holding just the issue header.
    """
    output_path = Path(output_path)
    client = client or IssueClient(token, base_url=base_url)

    with client:
        issue = client.get_issue(owner, repo, issue_number)

        try:
            fh = open(output_path, "w", encoding="utf-8", newline="")
        except OSError as e:
            raise OutputError(f"Failed to create file {output_path}: {e}") from e

        with fh:
            try:
                write_issue(fh, issue)
            except (OSError, UnicodeError) as e:
                raise OutputError(f"Failed to write issue details to file: {e}") from e

            comments = client.get_comments(owner, repo, issue_number)

            try:
                write_comments(fh, comments)
            except (OSError, UnicodeError) as e:
                raise OutputError(f"Failed to write comments to file: {e}") from e

    logger.debug("Wrote issue and %d comments to %s", len(comments), output_path)
    return ThreadSummary(output_path=output_path, title=issue.title, total_comments=len(comments))
