from __future__ import annotations

import logging

import requests

from issuescribe_core.errors import DecodeError, TransportError
from issuescribe_core.models import Comment, Issue, decode_comments

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com"


class IssueClient:
    """Read-only access to one issue and its comments.

    Only 200 OK counts as success. There is no retry, no pagination and no
    timeout beyond what requests does by default.
    """

    def __init__(self, token: str | None, base_url: str = DEFAULT_BASE_URL, session: requests.Session | None = None):
        self.base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers["Accept"] = "application/vnd.github+json"
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def __enter__(self) -> IssueClient:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def issue_url(self, owner: str, repo: str, issue_number: str) -> str:
        return f"{self.base_url}/repos/{owner}/{repo}/issues/{issue_number}"

    def _get_json(self, url: str):
        """GET ``url`` and return the decoded JSON body."""
        logger.debug("GET %s", url)
        try:
            resp = self._session.get(url)
        except requests.RequestException as e:
            raise TransportError(f"Failed to send request to {url}: {e}") from e

        logger.debug("GET %s -> %s", url, resp.status_code)
        if resp.status_code != 200:
            raise TransportError(
                f"Request failed with status: {resp.status_code} {resp.reason}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(f"Failed to parse response body from {url}: {e}") from e

    def get_issue(self, owner: str, repo: str, issue_number: str) -> Issue:
        return Issue.from_dict(self._get_json(self.issue_url(owner, repo, issue_number)))

    def get_comments(self, owner: str, repo: str, issue_number: str) -> list[Comment]:
        """Return the first page of comments, oldest first."""
        return decode_comments(self._get_json(self.issue_url(owner, repo, issue_number) + "/comments"))
