"""Issue and comment records decoded from the REST API.

Only the fields the transcript needs are kept; everything else in the payload
is ignored. Missing or null strings decode to "", missing or null timestamps
to ZERO_TIME. A field of the wrong JSON type is a DecodeError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from issuescribe_core.errors import DecodeError

ZERO_TIME = datetime(1, 1, 1)

# json.loads keeps unpaired \uD800-\uDFFF escapes; they cannot be encoded as UTF-8.
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _string(payload: dict, key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"Field {key!r} must be a string, got {type(value).__name__}")
    return _LONE_SURROGATE_RE.sub("\ufffd", value)


def _timestamp(payload: dict, key: str) -> datetime:
    value = payload.get(key)
    if value is None:
        return ZERO_TIME
    if not isinstance(value, str):
        raise DecodeError(f"Field {key!r} must be a timestamp string, got {type(value).__name__}")
    try:
        # fromisoformat() only learned the "Z" suffix in 3.11.
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise DecodeError(f"Field {key!r} is not an RFC 3339 timestamp: {value!r}") from e


def _login(payload: dict) -> str:
    user = payload.get("user")
    if user is None:
        return ""
    if not isinstance(user, dict):
        raise DecodeError(f"Field 'user' must be an object, got {type(user).__name__}")
    return _string(user, "login")


@dataclass
class Issue:
    """An issue or pull request header."""

    title: str
    body: str
    author_login: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dict(cls, payload) -> Issue:
        if not isinstance(payload, dict):
            raise DecodeError(f"Expected an issue object, got {type(payload).__name__}")
        return cls(
            title=_string(payload, "title"),
            body=_string(payload, "body"),
            author_login=_login(payload),
            created_at=_timestamp(payload, "created_at"),
            updated_at=_timestamp(payload, "updated_at"),
        )


@dataclass
class Comment:
    """A single reply in an issue thread."""

    body: str
    author_login: str
    created_at: datetime

    @classmethod
    def from_dict(cls, payload) -> Comment:
        if not isinstance(payload, dict):
            raise DecodeError(f"Expected a comment object, got {type(payload).__name__}")
        return cls(
            body=_string(payload, "body"),
            author_login=_login(payload),
            created_at=_timestamp(payload, "created_at"),
        )


def decode_comments(payload) -> list[Comment]:
    """Decode a comments array, keeping the server's order."""
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a list of comments, got {type(payload).__name__}")
    return [Comment.from_dict(item) for item in payload]
