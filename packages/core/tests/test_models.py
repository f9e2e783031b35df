"""Tests for decoding issue and comment payloads."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from issuescribe_core.errors import DecodeError
from issuescribe_core.models import ZERO_TIME, Comment, Issue, decode_comments


def _issue_payload(**overrides):
    payload = {
        "title": "T",
        "body": "B",
        "user": {"login": "u", "id": 1},
        "created_at": "2024-01-02T03:04:05Z",
        "updated_at": "2024-02-03T04:05:06Z",
        "state": "open",
        "labels": [],
    }
    payload.update(overrides)
    return payload


class TestIssueFromDict:
    def test_decodes_known_fields(self):
        issue = Issue.from_dict(_issue_payload())
        assert issue.title == "T"
        assert issue.body == "B"
        assert issue.author_login == "u"
        assert issue.created_at == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert issue.updated_at == datetime(2024, 2, 3, 4, 5, 6, tzinfo=timezone.utc)

    def test_null_body_decodes_to_empty_string(self):
        assert Issue.from_dict(_issue_payload(body=None)).body == ""

    def test_missing_user_decodes_to_empty_login(self):
        payload = _issue_payload()
        del payload["user"]
        assert Issue.from_dict(payload).author_login == ""

    def test_missing_timestamp_decodes_to_zero_time(self):
        payload = _issue_payload()
        del payload["updated_at"]
        assert Issue.from_dict(payload).updated_at == ZERO_TIME

    def test_keeps_explicit_offset(self):
        issue = Issue.from_dict(_issue_payload(created_at="2024-01-02T03:04:05+02:00"))
        assert issue.created_at.utcoffset() == timedelta(hours=2)
        assert issue.created_at.hour == 3

    def test_non_object_payload_raises(self):
        with pytest.raises(DecodeError):
            Issue.from_dict([_issue_payload()])

    def test_wrong_title_type_raises(self):
        with pytest.raises(DecodeError, match="title"):
            Issue.from_dict(_issue_payload(title=42))

    def test_wrong_user_type_raises(self):
        with pytest.raises(DecodeError, match="user"):
            Issue.from_dict(_issue_payload(user="u"))

    def test_bad_timestamp_raises(self):
        with pytest.raises(DecodeError, match="created_at"):
            Issue.from_dict(_issue_payload(created_at="yesterday"))

    def test_lone_surrogate_replaced(self):
        issue = Issue.from_dict(json.loads('{"title": "T", "body": "bad \\ud83d end"}'))
        assert issue.body == "bad \ufffd end"
        issue.body.encode("utf-8")

    def test_surrogate_pair_kept(self):
        issue = Issue.from_dict(json.loads('{"title": "smile \\ud83d\\ude00"}'))
        assert issue.title == "smile \U0001f600"


class TestDecodeComments:
    def test_preserves_server_order(self):
        comments = decode_comments(
            [
                {"body": "first", "user": {"login": "a"}, "created_at": "2024-01-01T00:00:00Z"},
                {"body": "second", "user": {"login": "b"}, "created_at": "2023-01-01T00:00:00Z"},
            ]
        )
        assert [c.body for c in comments] == ["first", "second"]
        assert [c.author_login for c in comments] == ["a", "b"]

    def test_empty_list(self):
        assert decode_comments([]) == []

    def test_non_list_raises(self):
        with pytest.raises(DecodeError, match="list"):
            decode_comments({"message": "Not Found"})

    def test_non_object_element_raises(self):
        with pytest.raises(DecodeError):
            decode_comments(["hello"])

    def test_comment_ignores_unknown_fields(self):
        comment = Comment.from_dict(
            {"body": "x", "user": {"login": "a"}, "created_at": "2024-01-01T00:00:00Z", "reactions": {}}
        )
        assert comment == Comment(
            body="x", author_login="a", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc)
        )
