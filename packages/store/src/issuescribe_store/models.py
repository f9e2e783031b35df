"""Parameter cache data model.

Decoupled from issuescribe_core so the cache can be read and written without
pulling in the HTTP client, and the core has no knowledge of where the
repository coordinates came from.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParameterSet:
    """Repository coordinates for a single run.

    All three fields are strings, including ``issue_number``. An empty string
    means "not supplied" when the set carries command-line overrides.
    """

    owner: str = ""
    repo: str = ""
    issue_number: str = ""

    def merged_with(self, overrides: ParameterSet) -> ParameterSet:
        """Return a copy where every non-empty field of ``overrides`` wins."""
        return ParameterSet(
            owner=overrides.owner or self.owner,
            repo=overrides.repo or self.repo,
            issue_number=overrides.issue_number or self.issue_number,
        )

    def to_dict(self) -> dict:
        return {"owner": self.owner, "repo": self.repo, "issueNumber": self.issue_number}
