"""ParameterCache: remembers the last-used repository coordinates.

Data format: a single pretty-printed JSON object in the working directory::

    {
      "owner": "octocat",
      "repo": "hello-world",
      "issueNumber": "42"
    }

The file is rewritten in full on every run. Owner and repo are validated only
when the file already exists; a freshly created cache takes the command-line
values as they are, even when they are empty.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from issuescribe_store.models import ParameterSet

logger = logging.getLogger(__name__)

DEFAULT_CACHE_FILENAME = "github-comments-fetcher-inputs.txt"

_KEYS = (("owner", "owner"), ("repo", "repo"), ("issueNumber", "issue_number"))


class CacheError(Exception):
    """The cache file could not be read, parsed or written."""


class IncompleteCacheError(CacheError):
    """An existing cache file has an empty owner or repo."""


def resolve_cache_path(filename: str = DEFAULT_CACHE_FILENAME) -> Path:
    """Return ``filename`` joined onto the current working directory."""
    try:
        cwd = Path.cwd()
    except OSError as e:
        raise CacheError(f"failed to get current directory: {e}") from e
    return cwd / filename


class ParameterCache:
    """Reads and writes a ParameterSet as JSON at a fixed path."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> ParameterSet:
        """Read the cache file. Missing or null keys load as empty strings."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CacheError(f"failed to read inputs from file: {e}") from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CacheError(f"failed to parse inputs from file: {e}") from e

        if not isinstance(data, dict):
            raise CacheError(f"failed to parse inputs from file: expected a JSON object in {self.path}")

        values = {}
        for key, attr in _KEYS:
            value = data.get(key)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise CacheError(f"failed to parse inputs from file: {key!r} must be a string, got {value!r}")
            values[attr] = value
        return ParameterSet(**values)

    def save(self, params: ParameterSet) -> None:
        """Overwrite the cache file with ``params``."""
        try:
            self.path.write_text(json.dumps(params.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            raise CacheError(f"failed to write inputs to file: {e}") from e
        logger.debug("Wrote parameter cache %s", self.path)

    def resolve(self, overrides: ParameterSet) -> ParameterSet:
        """Merge command-line ``overrides`` with the cache and persist the result.

        Raises IncompleteCacheError when an existing cache has no owner or
        repo; this check runs before the overrides are applied.
        """
        if self.exists():
            cached = self.load()
            if not cached.owner or not cached.repo:
                raise IncompleteCacheError(
                    f"The 'owner' and 'repo' fields in {self.path.name} cannot be empty"
                )
            params = cached.merged_with(overrides)
        else:
            params = ParameterSet(
                owner=overrides.owner,
                repo=overrides.repo,
                issue_number=overrides.issue_number,
            )

        self.save(params)
        logger.debug(
            "Resolved parameters owner=%r repo=%r issue_number=%r",
            params.owner,
            params.repo,
            params.issue_number,
        )
        return params


def resolve_parameters(overrides: ParameterSet, filename: str = DEFAULT_CACHE_FILENAME) -> ParameterSet:
    """Resolve the run's parameters against the cache file in the working directory."""
    return ParameterCache(resolve_cache_path(filename)).resolve(overrides)
