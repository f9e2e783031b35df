"""Access token resolution.

The token comes from a single environment variable, GITHUB_ACCESS_TOKEN by
default (``token_env`` in .issuescribe.yml renames it). There is no fallback
to other credential sources.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_ENV = "GITHUB_ACCESS_TOKEN"


def resolve_access_token(env_var: str = DEFAULT_TOKEN_ENV) -> str | None:
    """Return the token from ``env_var``, or None when unset or empty.

    Never raises; callers should check for None and fail the run.
    """
    token = os.environ.get(env_var)
    if token:
        logger.debug("Resolved access token from $%s.", env_var)
        return token
    return None
