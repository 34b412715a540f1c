# src/concatener/utils/paths.py
"""
paths – Small, centralized path helpers for concatener.

Provides:
  • expand_home(token)            – '~/' shorthand expansion from $HOME
  • has_separator(token)          – path separator detection
  • split_last_separator(token)   – (directory, tail) split at the last separator
  • fs_sort_key(path)             – byte-wise ordering key for resolved paths
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional, Tuple

from concatener.constants import HOME_ENV_VAR, HOME_SHORTHAND, PATH_SEPARATORS


def expand_home(token: str, env: Optional[Mapping[str, str]] = None) -> str:
    """Replace a leading '~/' with the home directory, if it is known.

    The token is returned untouched when it does not start with the shorthand
    or when the home variable is unset.
    """
    env = os.environ if env is None else env
    if not any(token.startswith(HOME_SHORTHAND + sep) for sep in PATH_SEPARATORS):
        return token
    home = env.get(HOME_ENV_VAR)
    if not home:
        return token
    return home + token[len(HOME_SHORTHAND):]


def has_separator(token: str) -> bool:
    return any(sep in token for sep in PATH_SEPARATORS)


def split_last_separator(token: str) -> Tuple[Optional[str], str]:
    """Split *token* at its last separator.

    Returns ``(None, token)`` when there is no separator. An empty directory
    part (``/name``) is reported as the separator itself, i.e. the root.
    """
    idx = max(token.rfind(sep) for sep in PATH_SEPARATORS)
    if idx < 0:
        return None, token
    head, tail = token[:idx], token[idx + 1:]
    return (head or token[idx]), tail


def split_segments(token: str) -> list[str]:
    """Split *token* on every separator, keeping empty segments."""
    parts = [token]
    for sep in PATH_SEPARATORS:
        parts = [chunk for part in parts for chunk in part.split(sep)]
    return parts


def fs_sort_key(path: Path) -> bytes:
    """Byte-wise key so ordering matches a plain comparison of path strings."""
    return os.fsencode(str(path))
