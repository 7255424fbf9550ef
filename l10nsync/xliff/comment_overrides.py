"""Loader for the l10n_comments.txt note override sidecar."""

import logging
from pathlib import Path
from typing import Dict, Mapping, Union

logger = logging.getLogger(__name__)


def parse_comment_overrides(content: str) -> Dict[str, str]:
    """
    Parse ``id=comment`` lines into a mapping.

    Blank lines and lines without a key or an ``=`` are skipped. The comment
    is everything after the first ``=``.
    """
    overrides: Dict[str, str] = {}
    for line in content.splitlines():
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            continue
        overrides[key] = value.strip()
    return overrides


def load_comment_overrides(path: Union[str, Path]) -> Mapping[str, str]:
    """Read the override file, returning an empty mapping if it is missing or unreadable."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No comment overrides at %s", path)
        return {}
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable comment overrides %s: %s", path, e)
        return {}

    overrides = parse_comment_overrides(content)
    logger.debug("Loaded %d comment overrides from %s", len(overrides), path)
    return overrides
