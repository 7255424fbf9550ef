"""Locale discovery in the l10n repository."""

import os
from pathlib import Path
from typing import List, Union

from ..errors import DirectoryListingFailed

TEMPLATES_DIR = "templates"


def discover_locales(l10n_path: Union[str, Path]) -> List[str]:
    """
    List the locale codes present in the l10n repository.

    Every visible subdirectory except ``templates`` is a locale.

    Returns:
        Sorted list of locale codes

    Raises:
        DirectoryListingFailed: If the directory cannot be read
    """
    try:
        with os.scandir(l10n_path) as entries:
            names = [
                entry.name
                for entry in entries
                if entry.is_dir() and not entry.name.startswith(".")
            ]
    except OSError as e:
        raise DirectoryListingFailed(str(l10n_path), e) from e

    return sorted(name for name in names if name != TEMPLATES_DIR)
