"""File operations shared by the localization tasks.

Every writer in the pipeline goes through this module so that a destination
is either fully replaced or left exactly as it was.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Union

from .errors import (
    CopyFailed,
    DeleteFailed,
    DirectoryCreateFailed,
    ReplaceFailed,
    WriteFailed,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

TEMP_PREFIX = ".l10n-temp-"


def _make_temp_file(directory: Path, suffix: str) -> Path:
    """Reserve a uniquely named file in ``directory`` and return its path."""
    fd, name = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=suffix, dir=directory)
    os.close(fd)
    return Path(name)


def copy_with_replace(source: PathLike, destination: PathLike) -> Path:
    """
    Copy a file to a destination, replacing any existing file.

    The source is first copied to a temporary file next to the destination
    (same filesystem), which is then swapped in with ``os.replace``.

    Args:
        source: File to copy
        destination: Where the file should end up

    Returns:
        Path of the resulting file

    Raises:
        CopyFailed: If the temporary copy could not be made
        ReplaceFailed: If the swap into place failed. The temporary copy is
            left on disk and its path is available as ``temp_path``.
    """
    source = Path(source)
    destination = Path(destination)
    create_directory_if_needed(destination.parent)

    temp_file = None
    try:
        temp_file = _make_temp_file(destination.parent, source.suffix)
        shutil.copy(source, temp_file)
    except OSError as e:
        if temp_file is not None:
            temp_file.unlink(missing_ok=True)
        raise CopyFailed(str(source), str(temp_file or destination), e) from e

    try:
        os.replace(temp_file, destination)
    except OSError as e:
        raise ReplaceFailed(str(destination), e, temp_path=str(temp_file)) from e

    logger.debug("Copied %s to %s", source, destination)
    return destination


def discard_abandoned_copy(error: ReplaceFailed) -> None:
    """Best-effort removal of the temporary copy left behind by a failed replace."""
    if not error.temp_path:
        return
    try:
        remove_if_exists(error.temp_path)
    except DeleteFailed as e:
        logger.warning("Could not clean up %s: %s", error.temp_path, e)


def write_atomically(path: PathLike, content: bytes) -> Path:
    """
    Write bytes to a file via a temporary sibling and an atomic rename.

    Raises:
        WriteFailed: If the content could not be written or moved into place
    """
    path = Path(path)
    temp_file = None
    try:
        temp_file = _make_temp_file(path.parent, path.suffix)
        temp_file.write_bytes(content)
        if path.exists():
            shutil.copymode(path, temp_file)
        else:
            os.chmod(temp_file, 0o644)
        os.replace(temp_file, path)
    except OSError as e:
        if temp_file is not None:
            temp_file.unlink(missing_ok=True)
        raise WriteFailed(str(path), e) from e
    return path


def remove_if_exists(path: PathLike) -> None:
    """
    Remove a file if it exists.

    Raises:
        DeleteFailed: If the file exists but cannot be deleted
    """
    path = Path(path)
    if not path.exists():
        return
    try:
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as e:
        raise DeleteFailed(str(path), e) from e


def create_directory_if_needed(path: PathLike) -> None:
    """
    Create a directory and any missing parents.

    Raises:
        DirectoryCreateFailed: If the directory could not be created
    """
    path = Path(path)
    if path.is_dir():
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateFailed(str(path), e) from e
