"""Filesystem helpers."""

from __future__ import annotations

import os
from pathlib import Path


def create_dir_if_not_exists(path: str | os.PathLike[str]) -> Path:
    """Create the directory at *path* unless something already exists there.

    Only the last component is created; a missing parent raises
    FileNotFoundError.
    """
    directory = Path(path)
    if not directory.exists():
        directory.mkdir()
    return directory