"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Filesystem mutations used by the organizer: directory creation and non-overwriting moves.
"""
import logging
import os
import shutil
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileService:
    """
    Thin wrappers over os/shutil. Errors are raised as OSError subclasses so the
    organizer can isolate failures per file.
    """

    @staticmethod
    def ensure_directory(path: PathLike) -> Path:
        """Creates the directory and any missing parents."""
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def move(source: PathLike, destination: PathLike) -> Path:
        """
        Moves a file without ever replacing an existing destination.
        On the same filesystem this is a single rename; otherwise shutil copies then deletes.
        """
        source = Path(source)
        destination = Path(destination)

        if not os.path.lexists(source):
            raise FileNotFoundError(f"File not found: {source}")
        if os.path.lexists(destination):
            raise FileExistsError(f"Destination already exists: {destination}")

        FileService.ensure_directory(destination.parent)
        shutil.move(str(source), str(destination))
        logger.debug(f"Moved {source} -> {destination}")
        return destination
