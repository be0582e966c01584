"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/root_lock.py
Advisory per-root locking so that two organize runs never work on the same tree at once.

The lock file lives in the system temp directory, named after the SHA-256 of the
resolved root path, so it is never inside the tree being organized.
The file is never deleted: a run that opened it before a release must lock the same
inode the next run will open. Releasing only truncates the holder line.

Usage:
    with RootLock("/data/photos"):
        ...  # organize
"""

import hashlib
import logging
import os
import platform
import socket
import tempfile
from pathlib import Path
from typing import Optional, Union

from chronosort.errors import RootLockedError

logger = logging.getLogger(__name__)

LOCK_FILE_PREFIX = "chronosort-"


class RootLock:
    """
    Non-blocking exclusive lock keyed by the canonical root path.
    Uses fcntl.flock on Unix and msvcrt.locking on Windows.
    """

    def __init__(self, root: Union[str, Path], lock_dir: Optional[Path] = None):
        self.root = Path(root).resolve()
        self.lock_dir = Path(lock_dir) if lock_dir is not None else Path(tempfile.gettempdir())
        key = hashlib.sha256(os.fsencode(self.root)).hexdigest()[:32]
        self.lock_file_path = self.lock_dir / f"{LOCK_FILE_PREFIX}{key}.lock"
        self.owner = f"{os.getpid()}@{socket.gethostname()}"
        self._lock_fd: Optional[int] = None

    @property
    def is_held(self) -> bool:
        return self._lock_fd is not None

    def acquire(self) -> None:
        """
        Raises:
            RootLockedError: another process holds the lock for this root
        """
        if self._lock_fd is not None:
            return

        self.lock_dir.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.lock_file_path, os.O_CREAT | os.O_RDWR)
        try:
            self._lock_exclusive(fd)
        except OSError:
            os.close(fd)
            holder = self._read_holder()
            logger.error(f"Root {self.root} is locked by {holder} ({self.lock_file_path})")
            raise RootLockedError(
                f"Another organize run is in progress for {self.root} (held by {holder})"
            )

        os.ftruncate(fd, 0)
        os.write(fd, f"{self.owner}\n".encode("utf-8") + os.fsencode(self.root) + b"\n")
        self._lock_fd = fd
        logger.debug(f"Acquired root lock {self.lock_file_path} for {self.root}")

    def release(self) -> None:
        if self._lock_fd is None:
            return

        fd, self._lock_fd = self._lock_fd, None
        try:
            os.ftruncate(fd, 0)
        except OSError as e:
            logger.warning(f"Could not clear lock file {self.lock_file_path}: {e}")
        finally:
            try:
                self._unlock(fd)
            finally:
                os.close(fd)
        logger.debug(f"Released root lock for {self.root}")

    def __enter__(self) -> "RootLock":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def _read_holder(self) -> str:
        try:
            with open(self.lock_file_path, "r", encoding="utf-8", errors="replace") as f:
                return f.readline().strip() or "unknown"
        except OSError:
            return "unknown"

    @staticmethod
    def _lock_exclusive(fd: int) -> None:
        if platform.system() == "Windows":
            import msvcrt
            msvcrt.locking(fd, msvcrt.LK_NBLCK, 1)
        else:
            import fcntl
            fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)

    @staticmethod
    def _unlock(fd: int) -> None:
        try:
            if platform.system() == "Windows":
                import msvcrt
                os.lseek(fd, 0, os.SEEK_SET)
                msvcrt.locking(fd, msvcrt.LK_UNLCK, 1)
            else:
                import fcntl
                fcntl.flock(fd, fcntl.LOCK_UN)
        except OSError as e:
            logger.debug(f"Unlock failed (lock may already be released): {e}")
