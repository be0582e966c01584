"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/hasher.py
Implements file hashing utilities with pluggable streaming hash algorithms.

HasherImpl streams a whole file through the configured algorithm (SHA-256 by default)
in fixed-size chunks, so memory use does not grow with file size. It also provides a
cheap xxHash64 of the first chunk, used only to prove two files differ.
"""

import hashlib
import logging
from pathlib import Path
from typing import Optional, Union

import xxhash

from chronosort.core.interfaces import ChecksumCalculator, HashAlgorithm
from chronosort.core.models import LayoutConfig
from chronosort.errors import ChecksumError

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new():
        return hashlib.sha256()


class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new():
        return xxhash.xxh64()


class HasherImpl(ChecksumCalculator):
    """
    Computes content fingerprints of files on disk.
    Any failure to open or read a file is raised as ChecksumError; an unreadable file
    must never compare equal to anything.
    """

    def __init__(
        self,
        algorithm: Optional[HashAlgorithm] = None,
        chunk_size: int = LayoutConfig.CHECKSUM_CHUNK_SIZE,
        quick_algorithm: Optional[HashAlgorithm] = None,
        quick_chunk_size: int = LayoutConfig.QUICK_HASH_CHUNK_SIZE,
    ):
        if chunk_size <= 0 or quick_chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size
        self.quick_algorithm = quick_algorithm or XXHashAlgorithmImpl()
        self.quick_chunk_size = quick_chunk_size

    def checksum(self, path: Union[str, Path]) -> str:
        """Returns the lowercase hex digest of the full file content."""
        digest = self.algorithm.new()
        try:
            with open(path, 'rb') as f:
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    digest.update(chunk)
        except OSError as e:
            logger.debug(f"Checksum failed for {path}: {e}")
            raise ChecksumError(f"Failed to compute checksum for {path}: {e}") from e
        return digest.hexdigest()

    def compute_front_hash(self, path: Union[str, Path]) -> str:
        """Hash of the first `quick_chunk_size` bytes. Not a proof of equality."""
        digest = self.quick_algorithm.new()
        try:
            with open(path, 'rb') as f:
                digest.update(f.read(self.quick_chunk_size))
        except OSError as e:
            raise ChecksumError(f"Failed to read {path}: {e}") from e
        return digest.hexdigest()
