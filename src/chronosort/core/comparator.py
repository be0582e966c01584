"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Content comparison for destination collisions.

STAGES
------
Size        : different sizes can never be identical (no I/O beyond stat)
Front Hash  : xxHash64 of the first chunk; a mismatch proves the files differ
Full Hash   : SHA-256 over the whole content; the only stage that can confirm equality

Early stages only ever reject. Two files are reported identical iff their full digests match.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from chronosort.core.hasher import HasherImpl
from chronosort.core.interfaces import ChecksumCalculator, ContentComparator

logger = logging.getLogger(__name__)


class ContentComparatorImpl(ContentComparator):

    def __init__(self, hasher: Optional[ChecksumCalculator] = None):
        self.hasher = hasher or HasherImpl()

    def are_identical(self, first: Union[str, Path], second: Union[str, Path]) -> bool:
        if os.path.getsize(first) != os.path.getsize(second):
            logger.debug(f"Size mismatch: {first} vs {second}")
            return False

        if self.hasher.compute_front_hash(first) != self.hasher.compute_front_hash(second):
            logger.debug(f"Front hash mismatch: {first} vs {second}")
            return False

        return self.hasher.checksum(first) == self.hasher.checksum(second)
