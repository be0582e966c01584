"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/resolver.py
Collision-free destination paths: name.ext -> name_1.ext -> name_2.ext ...
"""

import os
from pathlib import Path

from chronosort.core.interfaces import PathResolver
from chronosort.core.namer import split_extension


class UniquePathResolverImpl(PathResolver):

    def __init__(self, separator: str = "_"):
        self.separator = separator

    def unique_path(self, candidate: Path) -> Path:
        """
        Return candidate if nothing (not even a dangling link) exists there, otherwise the first free
        sibling with an ascending numeric suffix before the extension.
        """
        candidate = Path(candidate)
        if not os.path.lexists(candidate):
            return candidate

        base, extension = split_extension(candidate.name)
        parent = candidate.parent
        counter = 1
        while True:
            probe = parent / f"{base}{self.separator}{counter}{extension}"
            if not os.path.lexists(probe):
                return probe
            counter += 1
