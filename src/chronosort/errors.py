"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

errors.py
Exception hierarchy shared by the engine, the command layer and the CLI.
"""


class ChronoSortError(Exception):
    """Base error for chronosort."""


class InvalidRootError(ChronoSortError, ValueError):
    """Root path is missing or is not a directory. Raised before any file is touched."""


class RootLockedError(ChronoSortError, RuntimeError):
    """Another organize run currently holds the lock for the same root."""


class ChecksumError(ChronoSortError, OSError):
    """File could not be opened or read while computing its digest."""
