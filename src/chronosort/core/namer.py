"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/namer.py
Derives canonical destination segments from a file name and its modification time.

    photo.JPG modified 2023-05-01 10:00:00.000
      -> type "jpg", 2023 / 05 / 01, name "photo_20230501100000000.JPG"
"""

from datetime import datetime
from typing import Optional, Tuple, Union

from chronosort.core.interfaces import PathNamer
from chronosort.core.models import Classification, NamingPolicy, DEFAULT_NAMING_POLICY


class PathNamerImpl(PathNamer):
    """
    Pure naming service. Output depends only on (filename, modified_time) and the policy,
    so re-classifying an unmoved file reproduces the same destination.
    """

    def __init__(self, policy: Optional[NamingPolicy] = None):
        self.policy = policy or DEFAULT_NAMING_POLICY

    def classify(self, filename: str, modified_time: Union[datetime, float]) -> Classification:
        moment = self._to_local_datetime(modified_time)
        return Classification(
            type_tag=self.type_tag(filename),
            year=f"{moment.year:04d}",
            month=f"{moment.month:02d}",
            day=f"{moment.day:02d}",
            timestamped_name=self.timestamped_name(filename, moment),
        )

    def type_tag(self, filename: str) -> str:
        """Lower-cased text after the last dot, or the policy's unknown tag."""
        dot = filename.rfind('.')
        if dot <= 0 or dot == len(filename) - 1:
            return self.policy.unknown_type_tag
        return filename[dot + 1:].lower()

    def timestamped_name(self, filename: str, moment: datetime) -> str:
        base, extension = split_extension(filename)
        timestamp = self.policy.format_timestamp(moment)
        return f"{base}{self.policy.separator}{timestamp}{extension}"

    @staticmethod
    def _to_local_datetime(modified_time: Union[datetime, float]) -> datetime:
        if isinstance(modified_time, datetime):
            if modified_time.tzinfo is not None:
                return modified_time.astimezone().replace(tzinfo=None)
            return modified_time
        return datetime.fromtimestamp(modified_time)


def split_extension(filename: str) -> Tuple[str, str]:
    """
    Split at the last dot; the extension keeps its dot.
    Unlike os.path.splitext, a leading dot is a split point too: ".bashrc" -> ("", ".bashrc").
    """
    dot = filename.rfind('.')
    if dot == -1:
        return filename, ""
    return filename[:dot], filename[dot:]
