"""
Data file domain entity.
"""

import os
from datetime import datetime, timezone
from typing import Any

from osrs_mcp.exceptions import DataFileNotFoundError, DataFileReadError


def _iso_utc(moment: datetime) -> str:
    """ISO 8601 UTC timestamp with milliseconds and a trailing Z, e.g. 2024-05-01T12:00:00.000Z."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DataFile:
    """
    Line-oriented text file in the data directory.
    """

    def __init__(self, path: str):
        """
        Initialize the DataFile entity.

        Args:
            path: Path to the data file

        Raises:
            DataFileNotFoundError: If the file does not exist
            DataFileReadError: If the file metadata cannot be read
        """
        if not path or not os.path.isfile(path):
            raise DataFileNotFoundError(path)

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)
        try:
            st = os.stat(self.path)
        except OSError as e:
            raise DataFileReadError(self.path, e) from e
        self.size = st.st_size
        self.created = self._find_created(st)
        self.last_modified = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)

    @staticmethod
    def _find_created(st: os.stat_result) -> datetime:
        """Birth time where the platform records one, else the inode change time."""
        ts = getattr(st, "st_birthtime", None)
        if ts is None:
            ts = st.st_ctime
        return datetime.fromtimestamp(ts, tz=timezone.utc)

    def count_lines(self) -> int:
        """
        Count newline-separated segments in the file.

        A file ending with a newline counts one extra empty segment, and an
        empty file counts as one line.

        Raises:
            DataFileReadError: If the file cannot be read
        """
        count = 1
        try:
            with open(self.path, "rb") as f:
                for chunk in iter(lambda: f.read(1 << 16), b""):
                    count += chunk.count(b"\n")
        except OSError as e:
            raise DataFileReadError(self.path, e) from e
        return count

    def get_details(self) -> dict[str, Any]:
        """
        Get the file details reported by the get_file_details tool.

        Returns:
            Dictionary with file information
        """
        return {
            "exists": True,
            "size": self.size,
            "lineCount": self.count_lines(),
            "created": _iso_utc(self.created),
            "lastModified": _iso_utc(self.last_modified),
        }

    def __str__(self) -> str:
        return f"DataFile(name='{self.name}', size={self.size})"

    def __repr__(self) -> str:
        return f"DataFile(path='{self.path}')"
