"""
Line scanner port interface defining the contract for substring scans over data files.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from osrs_mcp.entities.records import MatchRecord


class LineScannerPort(ABC):
    """Port interface for scanning a line-oriented file for a search term."""

    @abstractmethod
    def iter_matches(self, file_path: str, search_term: str) -> Iterator[MatchRecord]:
        """
        Lazily yield the lines of a file containing a search term.

        The sequence is single-pass and ordered by line number.

        Args:
            file_path: Path to the file to scan
            search_term: Term to look for (case-insensitive substring)

        Returns:
            Iterator of MatchRecord entities

        Raises:
            DataFileNotFoundError: If the file does not exist
            DataFileReadError: If reading fails mid-scan
        """
        pass

    @abstractmethod
    def scan(self, file_path: str, search_term: str) -> list[MatchRecord]:
        """
        Collect every match of a search term in a file.

        Args:
            file_path: Path to the file to scan
            search_term: Term to look for (case-insensitive substring)

        Returns:
            List of MatchRecord entities in file order

        Raises:
            DataFileNotFoundError: If the file does not exist
            DataFileReadError: If reading fails; no partial result is returned
        """
        pass
