"""
Local file system line scanner: streams a text file and yields the lines containing a term.
"""

import logging
import os
from collections.abc import Iterator

from typing_extensions import override

from osrs_mcp.entities.records import MatchRecord
from osrs_mcp.exceptions import DataFileNotFoundError, DataFileReadError
from osrs_mcp.ports.files.line_scanner_port import LineScannerPort


def normalize_search_term(search_term: str) -> str:
    """
    Turn a caller's search term into the lowercase needle matched against lines.

    Only the first space becomes an underscore ("dragon scimitar" ->
    "dragon_scimitar"); later spaces are kept as typed. Multi-word names in the
    data files use underscores, so terms with two or more spaces usually match
    nothing. This mirrors the behaviour clients already depend on.
    """
    return search_term.replace(" ", "_", 1).lower()


class LocalLineScanner(LineScannerPort):
    """Line scanner reading UTF-8 files from the local file system."""

    def __init__(self, logger: logging.Logger | None = None, encoding: str = "utf-8"):
        """
        Initialize the scanner.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            encoding: Text encoding of the scanned files
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._encoding = encoding

    def _generate(self, file_path: str, needle: str) -> Iterator[MatchRecord]:
        try:
            # newline=None: "\r\n", "\r" and "\n" all end a line
            with open(file_path, "r", encoding=self._encoding, newline=None) as f:
                for line_number, raw in enumerate(f, start=1):
                    line = raw[:-1] if raw.endswith("\n") else raw
                    if needle in line.lower():
                        yield MatchRecord(line, line_number)
        except FileNotFoundError as e:
            raise DataFileNotFoundError(file_path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise DataFileReadError(file_path, e) from e

    @override
    def iter_matches(self, file_path: str, search_term: str) -> Iterator[MatchRecord]:
        """
        Lazily yield the lines of a file containing a search term.

        The existence check runs immediately; reading starts on first iteration.

        Args:
            file_path: Path to the file to scan
            search_term: Term to look for (case-insensitive substring)

        Returns:
            Single-pass iterator of MatchRecord entities in file order

        Raises:
            DataFileNotFoundError: If the file does not exist
            DataFileReadError: If reading fails mid-scan (raised during iteration)
        """
        if not os.path.exists(file_path):
            raise DataFileNotFoundError(file_path)
        return self._generate(file_path, normalize_search_term(search_term))

    @override
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
        matches = list(self.iter_matches(file_path, search_term))
        self._logger.debug(f"Scanned {file_path}: {len(matches)} lines match '{search_term}'")
        return matches
