"""
Use case for describing a file in the data directory.
"""

import logging
from typing import Any, Optional

from osrs_mcp.exceptions import DataFileNotFoundError, FileRepositoryError
from osrs_mcp.ports.files.data_file_repository_port import DataFileRepositoryPort


class GetFileDetailsUseCase:
    """Use case for reporting size, line count and timestamps of a data file."""

    def __init__(
        self,
        repository: DataFileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, filename: str) -> dict[str, Any]:
        """
        Get the details of a data file.

        Missing files are reported as ``{"exists": False}``; files that exist but
        cannot be read add an ``error`` entry instead of raising.

        Args:
            filename: Bare filename, already validated against traversal

        Returns:
            Dictionary with file details
        """
        try:
            return self._repository.get_file(filename).get_details()
        except DataFileNotFoundError:
            return {"exists": False}
        except FileRepositoryError as e:
            self._logger.error(f"Error getting file details for {filename}: {e}")
            return {"exists": False, "error": "Error getting file details"}
