"""
Use case for listing the files in the data directory.
"""

import logging
from typing import Optional

from osrs_mcp.exceptions import FileRepositoryError
from osrs_mcp.ports.files.data_file_repository_port import DataFileRepositoryPort


class ListDataFilesUseCase:
    """Use case for listing the files in the data directory."""

    def __init__(
        self,
        repository: DataFileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            repository: Repository for data directory operations
            logger: Logger instance to use for logging
        """
        self._repository = repository
        self._logger = logger or logging.getLogger(__name__)

    @property
    def data_dir(self) -> str:
        return self._repository.data_dir

    def execute(self, file_type: Optional[str] = None) -> list[str]:
        """
        List the files in the data directory.

        Args:
            file_type: Optional extension filter (e.g., "txt")

        Returns:
            List of filenames

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._logger.info(
                f"Listing data files in {self._repository.data_dir}"
                + (f" with type '{file_type}'" if file_type else "")
            )
            files = self._repository.list_files(file_type)
            self._logger.info(f"Found {len(files)} data files")
            return files
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing data files: {e}")
            raise FileRepositoryError(f"Failed to list data files: {str(e)}")
