"""
Local data directory adapter implementation for data file lookups.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from osrs_mcp.entities.data_file import DataFile
from osrs_mcp.exceptions import DataFileNotFoundError, FileRepositoryError
from osrs_mcp.ports.files.data_file_repository_port import DataFileRepositoryPort


class LocalDataDirectoryAdapter(DataFileRepositoryPort):
    """Data file repository backed by a directory on the local file system."""

    def __init__(self, data_dir: str, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            data_dir: Directory holding the data files
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._data_dir = os.path.abspath(data_dir)
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @property
    @override
    def data_dir(self) -> str:
        return self._data_dir

    @override
    def resolve(self, filename: str) -> str:
        return os.path.join(self._data_dir, filename)

    @override
    def exists(self, filename: str) -> bool:
        return os.path.exists(self.resolve(filename))

    @override
    def get_file(self, filename: str) -> DataFile:
        """
        Get a DataFile entity for a file in the data directory.

        Args:
            filename: Bare filename

        Returns:
            DataFile entity

        Raises:
            DataFileNotFoundError: If the file does not exist
            DataFileReadError: If its metadata cannot be read
        """
        path = self.resolve(filename)
        if not os.path.exists(path):
            raise DataFileNotFoundError(path)
        return DataFile(path)

    @override
    def list_files(self, file_type: Optional[str] = None) -> list[str]:
        """
        List the names of the files in the data directory.

        Args:
            file_type: Optional extension filter (e.g., "txt")

        Returns:
            Sorted list of filenames

        Raises:
            FileRepositoryError: If the directory cannot be listed
        """
        try:
            names = sorted(os.listdir(self._data_dir))
        except OSError as e:
            raise FileRepositoryError(
                f"Failed to list data files in {self._data_dir}: {str(e)}"
            ) from e
        if file_type:
            suffix = f".{file_type}"
            names = [n for n in names if n.endswith(suffix)]
        return names
