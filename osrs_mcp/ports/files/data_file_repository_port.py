"""
Data file repository port interface defining the contract for the data directory.
"""

from abc import ABC, abstractmethod
from typing import Optional

from osrs_mcp.entities.data_file import DataFile


class DataFileRepositoryPort(ABC):
    """Port interface for locating and describing files in the data directory."""

    @property
    @abstractmethod
    def data_dir(self) -> str:
        """Absolute path of the data directory."""
        pass

    @abstractmethod
    def resolve(self, filename: str) -> str:
        """
        Build the path of a file inside the data directory.

        Args:
            filename: Bare filename (already validated by the caller)

        Returns:
            Absolute path to the file
        """
        pass

    @abstractmethod
    def exists(self, filename: str) -> bool:
        """
        Check whether a file exists in the data directory.

        Args:
            filename: Bare filename

        Returns:
            True if the file exists, False otherwise
        """
        pass

    @abstractmethod
    def get_file(self, filename: str) -> DataFile:
        """
        Get a DataFile entity for a file in the data directory.

        Args:
            filename: Bare filename

        Returns:
            DataFile entity

        Raises:
            DataFileNotFoundError: If the file does not exist
        """
        pass

    @abstractmethod
    def list_files(self, file_type: Optional[str] = None) -> list[str]:
        """
        List the names of the files in the data directory.

        Args:
            file_type: Optional extension filter (e.g., "txt")

        Returns:
            List of filenames

        Raises:
            FileRepositoryError: If the directory cannot be listed
        """
        pass
