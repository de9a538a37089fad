"""
Wiki port interface defining the contract for MediaWiki API queries.
"""

from abc import ABC, abstractmethod
from typing import Any


class WikiPort(ABC):
    """Port interface for a MediaWiki action API."""

    @abstractmethod
    def query(self, params: dict[str, Any]) -> Any:
        """
        Perform a GET request against the wiki API.

        Args:
            params: Query parameters (``format=json`` is added by the adapter)

        Returns:
            Decoded JSON response

        Raises:
            WikiError: If the request or decoding fails
        """
        pass
