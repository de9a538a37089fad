"""
Use case for searching a data file and returning one page of formatted matches.
"""

import logging
from typing import Optional

from osrs_mcp.adapters.files.line_scanner import LocalLineScanner
from osrs_mcp.entities.records import PageResult
from osrs_mcp.exceptions import FileRepositoryError
from osrs_mcp.ports.files.line_scanner_port import LineScannerPort
from osrs_mcp.use_cases.search.format_record import format_record
from osrs_mcp.use_cases.search.paginate import paginate

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


class SearchDataFileUseCase:
    """Use case for a paginated substring search over a line-oriented file."""

    def __init__(
        self,
        line_scanner: LineScannerPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            line_scanner: Scanner producing the matched lines
            logger: Logger instance to use for logging
        """
        self._line_scanner = line_scanner
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        file_path: str,
        search_term: str,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PageResult:
        """
        Search a file and return one page of formatted matches.

        Args:
            file_path: Resolved path of the file to search
            search_term: Term to look for (case-insensitive substring)
            page: 1-based page number
            page_size: Number of results per page

        Returns:
            PageResult with the visible records and pagination metadata

        Raises:
            DataFileNotFoundError: If the file does not exist
            DataFileReadError: If reading the file fails
            FileRepositoryError: If the search fails for any other reason
        """
        try:
            self._logger.info(
                f"Searching '{search_term}' in {file_path} (page {page}, size {page_size})"
            )
            matches = self._line_scanner.scan(file_path, search_term)
            visible, pagination = paginate(matches, page, page_size)
            result = PageResult([format_record(m) for m in visible], pagination)
            self._logger.info(
                f"Found {pagination.total_results} matches for '{search_term}' in {file_path}"
            )
            return result
        except FileRepositoryError:
            raise
        except Exception as e:
            raise FileRepositoryError(
                f"Failed to search {file_path} for {search_term}: {str(e)}"
            ) from e


def search_file(
    file_path: str,
    search_term: str,
    page: int = DEFAULT_PAGE,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> PageResult:
    """
    Search a local file with a fresh scanner.

    Raises:
        DataFileNotFoundError: If the file does not exist
        DataFileReadError: If reading the file fails
    """
    return SearchDataFileUseCase(LocalLineScanner()).execute(
        file_path, search_term, page, page_size
    )
