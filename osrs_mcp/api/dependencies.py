"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from osrs_mcp.container import container
from osrs_mcp.ports.files.data_file_repository_port import DataFileRepositoryPort
from osrs_mcp.ports.tools.tools_port import ToolsHandlerPort
from osrs_mcp.use_cases.files.get_file_details import GetFileDetailsUseCase
from osrs_mcp.use_cases.files.list_data_files import ListDataFilesUseCase
from osrs_mcp.use_cases.search.search_data_file import SearchDataFileUseCase


def get_tools_handler() -> ToolsHandlerPort:
    """
    Get the full tool catalog from the container.

    Returns:
        ToolsHandlerPort: The composite tools handler
    """
    return container.get_tools_handler()


def get_data_file_repository() -> DataFileRepositoryPort:
    return container.get_data_file_repository()


def get_search_data_file_uc() -> SearchDataFileUseCase:
    """
    Get the search data file use case from the container.

    Returns:
        SearchDataFileUseCase: The search use case instance
    """
    return container.get_search_data_file_use_case()


def get_list_data_files_uc() -> ListDataFilesUseCase:
    return container.get_list_data_files_use_case()


def get_file_details_uc() -> GetFileDetailsUseCase:
    return container.get_file_details_use_case()
