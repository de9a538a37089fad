"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import List, Optional

from osrs_mcp.adapters.files.data_directory_adapter import LocalDataDirectoryAdapter
from osrs_mcp.adapters.files.line_scanner import LocalLineScanner
from osrs_mcp.adapters.wiki.osrs_wiki_adapter import OsrsWikiAdapter
from osrs_mcp.config.settings import Settings, settings
from osrs_mcp.ports.files.data_file_repository_port import DataFileRepositoryPort
from osrs_mcp.ports.files.line_scanner_port import LineScannerPort
from osrs_mcp.ports.tools.tools_port import ToolsHandlerPort, ToolSpec
from osrs_mcp.ports.wiki.wiki_port import WikiPort
from osrs_mcp.use_cases.files.get_file_details import GetFileDetailsUseCase
from osrs_mcp.use_cases.files.list_data_files import ListDataFilesUseCase
from osrs_mcp.use_cases.search.search_data_file import SearchDataFileUseCase
from osrs_mcp.use_cases.tools.data_file_tools import DataFileToolsHandler
from osrs_mcp.use_cases.tools.wiki_tools import WikiToolsHandler


class CompositeToolsHandler(ToolsHandlerPort):
    """Combine several tool handlers into one exposing all their specs and dispatching by name."""

    def __init__(self, *handlers: ToolsHandlerPort) -> None:
        self._handlers = list(handlers)
        self._routes: Optional[dict[str, ToolsHandlerPort]] = None

    def available_tools(self) -> list[ToolSpec]:
        tools: List[ToolSpec] = []
        for h in self._handlers:
            tools.extend(h.available_tools())
        return tools

    def _route_table(self) -> dict[str, ToolsHandlerPort]:
        # handler catalogs are fixed; built on first dispatch
        if self._routes is None:
            routes: dict[str, ToolsHandlerPort] = {}
            for h in self._handlers:
                for spec in h.available_tools():
                    routes.setdefault(spec["name"], h)
            self._routes = routes
        return self._routes

    def dispatch(self, name: str, arguments: dict[str, object]) -> object:
        handler = self._route_table().get(name)
        if handler is None:
            raise ValueError(f"Unknown tool: {name}")
        return handler.dispatch(name, arguments)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, app_settings: Optional[Settings] = None):
        self._settings = app_settings or settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_line_scanner(self) -> LineScannerPort:
        """
        Get line scanner adapter instance.

        Returns:
            LineScannerPort implementation
        """
        if "line_scanner" not in self._instances:
            self._instances["line_scanner"] = LocalLineScanner(self._logger)
        return self._instances["line_scanner"]

    def get_data_file_repository(self) -> DataFileRepositoryPort:
        """
        Get data directory adapter instance.

        Returns:
            DataFileRepositoryPort implementation
        """
        if "data_file_repository" not in self._instances:
            self._instances["data_file_repository"] = LocalDataDirectoryAdapter(
                self._settings.data_dir, self._logger
            )
        return self._instances["data_file_repository"]

    def get_wiki_adapter(self) -> WikiPort:
        """
        Get wiki API adapter instance.

        Returns:
            WikiPort implementation
        """
        if "wiki_adapter" not in self._instances:
            self._instances["wiki_adapter"] = OsrsWikiAdapter(
                base_url=self._settings.wiki_api_url,
                timeout=self._settings.wiki_timeout,
                user_agent=self._settings.wiki_user_agent,
                logger=self._logger,
            )
        return self._instances["wiki_adapter"]

    def get_search_data_file_use_case(self) -> SearchDataFileUseCase:
        """
        Get search data file use case with injected dependencies.

        Returns:
            Configured SearchDataFileUseCase
        """
        if "search_data_file_use_case" not in self._instances:
            self._instances["search_data_file_use_case"] = SearchDataFileUseCase(
                self.get_line_scanner(), self._logger
            )
        return self._instances["search_data_file_use_case"]

    def get_list_data_files_use_case(self) -> ListDataFilesUseCase:
        """
        Get list data files use case with injected dependencies.

        Returns:
            Configured ListDataFilesUseCase
        """
        if "list_data_files_use_case" not in self._instances:
            self._instances["list_data_files_use_case"] = ListDataFilesUseCase(
                self.get_data_file_repository(), self._logger
            )
        return self._instances["list_data_files_use_case"]

    def get_file_details_use_case(self) -> GetFileDetailsUseCase:
        """
        Get file details use case with injected dependencies.

        Returns:
            Configured GetFileDetailsUseCase
        """
        if "file_details_use_case" not in self._instances:
            self._instances["file_details_use_case"] = GetFileDetailsUseCase(
                self.get_data_file_repository(), self._logger
            )
        return self._instances["file_details_use_case"]

    def get_data_file_tools_handler(self) -> ToolsHandlerPort:
        """
        Registry of the data file tools backed by the search and files use cases.
        """
        if "data_file_tools_handler" not in self._instances:
            self._instances["data_file_tools_handler"] = DataFileToolsHandler(
                self.get_data_file_repository(),
                self.get_search_data_file_use_case(),
                self.get_list_data_files_use_case(),
                self.get_file_details_use_case(),
                self._logger,
            )
        return self._instances["data_file_tools_handler"]

    def get_wiki_tools_handler(self) -> ToolsHandlerPort:
        """
        Registry of the 'osrs_wiki_*' tools backed by the wiki adapter.
        """
        if "wiki_tools_handler" not in self._instances:
            self._instances["wiki_tools_handler"] = WikiToolsHandler(
                self.get_wiki_adapter(), logger=self._logger
            )
        return self._instances["wiki_tools_handler"]

    def get_tools_handler(self) -> ToolsHandlerPort:
        """
        Full tool catalog: wiki tools first, then data file tools.
        """
        if "tools_handler" not in self._instances:
            self._instances["tools_handler"] = CompositeToolsHandler(
                self.get_wiki_tools_handler(), self.get_data_file_tools_handler()
            )
        return self._instances["tools_handler"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
