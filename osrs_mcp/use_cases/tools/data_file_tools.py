"""
Tools over the game data files: fixed per-type searches, generic search, details and listing.
"""

import json
import logging
from typing import Any, Optional

from osrs_mcp.exceptions import FileRepositoryError
from osrs_mcp.ports.files.data_file_repository_port import DataFileRepositoryPort
from osrs_mcp.ports.tools.tools_port import ToolSpec, ToolsHandlerPort
from osrs_mcp.use_cases.files.get_file_details import GetFileDetailsUseCase
from osrs_mcp.use_cases.files.list_data_files import ListDataFilesUseCase
from osrs_mcp.use_cases.search.search_data_file import SearchDataFileUseCase
from osrs_mcp.use_cases.tools.schemas import (
    FileDetailsArgs,
    FileSearchArgs,
    GenericFileSearchArgs,
    ListDataFilesArgs,
    parse_arguments,
    to_json_schema,
)
from osrs_mcp.utils.filenames import validate_filename

# search_<type> tool -> description; each searches <type>.txt
DATA_FILE_TOOLS: dict[str, str] = {
    "varptypes": "Search the varptypes.txt file for player variables (varps) that store player state and progress.",
    "varbittypes": "Search the varbittypes.txt file for variable bits (varbits) that store individual bits from varps.",
    "iftypes": "Search the iftypes.txt file for interface definitions used in the game's UI.",
    "invtypes": "Search the invtypes.txt file for inventory type definitions in the game.",
    "loctypes": "Search the loctypes.txt file for location/object type definitions in the game world.",
    "npctypes": "Search the npctypes.txt file for NPC (non-player character) definitions.",
    "objtypes": "Search the objtypes.txt file for object/item definitions in the game.",
    "rowtypes": "Search the rowtypes.txt file for row definitions used in various interfaces.",
    "seqtypes": "Search the seqtypes.txt file for animation sequence definitions.",
    "soundtypes": "Search the soundtypes.txt file for sound effect definitions in the game.",
    "spottypes": "Search the spottypes.txt file for spot animation (graphical effect) definitions.",
    "spritetypes": "Search the spritetypes.txt file for sprite image definitions used in the interface.",
    "tabletypes": "Search the tabletypes.txt file for interface tab definitions.",
}


def _dumps(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


class DataFileToolsHandler(ToolsHandlerPort):
    """Handler for the data file tools."""

    def __init__(
        self,
        repository: DataFileRepositoryPort,
        search_uc: SearchDataFileUseCase,
        list_files_uc: ListDataFilesUseCase,
        file_details_uc: GetFileDetailsUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the data file tools handler.

        Args:
            repository: Data directory used to resolve filenames
            search_uc: Use case for paginated searches
            list_files_uc: Use case for listing the data directory
            file_details_uc: Use case for file details
            logger: Logger instance to use for logging
        """
        self._repository = repository
        self._search_uc = search_uc
        self._list_files_uc = list_files_uc
        self._file_details_uc = file_details_uc
        self._logger = logger or logging.getLogger(__name__)

    def available_tools(self) -> list[ToolSpec]:
        """
        Get a list of available data file tools.

        Returns:
            List of tool specifications
        """
        search_schema = to_json_schema(FileSearchArgs)
        tools: list[ToolSpec] = [
            {
                "name": f"search_{file_type}",
                "description": description,
                "parameters": search_schema,
            }
            for file_type, description in DATA_FILE_TOOLS.items()
        ]
        tools.extend(
            [
                {
                    "name": "search_data_file",
                    "description": "Search any file in the data directory for matching entries.",
                    "parameters": to_json_schema(GenericFileSearchArgs),
                },
                {
                    "name": "get_file_details",
                    "description": "Get details about a file in the data directory.",
                    "parameters": to_json_schema(FileDetailsArgs),
                },
                {
                    "name": "list_data_files",
                    "description": "List available data files in the data directory.",
                    "parameters": to_json_schema(ListDataFilesArgs),
                },
            ]
        )
        return tools

    # ---------------- private helpers ----------------
    def _search(self, filename: str, args: FileSearchArgs) -> str:
        if not self._repository.exists(filename):
            return _dumps({"error": f"{filename} not found in data directory"})
        result = self._search_uc.execute(
            self._repository.resolve(filename), args.query, args.page, args.page_size
        )
        return _dumps(result.to_dict())

    def _list_files(self, file_type: Optional[str]) -> list[str]:
        try:
            return self._list_files_uc.execute(file_type)
        except FileRepositoryError as e:
            self._logger.error(f"Error listing data files: {e}")
            return []

    # ---------------- dispatch ----------------
    def dispatch(self, name: str, arguments: dict[str, Any]) -> str:
        if name.startswith("search_") and name[len("search_") :] in DATA_FILE_TOOLS:
            args = parse_arguments(FileSearchArgs, arguments)
            return self._search(f"{name[len('search_') :]}.txt", args)

        if name == "search_data_file":
            generic = parse_arguments(GenericFileSearchArgs, arguments)
            return self._search(validate_filename(generic.filename), generic)

        if name == "get_file_details":
            details_args = parse_arguments(FileDetailsArgs, arguments)
            filename = validate_filename(details_args.filename)
            return _dumps(self._file_details_uc.execute(filename))

        if name == "list_data_files":
            list_args = parse_arguments(ListDataFilesArgs, arguments)
            files = self._list_files(list_args.file_type)
            return _dumps({"files": files, "path": self._list_files_uc.data_dir})

        raise ValueError(f"Unknown tool: {name}")
