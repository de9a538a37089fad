"""
FastAPI router definitions for the API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Path, Query

from osrs_mcp.api.dependencies import (
    get_data_file_repository,
    get_file_details_uc,
    get_list_data_files_uc,
    get_search_data_file_uc,
    get_tools_handler,
)
from osrs_mcp.api.schemas import (
    DataFileDetails,
    DataFileListResponse,
    ErrorResponse,
    SearchResponse,
    ToolCallRequest,
    ToolCallResponse,
    ToolInfo,
    ToolListResponse,
)
from osrs_mcp.exceptions import (
    DataFileNotFoundError,
    FileRepositoryError,
    InvalidFilenameError,
    ToolArgumentsError,
    ToolExecutionError,
)
from osrs_mcp.use_cases.tools.runner import run_tool
from osrs_mcp.utils.filenames import validate_filename

router = APIRouter()


@router.get("/tools", response_model=ToolListResponse)
def list_tools():
    """List the tool catalog with the JSON schema of each tool's arguments."""
    specs = get_tools_handler().available_tools()
    return ToolListResponse(tools=[ToolInfo(**spec) for spec in specs])


@router.post(
    "/tools/{name}",
    response_model=ToolCallResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def call_tool(name: str, body: Optional[ToolCallRequest] = None):
    """
    Invoke one tool.

    Args:
        name: Tool name
        body: Request body holding the tool arguments

    Returns:
        ToolCallResponse: Raw tool result

    Raises:
        HTTPException: 404 for unknown tools, 400 for bad arguments, 500 otherwise
    """
    handler = get_tools_handler()
    if not any(spec["name"] == name for spec in handler.available_tools()):
        raise HTTPException(status_code=404, detail=f"Unknown tool: {name}")
    arguments = body.arguments if body else {}
    try:
        return ToolCallResponse(name=name, result=run_tool(handler, name, arguments))
    except ToolArgumentsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ToolExecutionError as e:
        status = 400 if isinstance(e.__cause__, InvalidFilenameError) else 500
        raise HTTPException(status_code=status, detail=str(e))


@router.get(
    "/files", response_model=DataFileListResponse, responses={400: {"model": ErrorResponse}}
)
def list_data_files(
    file_type: Optional[str] = Query(None, description="Optional file extension filter (e.g., 'txt')"),
):
    """
    List files in the data directory.

    Raises:
        HTTPException: If the data directory cannot be listed
    """
    use_case = get_list_data_files_uc()
    try:
        files = use_case.execute(file_type)
    except FileRepositoryError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DataFileListResponse(files=files, path=use_case.data_dir)


@router.get(
    "/files/{filename}",
    response_model=DataFileDetails,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
def get_file_details(filename: str = Path(..., description="Data file name")):
    """Get size, line count and timestamps of a data file."""
    try:
        validate_filename(filename)
    except InvalidFilenameError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DataFileDetails(**get_file_details_uc().execute(filename))


@router.get(
    "/files/{filename}/search",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def search_data_file(
    filename: str = Path(..., description="Data file name"),
    query: str = Query(..., min_length=1, description="Term to search for"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(10, ge=1, le=100, description="Results per page"),
):
    """
    Search a data file for lines containing a term.

    Raises:
        HTTPException: 400 for invalid filenames, 404 for missing files, 500 for read errors
    """
    try:
        validate_filename(filename)
    except InvalidFilenameError as e:
        raise HTTPException(status_code=400, detail=str(e))
    path = get_data_file_repository().resolve(filename)
    try:
        result = get_search_data_file_uc().execute(path, query, page, page_size)
    except DataFileNotFoundError:
        raise HTTPException(status_code=404, detail=f"{filename} not found in data directory")
    except FileRepositoryError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return result.to_dict()
