"""
Pydantic argument models for the tool catalog and their JSON schemas.
"""

from typing import Any, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from osrs_mcp.exceptions import ToolArgumentsError

ArgsT = TypeVar("ArgsT", bound=BaseModel)


class ToolArguments(BaseModel):
    """Base class for tool arguments; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class WikiSearchArgs(ToolArguments):
    search: str = Field(..., description="The term to search for on the OSRS Wiki")
    limit: int = Field(10, ge=1, le=50, description="Number of results to return (1-50)")
    offset: int = Field(0, ge=0, description="Offset for pagination (0-based)")


class WikiGetPageInfoArgs(ToolArguments):
    titles: str = Field(
        ...,
        description="Comma-separated list of page titles to get info for (e.g., Dragon_scimitar,Abyssal_whip)",
    )


class WikiParsePageArgs(ToolArguments):
    page: str = Field(
        ...,
        description="The exact title of the wiki page to parse (e.g., 'Dragon scimitar', 'Abyssal whip'). Case-sensitive.",
    )
    format: Literal["html", "text"] = Field(
        "html",
        description="Return the parsed page as 'html' (default) or as plain 'text'",
    )


class FileSearchArgs(ToolArguments):
    query: str = Field(..., min_length=1, description="The term to search for in the file")
    page: int = Field(1, ge=1, description="Page number for pagination")
    page_size: int = Field(
        10, ge=1, le=100, alias="pageSize", description="Number of results per page"
    )


class GenericFileSearchArgs(FileSearchArgs):
    filename: str = Field(
        ...,
        description="The filename to search in the data directory (e.g., 'varptypes.txt')",
    )


class FileDetailsArgs(ToolArguments):
    filename: str = Field(..., description="The filename to get details for in the data directory")


class ListDataFilesArgs(ToolArguments):
    file_type: Optional[str] = Field(
        None,
        alias="fileType",
        description="Optional filter for file type (e.g., 'txt')",
    )


def _strip_titles(node: Any) -> Any:
    if isinstance(node, dict):
        return {k: _strip_titles(v) for k, v in node.items() if k != "title"}
    if isinstance(node, list):
        return [_strip_titles(v) for v in node]
    return node


def to_json_schema(model: type[BaseModel]) -> dict[str, object]:
    """JSON schema of an argument model, without titles and with extra keys disallowed."""
    schema = _strip_titles(model.model_json_schema(by_alias=True))
    schema.pop("$defs", None)
    schema.setdefault("properties", {})
    schema["additionalProperties"] = False
    return schema


def parse_arguments(model: type[ArgsT], arguments: Optional[dict[str, object]]) -> ArgsT:
    """
    Validate raw tool arguments.

    Raises:
        ToolArgumentsError: With one ``<field>: <message>`` entry per problem
    """
    try:
        return model.model_validate(arguments or {})
    except ValidationError as e:
        problems = ", ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ToolArgumentsError(f"Invalid arguments: {problems}") from e
