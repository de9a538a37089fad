"""
Pydantic models for API requests and responses.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ToolInfo(BaseModel):
    """Schema for one tool of the catalog."""

    name: str = Field(..., description="Tool name")
    description: str = Field(..., description="What the tool does")
    parameters: dict[str, Any] = Field(..., description="JSON schema of the arguments")


class ToolListResponse(BaseModel):
    """Schema for the tool catalog."""

    tools: List[ToolInfo] = Field(..., description="Available tools")


class ToolCallRequest(BaseModel):
    """Schema for a tool invocation."""

    arguments: dict[str, Any] = Field(
        default_factory=dict, description="Arguments passed to the tool"
    )


class ToolCallResponse(BaseModel):
    """Schema for a tool invocation result."""

    name: str = Field(..., description="Tool name")
    result: str = Field(..., description="Raw tool result (stringified)")


class DataFileListResponse(BaseModel):
    """Schema for the data directory listing."""

    files: List[str] = Field(..., description="Data file names")
    path: str = Field(..., description="Data directory")


class DataFileDetails(BaseModel):
    """Schema for data file details."""

    exists: bool = Field(..., description="Whether the file exists")
    size: Optional[int] = Field(None, description="File size in bytes")
    lineCount: Optional[int] = Field(None, description="Number of lines")
    created: Optional[str] = Field(None, description="Creation time (ISO 8601)")
    lastModified: Optional[str] = Field(None, description="Last modification time (ISO 8601)")
    error: Optional[str] = Field(None, description="Error reading the details, if any")


class SearchRecord(BaseModel):
    """Schema for one matched line."""

    line: str
    lineNumber: int
    id: Optional[str] = None
    value: Optional[str] = None
    formatted: Optional[str] = None


class PaginationInfo(BaseModel):
    """Schema for pagination metadata."""

    page: int
    pageSize: int
    totalResults: int
    totalPages: int
    hasNextPage: bool
    hasPreviousPage: bool


class SearchResponse(BaseModel):
    """Schema for one page of search results."""

    results: List[SearchRecord] = Field(default_factory=list)
    pagination: PaginationInfo


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
