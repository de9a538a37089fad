"""Filename guard for tools that take a caller-supplied data file name."""

from osrs_mcp.exceptions import InvalidFilenameError

_FORBIDDEN = ("..", "/", "\\")


def validate_filename(filename: str) -> str:
    """Return ``filename`` unchanged, or raise if it could leave the data directory."""
    if any(token in filename for token in _FORBIDDEN):
        raise InvalidFilenameError("Invalid filename")
    return filename
