"""
Custom exceptions for the application.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for data file errors."""

    pass


class DataFileNotFoundError(FileRepositoryError):
    """Exception raised when a data file does not exist at call time."""

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class DataFileReadError(FileRepositoryError):
    """Exception raised when reading a data file fails after the existence check."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        message = f"Failed to read {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.path = path
        self.cause = cause


class InvalidFilenameError(FileRepositoryError):
    """Exception raised for filenames that could escape the data directory."""

    pass


class ToolArgumentsError(BaseAppError):
    """Exception raised when tool arguments fail schema validation."""

    pass


class WikiError(BaseAppError):
    """Exception raised for wiki API errors."""

    def __init__(self, message: str, response_body: Optional[str] = None):
        super().__init__(message)
        self.response_body = response_body


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ToolExecutionError(BaseAppError):
    """Exception raised when a tool invocation fails."""

    pass
