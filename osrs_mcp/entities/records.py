"""
Search record entities: matched lines, formatted records and result pages.
"""

from typing import Any, Optional


class MatchRecord:
    """
    A line accepted by the substring test during a scan.
    """

    def __init__(self, line: str, line_number: int):
        """
        Initialize the MatchRecord entity.

        Args:
            line: Raw line content without its terminator
            line_number: 1-based position of the line in the file
        """
        self.line = line
        self.line_number = line_number

    def to_dict(self) -> dict[str, Any]:
        return {"line": self.line, "lineNumber": self.line_number}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchRecord):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"MatchRecord(line_number={self.line_number}, line={self.line!r})"


class FormattedRecord(MatchRecord):
    """
    A MatchRecord optionally split into an identifier/value pair.

    ``record_id``, ``value`` and ``formatted`` are all None when the line did not
    split into at least two tokens; they are then left out of ``to_dict()``.
    """

    def __init__(
        self,
        line: str,
        line_number: int,
        record_id: Optional[str] = None,
        value: Optional[str] = None,
    ):
        super().__init__(line, line_number)
        self.record_id = record_id
        self.value = value
        self.formatted: Optional[str] = (
            f"{record_id}\t{value}" if record_id is not None and value is not None else None
        )

    @property
    def is_key_value(self) -> bool:
        return self.formatted is not None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.is_key_value:
            data["id"] = self.record_id
            data["value"] = self.value
            data["formatted"] = self.formatted
        return data

    def __repr__(self) -> str:
        if self.is_key_value:
            return f"FormattedRecord(line_number={self.line_number}, id={self.record_id!r}, value={self.value!r})"
        return f"FormattedRecord(line_number={self.line_number}, line={self.line!r})"


class Pagination:
    """Pagination metadata for one page of search results."""

    def __init__(self, page: int, page_size: int, total_results: int, total_pages: int):
        self.page = page
        self.page_size = page_size
        self.total_results = total_results
        self.total_pages = total_pages

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "pageSize": self.page_size,
            "totalResults": self.total_results,
            "totalPages": self.total_pages,
            "hasNextPage": self.has_next_page,
            "hasPreviousPage": self.has_previous_page,
        }

    def __repr__(self) -> str:
        return (
            f"Pagination(page={self.page}, page_size={self.page_size}, "
            f"total_results={self.total_results}, total_pages={self.total_pages})"
        )


class PageResult:
    """
    One page of formatted search results with its pagination metadata.

    ``to_dict()`` is the serialized shape returned by every search tool.
    """

    def __init__(self, results: list[FormattedRecord], pagination: Pagination):
        self.results = results
        self.pagination = pagination

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "pagination": self.pagination.to_dict(),
        }

    def __repr__(self) -> str:
        return f"PageResult(results={len(self.results)}, pagination={self.pagination!r})"
