"""
Tests for run_tool and the composite tools handler.
"""

from unittest.mock import MagicMock

import pytest

from osrs_mcp.container import CompositeToolsHandler
from osrs_mcp.exceptions import (
    InvalidFilenameError,
    ToolArgumentsError,
    ToolExecutionError,
    WikiError,
)
from osrs_mcp.ports.tools.tools_port import ToolsHandlerPort
from osrs_mcp.use_cases.tools.runner import run_tool


def _handler(*names):
    handler = MagicMock(spec=ToolsHandlerPort)
    handler.available_tools.return_value = [
        {"name": n, "description": n, "parameters": {"type": "object"}} for n in names
    ]
    return handler


class TestRunTool:
    """Test cases for run_tool."""

    def test_string_result_passthrough(self, mock_logger):
        handler = _handler("t")
        handler.dispatch.return_value = "<p>html</p>"

        assert run_tool(handler, "t", {"a": 1}, mock_logger) == "<p>html</p>"
        handler.dispatch.assert_called_once_with("t", {"a": 1})

    def test_non_string_result_is_json(self, mock_logger):
        handler = _handler("t")
        handler.dispatch.return_value = {"files": ["a.txt"]}

        assert run_tool(handler, "t", None, mock_logger) == '{"files":["a.txt"]}'
        handler.dispatch.assert_called_once_with("t", {})

    def test_argument_errors_unchanged(self, mock_logger):
        handler = _handler("t")
        handler.dispatch.side_effect = ToolArgumentsError("Invalid arguments: query: Field required")

        with pytest.raises(ToolArgumentsError, match="^Invalid arguments: query: Field required$"):
            run_tool(handler, "t", {}, mock_logger)

    def test_other_errors_prefixed(self, mock_logger):
        handler = _handler("search_data_file")
        handler.dispatch.side_effect = InvalidFilenameError("Invalid filename")

        with pytest.raises(
            ToolExecutionError, match="^Error executing tool search_data_file: Invalid filename$"
        ):
            run_tool(handler, "search_data_file", {}, mock_logger)
        mock_logger.error.assert_called_once()

    def test_wiki_error_includes_response(self, mock_logger):
        handler = _handler("osrs_wiki_search")
        handler.dispatch.side_effect = WikiError("HTTP error 503: Unavailable", response_body="busy")

        with pytest.raises(ToolExecutionError) as exc_info:
            run_tool(handler, "osrs_wiki_search", {}, mock_logger)

        assert str(exc_info.value) == (
            "Error executing tool osrs_wiki_search: HTTP error 503: Unavailable - Wiki Response: busy"
        )


class TestCompositeToolsHandler:
    """Test cases for the CompositeToolsHandler."""

    def test_available_tools_concatenated(self):
        composite = CompositeToolsHandler(_handler("a", "b"), _handler("c"))

        assert [t["name"] for t in composite.available_tools()] == ["a", "b", "c"]

    def test_dispatch_routes_by_name(self):
        first, second = _handler("a"), _handler("c")
        second.dispatch.return_value = "ok"
        composite = CompositeToolsHandler(first, second)

        assert composite.dispatch("c", {"x": 1}) == "ok"
        first.dispatch.assert_not_called()
        second.dispatch.assert_called_once_with("c", {"x": 1})

    def test_catalogs_read_once(self):
        first, second = _handler("a"), _handler("c")
        composite = CompositeToolsHandler(first, second)

        composite.dispatch("a", {})
        composite.dispatch("c", {})
        composite.dispatch("a", {})

        assert first.available_tools.call_count == 1
        assert second.available_tools.call_count == 1
        assert first.dispatch.call_count == 2

    def test_first_handler_wins_on_duplicate_names(self):
        first, second = _handler("a"), _handler("a")
        first.dispatch.return_value = "first"

        assert CompositeToolsHandler(first, second).dispatch("a", {}) == "first"
        second.dispatch.assert_not_called()

    def test_dispatch_unknown_tool(self):
        composite = CompositeToolsHandler(_handler("a"))

        with pytest.raises(ValueError, match="Unknown tool: zzz"):
            composite.dispatch("zzz", {})

    def test_unknown_tool_through_run_tool(self, mock_logger):
        composite = CompositeToolsHandler(_handler("a"))

        with pytest.raises(ToolExecutionError, match="Error executing tool zzz: Unknown tool: zzz"):
            run_tool(composite, "zzz", {}, mock_logger)
