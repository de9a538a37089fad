"""
Tests for the WikiToolsHandler.
"""

import json
from unittest.mock import MagicMock

import pytest

from osrs_mcp.exceptions import ToolArgumentsError, WikiError
from osrs_mcp.ports.wiki.wiki_port import WikiPort
from osrs_mcp.use_cases.tools.wiki_tools import PAGE_NOT_FOUND, WikiToolsHandler, html_to_text


@pytest.fixture
def mock_wiki():
    return MagicMock(spec=WikiPort)


class TestWikiToolsHandler:
    """Test cases for the wiki passthrough tools."""

    def test_available_tools(self, mock_wiki, mock_logger):
        handler = WikiToolsHandler(mock_wiki, mock_logger)

        names = [t["name"] for t in handler.available_tools()]
        assert names == ["osrs_wiki_search", "osrs_wiki_get_page_info", "osrs_wiki_parse_page"]

    def test_search_defaults(self, mock_wiki, mock_logger):
        """Test the search query shape with default limit and offset."""
        mock_wiki.query.return_value = {"query": {"search": [{"title": "Abyssal whip"}]}}
        handler = WikiToolsHandler(mock_wiki, mock_logger)

        result = handler.dispatch("osrs_wiki_search", {"search": "whip"})

        assert json.loads(result) == {"query": {"search": [{"title": "Abyssal whip"}]}}
        mock_wiki.query.assert_called_once_with(
            {
                "action": "query",
                "list": "search",
                "srsearch": "whip",
                "srlimit": 10,
                "sroffset": 0,
                "srprop": "snippet|titlesnippet|sectiontitle",
            }
        )

    def test_search_limit_out_of_range(self, mock_wiki, mock_logger):
        handler = WikiToolsHandler(mock_wiki, mock_logger)

        with pytest.raises(ToolArgumentsError, match="limit"):
            handler.dispatch("osrs_wiki_search", {"search": "whip", "limit": 51})
        mock_wiki.query.assert_not_called()

    def test_get_page_info(self, mock_wiki, mock_logger):
        mock_wiki.query.return_value = {"query": {"pages": {}}}
        handler = WikiToolsHandler(mock_wiki, mock_logger)

        handler.dispatch("osrs_wiki_get_page_info", {"titles": "Dragon_scimitar,Abyssal_whip"})

        mock_wiki.query.assert_called_once_with(
            {"action": "query", "prop": "info", "titles": "Dragon_scimitar,Abyssal_whip"}
        )

    def test_parse_page_returns_html(self, mock_wiki, mock_logger):
        mock_wiki.query.return_value = {"parse": {"title": "Abyssal whip", "text": "<p>A whip.</p>"}}
        handler = WikiToolsHandler(mock_wiki, mock_logger)

        result = handler.dispatch("osrs_wiki_parse_page", {"page": "Abyssal whip"})

        assert result == "<p>A whip.</p>"
        mock_wiki.query.assert_called_once_with(
            {"action": "parse", "page": "Abyssal whip", "prop": "text", "formatversion": 2}
        )

    def test_parse_page_as_text(self, mock_wiki, mock_logger):
        mock_wiki.query.return_value = {
            "parse": {"text": "<div><p>A whip.</p><style>p{}</style><p>Tradeable.</p></div>"}
        }
        handler = WikiToolsHandler(mock_wiki, mock_logger)

        result = handler.dispatch("osrs_wiki_parse_page", {"page": "Abyssal whip", "format": "text"})

        assert result == "A whip.\nTradeable."

    def test_parse_page_not_found(self, mock_wiki, mock_logger):
        mock_wiki.query.return_value = {"error": {"code": "missingtitle"}}
        handler = WikiToolsHandler(mock_wiki, mock_logger)

        assert handler.dispatch("osrs_wiki_parse_page", {"page": "Nope"}) == PAGE_NOT_FOUND

    def test_wiki_error_propagates(self, mock_wiki, mock_logger):
        mock_wiki.query.side_effect = WikiError("HTTP error 500: Server Error")
        handler = WikiToolsHandler(mock_wiki, mock_logger)

        with pytest.raises(WikiError):
            handler.dispatch("osrs_wiki_search", {"search": "whip"})

    def test_unknown_tool(self, mock_wiki, mock_logger):
        handler = WikiToolsHandler(mock_wiki, mock_logger)

        with pytest.raises(ValueError, match="Unknown tool"):
            handler.dispatch("osrs_wiki_edit", {})


class TestHtmlToText:
    """Test cases for html_to_text."""

    def test_drops_scripts_and_blank_lines(self):
        html = "<html><body><h1>Title</h1><script>x()</script><p> Body  </p></body></html>"

        assert html_to_text(html) == "Title\nBody"
