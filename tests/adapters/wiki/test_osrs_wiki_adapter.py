"""
Tests for the OsrsWikiAdapter.
"""

import io
import json
import urllib.error
from unittest.mock import MagicMock, patch
from urllib.parse import parse_qs, urlparse

import pytest

from osrs_mcp.adapters.wiki.osrs_wiki_adapter import OsrsWikiAdapter
from osrs_mcp.exceptions import WikiError


def _response(body: bytes, content_type: str = "application/json; charset=utf-8"):
    resp = MagicMock()
    resp.read.return_value = body
    resp.headers = {"Content-Type": content_type}
    resp.__enter__.return_value = resp
    resp.__exit__.return_value = False
    return resp


class TestOsrsWikiAdapter:
    """Test cases for the OsrsWikiAdapter."""

    @patch("urllib.request.urlopen")
    def test_query_success(self, mock_urlopen, mock_logger):
        """Test that a query sends format=json and decodes the body."""
        mock_urlopen.return_value = _response(json.dumps({"query": {"search": []}}).encode())
        adapter = OsrsWikiAdapter(
            base_url="https://wiki.example/api.php", timeout=7, logger=mock_logger
        )

        data = adapter.query({"action": "query", "list": "search", "srsearch": "whip"})

        assert data == {"query": {"search": []}}
        request = mock_urlopen.call_args[0][0]
        url = urlparse(request.full_url)
        assert url.netloc == "wiki.example"
        params = parse_qs(url.query)
        assert params["format"] == ["json"]
        assert params["action"] == ["query"]
        assert params["srsearch"] == ["whip"]
        assert mock_urlopen.call_args[1]["timeout"] == 7

    @patch("urllib.request.urlopen")
    def test_query_sends_user_agent(self, mock_urlopen, mock_logger):
        mock_urlopen.return_value = _response(b"{}")
        adapter = OsrsWikiAdapter(user_agent="tester/1.0", logger=mock_logger)

        adapter.query({"action": "query"})

        request = mock_urlopen.call_args[0][0]
        assert request.get_header("User-agent") == "tester/1.0"

    @patch("urllib.request.urlopen")
    def test_query_drops_none_params(self, mock_urlopen, mock_logger):
        mock_urlopen.return_value = _response(b"{}")
        adapter = OsrsWikiAdapter(logger=mock_logger)

        adapter.query({"action": "query", "titles": None})

        params = parse_qs(urlparse(mock_urlopen.call_args[0][0].full_url).query)
        assert "titles" not in params

    @patch("urllib.request.urlopen")
    def test_query_http_error_keeps_body(self, mock_urlopen, mock_logger):
        """Test that HTTP errors carry the response body."""
        mock_urlopen.side_effect = urllib.error.HTTPError(
            "https://wiki.example/api.php", 503, "Service Unavailable", {}, io.BytesIO(b"maintenance")
        )
        adapter = OsrsWikiAdapter(logger=mock_logger)

        with pytest.raises(WikiError, match="HTTP error 503") as exc_info:
            adapter.query({"action": "query"})

        assert exc_info.value.response_body == "maintenance"

    @patch("urllib.request.urlopen")
    def test_query_url_error(self, mock_urlopen, mock_logger):
        mock_urlopen.side_effect = urllib.error.URLError("Name or service not known")
        adapter = OsrsWikiAdapter(logger=mock_logger)

        with pytest.raises(WikiError, match="URL error: Name or service not known"):
            adapter.query({"action": "query"})

    @patch("urllib.request.urlopen")
    def test_query_invalid_json(self, mock_urlopen, mock_logger):
        mock_urlopen.return_value = _response(b"<html>not json</html>", "text/html")
        adapter = OsrsWikiAdapter(logger=mock_logger)

        with pytest.raises(WikiError, match="Invalid JSON"):
            adapter.query({"action": "parse"})
