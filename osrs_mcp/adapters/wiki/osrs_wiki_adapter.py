"""
OSRS wiki adapter: GET requests against the MediaWiki action API with urllib.
"""

import json
import logging
import re
import urllib.error
import urllib.request
from typing import Any, Optional
from urllib.parse import urlencode

from typing_extensions import override

from osrs_mcp.config.settings import DEFAULT_WIKI_API_URL
from osrs_mcp.exceptions import WikiError
from osrs_mcp.ports.wiki.wiki_port import WikiPort


class OsrsWikiAdapter(WikiPort):
    """MediaWiki API client for oldschool.runescape.wiki."""

    def __init__(
        self,
        base_url: str = DEFAULT_WIKI_API_URL,
        timeout: int = 15,
        user_agent: str = "mcp-osrs/0.1.0",
        logger: Optional[logging.Logger] = None,
    ):
        self._base_url = base_url
        self._timeout = timeout
        self._user_agent = user_agent
        self._logger = logger or logging.getLogger(__name__)

    def _build_url(self, params: dict[str, Any]) -> str:
        query = {"format": "json"}
        query.update({k: v for k, v in params.items() if v is not None})
        sep = "&" if "?" in self._base_url else "?"
        return f"{self._base_url}{sep}{urlencode(query)}"

    def _get_charset(self, content_type: str) -> Optional[str]:
        m = re.search(r"charset=([\w\-]+)", content_type or "", re.IGNORECASE)
        return m.group(1) if m else None

    @override
    def query(self, params: dict[str, Any]) -> Any:
        """
        Perform a GET request against the wiki API.

        Args:
            params: Query parameters; ``format=json`` is always sent

        Returns:
            Decoded JSON response

        Raises:
            WikiError: If the request fails or the body is not JSON
        """
        url = self._build_url(params)
        headers = {"User-Agent": self._user_agent, "Accept": "application/json"}
        req = urllib.request.Request(url, headers=headers, method="GET")
        self._logger.debug(f"GET {url}")
        try:
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:  # nosec - fixed wiki host
                raw = resp.read()
                charset = self._get_charset(resp.headers.get("Content-Type", ""))
        except urllib.error.HTTPError as e:
            body: Optional[str] = None
            try:
                body = e.read().decode("utf-8", errors="replace") or None
            except OSError:
                pass
            raise WikiError(f"HTTP error {e.code}: {e.reason}", response_body=body) from e
        except urllib.error.URLError as e:
            raise WikiError(f"URL error: {e.reason}") from e
        except OSError as e:
            raise WikiError(f"Request failed: {e}") from e

        text = raw.decode(charset or "utf-8", errors="replace")
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise WikiError(f"Invalid JSON from wiki API: {e}", response_body=text[:2000]) from e
