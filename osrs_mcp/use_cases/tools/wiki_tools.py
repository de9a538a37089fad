"""
Tools "osrs_wiki_*" forwarding queries to the OSRS wiki API.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from selectolax.parser import HTMLParser

from osrs_mcp.ports.tools.tools_port import ToolSpec, ToolsHandlerPort
from osrs_mcp.ports.wiki.wiki_port import WikiPort
from osrs_mcp.use_cases.tools.schemas import (
    WikiGetPageInfoArgs,
    WikiParsePageArgs,
    WikiSearchArgs,
    parse_arguments,
    to_json_schema,
)

PAGE_NOT_FOUND = "Page content not found."


def html_to_text(html: str) -> str:
    """Plain text of a parsed wiki page, one block per line, without scripts and styles."""
    tree = HTMLParser(html)
    for node in tree.css("script, style"):
        node.decompose()
    root = tree.body or tree.root
    if root is None:
        return ""
    text = root.text(separator="\n", strip=True)
    return "\n".join(line for line in (ln.strip() for ln in text.splitlines()) if line)


class WikiToolsHandler(ToolsHandlerPort):
    """Handler for the wiki passthrough tools.

    Exposes three tools:
    - osrs_wiki_search: full-text search
    - osrs_wiki_get_page_info: page metadata for a list of titles
    - osrs_wiki_parse_page: rendered HTML (or plain text) of one page
    """

    def __init__(self, wiki: WikiPort, logger: Optional[logging.Logger] = None) -> None:
        self._wiki = wiki
        self._logger = logger or logging.getLogger(__name__)

    def available_tools(self) -> list[ToolSpec]:
        return [
            {
                "name": "osrs_wiki_search",
                "description": "Search the OSRS Wiki for pages matching a search term.",
                "parameters": to_json_schema(WikiSearchArgs),
            },
            {
                "name": "osrs_wiki_get_page_info",
                "description": "Get information about specific pages on the OSRS Wiki.",
                "parameters": to_json_schema(WikiGetPageInfoArgs),
            },
            {
                "name": "osrs_wiki_parse_page",
                "description": "Get the parsed HTML content of a specific OSRS Wiki page.",
                "parameters": to_json_schema(WikiParsePageArgs),
            },
        ]

    def dispatch(self, name: str, arguments: dict[str, Any]) -> str:
        if name == "osrs_wiki_search":
            search = parse_arguments(WikiSearchArgs, arguments)
            data = self._wiki.query(
                {
                    "action": "query",
                    "list": "search",
                    "srsearch": search.search,
                    "srlimit": search.limit,
                    "sroffset": search.offset,
                    "srprop": "snippet|titlesnippet|sectiontitle",
                }
            )
            return self._to_text(data)

        if name == "osrs_wiki_get_page_info":
            info = parse_arguments(WikiGetPageInfoArgs, arguments)
            data = self._wiki.query({"action": "query", "prop": "info", "titles": info.titles})
            return self._to_text(data)

        if name == "osrs_wiki_parse_page":
            parse = parse_arguments(WikiParsePageArgs, arguments)
            data = self._wiki.query(
                {
                    "action": "parse",
                    "page": parse.page,
                    "prop": "text",
                    "formatversion": 2,
                }
            )
            html = None
            if isinstance(data, dict) and isinstance(data.get("parse"), dict):
                html = data["parse"].get("text")
            if not html:
                self._logger.info(f"No parsed content for wiki page '{parse.page}'")
                return PAGE_NOT_FOUND
            return html_to_text(html) if parse.format == "text" else html

        raise ValueError(f"Unknown tool: {name}")

    def _to_text(self, data: Any) -> str:
        if isinstance(data, str):
            return data
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))
