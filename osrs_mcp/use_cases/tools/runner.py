"""
Run one tool call and turn its result or failure into what transports send back.
"""

import json
import logging
from typing import Optional

from osrs_mcp.exceptions import ToolArgumentsError, ToolExecutionError, WikiError
from osrs_mcp.ports.tools.tools_port import ToolsHandlerPort


def run_tool(
    handler: ToolsHandlerPort,
    name: str,
    arguments: Optional[dict[str, object]],
    logger: Optional[logging.Logger] = None,
) -> str:
    """
    Dispatch a tool call and return its text result.

    Args:
        handler: Tool catalog to dispatch to
        name: Tool name
        arguments: Raw tool arguments
        logger: Logger used to report failures

    Returns:
        The tool result; non-string results are JSON-encoded

    Raises:
        ToolArgumentsError: If the arguments fail validation
        ToolExecutionError: For any other failure, prefixed with the tool name
    """
    log = logger or logging.getLogger(__name__)
    try:
        result = handler.dispatch(name, arguments or {})
    except ToolArgumentsError:
        raise
    except WikiError as e:
        log.error(f"Wiki request for {name} failed: {e} (response: {e.response_body!r})")
        message = f"Error executing tool {name}: {e}"
        if e.response_body:
            message += f" - Wiki Response: {e.response_body}"
        raise ToolExecutionError(message) from e
    except Exception as e:
        log.error(f"Error executing tool {name}: {e}")
        raise ToolExecutionError(f"Error executing tool {name}: {e}") from e
    if isinstance(result, str):
        return result
    return json.dumps(result, ensure_ascii=False, separators=(",", ":"))
