"""
Entry point for the osrs-serve console script.
"""

import logging

import uvicorn

from osrs_mcp.config.settings import settings

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Serve the HTTP API with uvicorn on the configured host and port."""
    logger.info(f"Serving HTTP API on {settings.host}:{settings.port} (reload={settings.reload})")
    uvicorn.run(
        "osrs_mcp.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
