"""
HTTP API exposing the tool catalog and the data file search.
"""

import logging

from fastapi import FastAPI

from osrs_mcp import __version__
from osrs_mcp.api.routers import router as api_router
from osrs_mcp.config.settings import settings

# Create FastAPI app
app = FastAPI(title="OSRS MCP API", version=__version__)
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
