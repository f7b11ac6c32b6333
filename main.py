"""
CSS Color Picker MCP Server - FastAPI implementation
Provides endpoints for finding colors in parsed stylesheets and rewriting them
"""

import logging
import sys
from pathlib import Path
from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

# Ensure project root is on sys.path for engine imports
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.append(str(project_root))

from config import get_settings
from routers import colorScan_router, colorTools_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="CSS Color Picker MCP Server",
    description="Detects hex, rgb(), hsl() and named colors in CSS and inline styles and converts between them",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

app.include_router(colorTools_router)
app.include_router(colorScan_router)

if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.mcp:
        mcp = FastApiMCP(app, exclude_operations=[])
        mcp.mount_http()
    logger.info("listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
