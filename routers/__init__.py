from .colorTools import router as colorTools_router
from .colorScan import router as colorScan_router

__all__ = ["colorTools_router", "colorScan_router"]
