"""
API Routes
==========
FastAPI route modules for the todo graph API.
"""

from .graph import router as graph_router
from .metrics import router as metrics_router

__all__ = [
    "graph_router",
    "metrics_router",
]
