"""
API Module
==========
FastAPI surface for the todo graph view.
"""

from .types import SnapshotRequest, ValidateEdgeRequest, TodoPayload
from .state import get_engine_config, set_engine_config

__all__ = [
    "SnapshotRequest",
    "ValidateEdgeRequest",
    "TodoPayload",
    "get_engine_config",
    "set_engine_config",
]
