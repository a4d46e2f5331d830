"""
API State Management
====================
Process-wide settings for the graph API. No graph state is kept here.
"""

import logging
from typing import Optional

from engine_config import EngineConfig

logger = logging.getLogger(__name__)

# Engine configuration (set by the server at startup)
engine_config: Optional[EngineConfig] = None


def get_engine_config() -> EngineConfig:
    """Return the configured engine settings, falling back to defaults."""
    global engine_config
    if engine_config is None:
        logger.debug("Engine config not set at startup; using defaults")
        engine_config = EngineConfig()
    return engine_config


def set_engine_config(config: EngineConfig) -> None:
    global engine_config
    engine_config = config
