"""
Todo Graph - Configuration
==========================

Configuration classes for the graph engine and its HTTP surface.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from todo_types import CriticalPathStrategy


@dataclass
class LayoutConfig:
    """Sizing and spacing hints handed to the layout collaborator."""
    node_width: int = 150
    node_height: int = 50
    rank_direction: str = "TB"   # Top to bottom graph
    rank_separation: int = 70    # Vertical distance between ranks
    node_separation: int = 200   # Horizontal distance between nodes in the same rank


@dataclass
class ServerConfig:
    """HTTP server configuration."""
    host: str = "0.0.0.0"
    port: int = 8085
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])


@dataclass
class EngineConfig:
    """Main engine configuration."""

    # Longest-path relaxation used by the critical path analyzer
    critical_path_strategy: CriticalPathStrategy = CriticalPathStrategy.FRONTIER

    # Also reject links whose tentative structure breaks due-date ordering
    check_due_dates_on_link: bool = False

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    log_level: str = "INFO"

    @classmethod
    def from_env(cls, prefix: str = "TODO_GRAPH_") -> "EngineConfig":
        """
        Build a config from environment variables.

        Call `dotenv.load_dotenv()` first if values live in a `.env` file.
        Unset variables keep their defaults.
        """
        defaults = cls()

        strategy = os.getenv(f"{prefix}CRITICAL_PATH_STRATEGY")
        check_due = os.getenv(f"{prefix}CHECK_DUE_DATES_ON_LINK")
        origins = os.getenv("FRONTEND_URL", "*")

        return cls(
            critical_path_strategy=CriticalPathStrategy(strategy.lower()) if strategy else defaults.critical_path_strategy,
            check_due_dates_on_link=_parse_bool(check_due, defaults.check_due_dates_on_link),
            layout=LayoutConfig(
                node_width=int(os.getenv(f"{prefix}NODE_WIDTH", defaults.layout.node_width)),
                node_height=int(os.getenv(f"{prefix}NODE_HEIGHT", defaults.layout.node_height)),
            ),
            server=ServerConfig(
                host=os.getenv("SERVER_HOST", defaults.server.host),
                port=int(os.getenv("SERVER_PORT", defaults.server.port)),
                allowed_origins=["*"] if origins == "*" else [o.strip() for o in origins.split(",") if o.strip()],
            ),
            log_level=os.getenv(f"{prefix}LOG_LEVEL", defaults.log_level).upper(),
        )


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")
