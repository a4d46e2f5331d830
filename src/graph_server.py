"""
Todo Graph - API Server
=======================

FastAPI server exposing the dependency-graph engine to the graph page.
"""

import os
import sys
import logging

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Add src to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from engine_config import EngineConfig
from graph_api.routes import graph_router, metrics_router
import graph_api.state as api_state

config = EngineConfig.from_env()
api_state.set_engine_config(config)

# Configure logging
logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO))
logger = logging.getLogger("graph_server")

# =============================================================================
# APP SETUP
# =============================================================================

app = FastAPI(title="Todo Graph API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.server.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(graph_router)
app.include_router(metrics_router)


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "critical_path_strategy": config.critical_path_strategy.value,
        "check_due_dates_on_link": config.check_due_dates_on_link,
    }


def main():
    import uvicorn

    logger.info(f"Starting server on {config.server.host}:{config.server.port}")
    uvicorn.run(app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()
