"""
Metrics API Routes
==================
Prometheus metrics endpoint for observability.
"""

import logging
from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

# Importing registers the graph metrics with the default registry
from graph_metrics import graph_metrics  # noqa: F401

logger = logging.getLogger(__name__)

# Create router - no /api/v1 prefix since this is a standard Prometheus endpoint
router = APIRouter(tags=["observability"])


@router.get("/metrics", include_in_schema=False)
async def metrics():
    """
    Prometheus metrics endpoint.

    Exposes:
    - Edge validations by outcome and broken constraint
    - Dangling parent references seen in snapshots
    - Due-date violations
    - Analysis duration and critical path length
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
