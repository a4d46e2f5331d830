"""
Graph API Routes
================
Read-only graph queries over a todo snapshot sent in the request body.
Persisting an accepted dependency stays with the caller.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from graph_api.state import get_engine_config
from graph_api.types import (
    AnalysisResponse,
    DueDateSummary,
    EdgeValidationResponse,
    GraphViewResponse,
    SnapshotRequest,
    ValidateEdgeRequest,
    ViolationBody,
)
from todo_graph import analyze_todos, build_graph_view, validate_edge
from todo_types import Todo, ViolationKind, violation_to_dict

logger = logging.getLogger(__name__)

# Create router with prefix and tags
router = APIRouter(prefix="/api/v1/graph", tags=["graph"])

# Stored data already cyclic is a data-integrity problem, not a bad request
STATUS_BY_KIND = {
    ViolationKind.STRUCTURAL_VIOLATION: 409,
    ViolationKind.CONSTRAINT_VIOLATION: 422,
    ViolationKind.CYCLE_DETECTED: 422,
    ViolationKind.DUE_DATE_VIOLATION: 422,
}


# =============================================================================
# ROUTES
# =============================================================================

@router.post("/validate-edge", response_model=EdgeValidationResponse)
async def validate_dependency(body: ValidateEdgeRequest):
    """
    Check whether `child_id` may start depending on `parent_id`.

    A todo not yet in `todos` can be sent inline as `child`; it is only
    added to the working copy for the check.

    Returns 200 when accepted. Rejections carry the violation kind and a
    user-facing message.
    """
    todos = [t.to_todo() for t in body.todos]
    by_id = {t.id: t for t in todos}

    child = by_id.get(body.child_id)
    if child is None and body.child is not None and body.child.id == body.child_id:
        child = body.child.to_todo()
    if child is None:
        raise HTTPException(status_code=404, detail=f"Todo {body.child_id} not found")

    # A missing parent is reported by the validator as a constraint violation
    parent = by_id.get(body.parent_id) or Todo(id=body.parent_id, title="")

    config = get_engine_config()
    check_due = config.check_due_dates_on_link if body.check_due_dates is None else body.check_due_dates

    result = validate_edge(child, parent, todos, check_due_dates_on_link=check_due)
    if result.accepted:
        return EdgeValidationResponse(accepted=True)

    response = EdgeValidationResponse(
        accepted=False,
        violation=ViolationBody(**violation_to_dict(result.violation)),
    )
    return JSONResponse(
        status_code=STATUS_BY_KIND[result.violation.kind],
        content=response.model_dump(),
    )


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze_snapshot(body: SnapshotRequest):
    """Topological order, critical path, earliest start and due-date check."""
    report = analyze_todos(body.to_todos(), config=get_engine_config(), focus_id=body.focus_id)
    due = report.due_dates

    return AnalysisResponse(
        root_ids=report.root_ids,
        topological_order=report.topological_order,
        is_acyclic=report.is_acyclic,
        critical_path=report.critical_path_ids,
        earliest_start_date=report.earliest_start_date,
        due_dates=DueDateSummary(
            valid=due.valid,
            violation=ViolationBody(**violation_to_dict(due.violation)) if due.violation else None,
            effective_due_dates=due.effective_due_dates,
            unchecked_ids=due.unchecked_ids,
        ),
        dangling_ids=report.dangling_ids,
        focus_title=report.focus_title,
    )


@router.post("/view", response_model=GraphViewResponse)
async def graph_view(body: SnapshotRequest):
    """Nodes and edges for the layout collaborator, critical edges and focus flagged."""
    config = get_engine_config()
    todos = body.to_todos()
    report = analyze_todos(todos, config=config, focus_id=body.focus_id)
    view = build_graph_view(
        todos,
        critical_path=report.critical_path,
        layout=config.layout,
        focus_id=body.focus_id,
    )

    return GraphViewResponse(
        nodes=[asdict(n) for n in view.nodes],
        edges=[asdict(e) for e in view.edges],
        layout=view.layout,
        earliest_start_date=report.earliest_start_date,
    )
