"""
API Request/Response Types
===========================
Pydantic models for API request and response validation.
"""

from datetime import date, datetime
from typing import List, Dict, Any, Optional, Union
from pydantic import BaseModel, Field

from todo_types import Todo


class TodoPayload(BaseModel):
    """One todo as stored by the persistence layer."""
    id: int
    title: str
    created_at: datetime
    due_date: Optional[Union[datetime, date]] = None
    parent_id: Optional[int] = None

    def to_todo(self) -> Todo:
        return Todo(
            id=self.id,
            title=self.title,
            created_at=self.created_at,
            due_date=self.due_date,
            parent_id=self.parent_id,
        )


class SnapshotRequest(BaseModel):
    """Full snapshot of todos, as loaded by the caller."""
    todos: List[TodoPayload] = Field(default_factory=list)
    focus_id: Optional[int] = None

    def to_todos(self) -> List[Todo]:
        return [t.to_todo() for t in self.todos]


class ValidateEdgeRequest(BaseModel):
    """Proposed dependency: child_id would depend on parent_id."""
    child_id: int
    parent_id: int
    todos: List[TodoPayload] = Field(default_factory=list)
    child: Optional[TodoPayload] = None     # New todo not yet in the snapshot
    check_due_dates: Optional[bool] = None  # Falls back to engine config


class ViolationBody(BaseModel):
    kind: str
    reason: Optional[str] = None
    message: str
    child_id: Optional[int] = None
    parent_id: Optional[int] = None


class EdgeValidationResponse(BaseModel):
    accepted: bool
    violation: Optional[ViolationBody] = None


class DueDateSummary(BaseModel):
    valid: bool
    violation: Optional[ViolationBody] = None
    effective_due_dates: Dict[int, Optional[datetime]]
    unchecked_ids: List[int]


class AnalysisResponse(BaseModel):
    root_ids: List[int]
    topological_order: List[int]
    is_acyclic: bool
    critical_path: List[int]
    earliest_start_date: Optional[datetime] = None
    due_dates: DueDateSummary
    dangling_ids: List[int]
    focus_title: Optional[str] = None


class GraphViewResponse(BaseModel):
    nodes: List[Dict[str, Any]]
    edges: List[Dict[str, Any]]
    layout: Dict[str, Any]
    earliest_start_date: Optional[datetime] = None
