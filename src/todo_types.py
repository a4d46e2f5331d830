"""
Todo Graph - Type Definitions
=============================

Core data structures for the todo dependency-graph engine.
Every result type here is a plain value returned by a pure function;
nothing holds on to graph state between calls.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Union


DueDateLike = Union[date, datetime, str, None]


# =============================================================================
# ENUMS
# =============================================================================

class ViolationKind(str, Enum):
    """Why a graph operation was rejected."""
    STRUCTURAL_VIOLATION = "structural_violation"  # Stored graph is already cyclic
    CONSTRAINT_VIOLATION = "constraint_violation"  # Edge breaks a single-parent rule
    CYCLE_DETECTED = "cycle_detected"              # Edge would close a cycle
    DUE_DATE_VIOLATION = "due_date_violation"      # Dependent due before its dependency


class ConstraintReason(str, Enum):
    """Specific constraint broken by a CONSTRAINT_VIOLATION."""
    CHILD_HAS_PARENT = "child_has_parent"
    PARENT_NOT_FOUND = "parent_not_found"
    DUPLICATE_EDGE = "duplicate_edge"


class CriticalPathStrategy(str, Enum):
    """How longest-path lengths are relaxed from each root."""
    FRONTIER = "frontier"         # Level-by-level relaxation (default)
    TOPOLOGICAL = "topological"   # Relax in topological order (exact on any DAG)


# =============================================================================
# TODO
# =============================================================================

@dataclass
class Todo:
    """A single unit of work. At most one parent dependency."""
    id: int
    title: str
    created_at: datetime = field(default_factory=datetime.now)
    due_date: DueDateLike = None
    parent_id: Optional[int] = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


# =============================================================================
# RESULT STRUCTURES
# =============================================================================

VIOLATION_MESSAGES: Dict[str, str] = {
    ViolationKind.STRUCTURAL_VIOLATION.value:
        "The stored todos already contain a circular dependency. Repair the data before linking todos.",
    ConstraintReason.CHILD_HAS_PARENT.value:
        "This todo already depends on another todo. Remove that dependency first.",
    ConstraintReason.PARENT_NOT_FOUND.value:
        "The todo to depend on was not found.",
    ConstraintReason.DUPLICATE_EDGE.value:
        "This todo is already a dependent of that todo.",
    ViolationKind.CYCLE_DETECTED.value:
        "Adding this dependency would create a circular dependency.",
    ViolationKind.DUE_DATE_VIOLATION.value:
        "A dependent todo cannot be due before the todo it depends on.",
}


@dataclass
class Violation:
    """
    Structured reason for a rejected graph operation.

    `reason` is only set for CONSTRAINT_VIOLATION.
    """
    kind: ViolationKind
    reason: Optional[ConstraintReason] = None
    message: str = ""
    child_id: Optional[int] = None
    parent_id: Optional[int] = None

    def __post_init__(self):
        if not self.message:
            key = self.reason.value if self.reason else self.kind.value
            self.message = VIOLATION_MESSAGES.get(key, "")


class GraphValidationError(Exception):
    """Raised by callers that prefer exceptions over result values."""

    def __init__(self, violation: Violation):
        super().__init__(violation.message)
        self.violation = violation

    @property
    def kind(self) -> ViolationKind:
        return self.violation.kind


@dataclass
class EdgeValidation:
    """Outcome of validating a proposed parent -> child edge."""
    accepted: bool
    violation: Optional[Violation] = None

    def __bool__(self) -> bool:
        return self.accepted

    def raise_for_violation(self) -> None:
        if self.violation is not None:
            raise GraphValidationError(self.violation)


@dataclass
class DueDateCheck:
    """
    Outcome of the due-date consistency pass.

    `effective_due_dates` maps every visited todo to the due date its own
    dependents are checked against (its own, or inherited from its parent).
    """
    valid: bool
    violation: Optional[Violation] = None
    effective_due_dates: Dict[int, Optional[datetime]] = field(default_factory=dict)
    unchecked_ids: List[int] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


@dataclass
class GraphReport:
    """Everything the graph view needs about one snapshot of todos."""
    root_ids: List[int]
    topological_order: List[int]
    is_acyclic: bool
    critical_path: List[Todo]
    earliest_start_date: Optional[datetime]
    due_dates: DueDateCheck
    dangling_ids: List[int] = field(default_factory=list)
    focus_title: Optional[str] = None

    @property
    def critical_path_ids(self) -> List[int]:
        return [t.id for t in self.critical_path]


# =============================================================================
# DATE NORMALIZATION
# =============================================================================

def normalize_due_date(value: DueDateLike) -> Optional[datetime]:
    """
    Normalize a due date to a naive datetime so values from different
    sources compare cleanly. Aware values are converted to UTC first.
    """
    if value is None or value == "":
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    raise TypeError(f"Unsupported due date value: {value!r}")


# =============================================================================
# SERIALIZATION HELPERS
# =============================================================================

def todo_to_dict(t: Todo) -> Dict[str, Any]:
    due = normalize_due_date(t.due_date)
    return {
        "id": t.id,
        "title": t.title,
        "created_at": t.created_at.isoformat(),
        "due_date": due.isoformat() if due else None,
        "parent_id": t.parent_id,
    }


def dict_to_todo(data: Dict[str, Any]) -> Todo:
    created_at = data.get("created_at")
    if isinstance(created_at, str):
        created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    return Todo(
        id=int(data["id"]),
        title=data.get("title", "Untitled"),
        created_at=created_at or datetime.now(),
        due_date=normalize_due_date(data.get("due_date")),
        parent_id=int(data["parent_id"]) if data.get("parent_id") is not None else None,
    )


def violation_to_dict(v: Violation) -> Dict[str, Any]:
    return {
        "kind": v.kind.value,
        "reason": v.reason.value if v.reason else None,
        "message": v.message,
        "child_id": v.child_id,
        "parent_id": v.parent_id,
    }
