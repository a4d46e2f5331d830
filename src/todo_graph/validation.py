"""
Todo Graph - Edge Validation
============================
Decides whether a proposed parent -> child dependency may be committed.
"""

import logging
from typing import List, Optional

from graph_metrics import graph_metrics
from todo_types import ConstraintReason, EdgeValidation, Todo, Violation, ViolationKind
from .builder import todo_to_graph
from .due_dates import check_link_due_dates
from .topology import topological_ordering

logger = logging.getLogger(__name__)


def validate_edge(child: Todo, parent: Todo, todos: List[Todo], check_due_dates_on_link: bool = False) -> EdgeValidation:
    """
    Validate adding the edge parent -> child to the current snapshot.

    Rules, in order:
    1. The stored todos must have at least one root (else they are already cyclic)
    2. The child must not already have a parent
    3. The parent must exist in the snapshot
    4. The child must not already be a dependent of the parent
    5. The tentative graph must still have a full topological ordering

    With `check_due_dates_on_link`, the child and its dependents must also
    keep due dates ordered below the parent. Inversions elsewhere in the
    snapshot do not block the link. Nothing the caller holds is modified;
    persisting the edge after acceptance is up to the caller.

    Args:
        child: Todo that would gain a dependency
        parent: Todo it would depend on
        todos: Complete current list of todos
        check_due_dates_on_link: Also reject due-date inversions

    Returns:
        EdgeValidation, truthy when the edge is accepted
    """
    result = _validate(child, parent, todos, check_due_dates_on_link)

    if result.accepted:
        logger.info(f"Dependency accepted: {child.id} -> depends on {parent.id}")
        graph_metrics.record_edge_validation("accepted")
    else:
        violation = result.violation
        reason = violation.reason.value if violation.reason else None
        if violation.kind == ViolationKind.STRUCTURAL_VIOLATION:
            logger.error(f"Stored todo graph has no roots; refusing {child.id} -> {parent.id}")
        else:
            logger.warning(
                f"Dependency rejected ({violation.kind.value}{'/' + reason if reason else ''}): "
                f"{child.id} -> {parent.id}"
            )
        graph_metrics.record_edge_validation(violation.kind.value, reason)

    return result


def _validate(child: Todo, parent: Todo, todos: List[Todo], check_due_dates_on_link: bool) -> EdgeValidation:
    def reject(kind: ViolationKind, reason: Optional[ConstraintReason] = None) -> EdgeValidation:
        return EdgeValidation(
            accepted=False,
            violation=Violation(kind=kind, reason=reason, child_id=child.id, parent_id=parent.id),
        )

    if todos and not any(t.parent_id is None for t in todos):
        return reject(ViolationKind.STRUCTURAL_VIOLATION)

    if child.parent_id is not None:
        return reject(ViolationKind.CONSTRAINT_VIOLATION, ConstraintReason.CHILD_HAS_PARENT)

    # Built fresh per call, so it doubles as the working copy
    graph = todo_to_graph(todos)
    dependents = graph.get(parent.id)
    if dependents is None:
        return reject(ViolationKind.CONSTRAINT_VIOLATION, ConstraintReason.PARENT_NOT_FOUND)

    if any(t.id == child.id for t in dependents):
        return reject(ViolationKind.CONSTRAINT_VIOLATION, ConstraintReason.DUPLICATE_EDGE)

    # Tentative edge lives only in the working copy
    dependents.append(child)
    graph.setdefault(child.id, [])

    if len(topological_ordering(graph)) != len(graph):
        return reject(ViolationKind.CYCLE_DETECTED)

    if check_due_dates_on_link:
        due_check = check_link_due_dates(child, parent, todos, graph)
        if not due_check.valid:
            return EdgeValidation(accepted=False, violation=due_check.violation)

    return EdgeValidation(accepted=True)
