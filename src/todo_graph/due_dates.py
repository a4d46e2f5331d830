"""
Todo Graph - Due-Date Consistency
=================================
Checks that no dependent todo is due before the todo it waits on.
"""

import logging
from collections import deque
from datetime import datetime
from typing import Deque, Dict, List, Optional, Set

from todo_types import DueDateCheck, Todo, Violation, ViolationKind, normalize_due_date
from .builder import AdjacencyMap, todo_to_graph

logger = logging.getLogger(__name__)


def check_due_dates(todos: List[Todo], graph: Optional[AdjacencyMap] = None) -> DueDateCheck:
    """
    Breadth-first due-date validation from every root.

    A child without a due date inherits its parent's effective due date, and
    its own dependents are checked against that. Stored due dates are never
    modified. Todos not reachable from a root (dangling parent or stored
    cycle) are reported in `unchecked_ids` instead of being checked.

    Args:
        todos: Complete list of todos
        graph: Prebuilt adjacency map for the same todos, built if omitted

    Returns:
        DueDateCheck with the first violation found, if any
    """
    if graph is None:
        graph = todo_to_graph(todos)

    roots = [t for t in todos if t.parent_id is None]
    effective: Dict[int, Optional[datetime]] = {t.id: normalize_due_date(t.due_date) for t in roots}

    violation = _walk(deque(roots), effective, graph)

    # Reported whether or not a violation was found
    reachable = _reachable(roots, graph)
    unchecked = [t.id for t in todos if t.id not in reachable]
    if unchecked:
        logger.debug(f"Due-date check skipped unreachable todos: {unchecked}")

    return DueDateCheck(
        valid=violation is None,
        violation=violation,
        effective_due_dates=effective,
        unchecked_ids=unchecked,
    )


def check_link_due_dates(
    child: Todo,
    parent: Todo,
    todos: List[Todo],
    graph: Optional[AdjacencyMap] = None,
) -> DueDateCheck:
    """
    Due-date check limited to what linking parent -> child changes.

    Only `child` and its dependents are walked, starting from the parent's
    effective due date. Inversions elsewhere in the snapshot are ignored.
    """
    if graph is None:
        graph = todo_to_graph(todos)

    by_id = {t.id: t for t in todos}
    effective: Dict[int, Optional[datetime]] = {parent.id: effective_due_date(parent, by_id)}

    violation = _settle(parent, child, effective)
    if violation is None:
        violation = _walk(deque([child]), effective, graph)

    return DueDateCheck(valid=violation is None, violation=violation, effective_due_dates=effective)


def effective_due_date(todo: Todo, by_id: Dict[int, Todo]) -> Optional[datetime]:
    """Own due date, else the nearest dated ancestor's."""
    seen = set()
    current: Optional[Todo] = todo
    while current is not None and current.id not in seen:
        due = normalize_due_date(current.due_date)
        if due is not None:
            return due
        seen.add(current.id)
        current = by_id.get(current.parent_id) if current.parent_id is not None else None
    return None


def _walk(queue: Deque[Todo], effective: Dict[int, Optional[datetime]], graph: AdjacencyMap) -> Optional[Violation]:
    while queue:
        node = queue.popleft()
        for child in graph.get(node.id, []):
            if child.id in effective:
                continue
            violation = _settle(node, child, effective)
            if violation is not None:
                return violation
            queue.append(child)
    return None


def _settle(node: Todo, child: Todo, effective: Dict[int, Optional[datetime]]) -> Optional[Violation]:
    node_due = effective[node.id]
    child_due = normalize_due_date(child.due_date)

    if child_due is None:
        effective[child.id] = node_due
        return None

    if node_due is not None and node_due > child_due:
        logger.warning(
            f"Todo {child.id} is due {child_due.date()} before its dependency "
            f"{node.id} ({node_due.date()})"
        )
        return Violation(kind=ViolationKind.DUE_DATE_VIOLATION, child_id=child.id, parent_id=node.id)

    effective[child.id] = child_due
    return None


def _reachable(roots: List[Todo], graph: AdjacencyMap) -> Set[int]:
    seen = {t.id for t in roots}
    queue = deque(t.id for t in roots)
    while queue:
        for child in graph.get(queue.popleft(), []):
            if child.id not in seen:
                seen.add(child.id)
                queue.append(child.id)
    return seen
