"""
Todo Graph - Critical Path
==========================
Longest dependency chain and the earliest start date it implies.

The default FRONTIER strategy relaxes path lengths level by level from
each root and enqueues a node only on first discovery. A node reached
again through a later frontier gets its length raised but is not expanded
again, so on a general DAG its descendants can keep stale lengths. On the
single-parent forests the todo store produces the two strategies agree;
TOPOLOGICAL relaxes in topological order and is exact for any DAG.
"""

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from todo_types import CriticalPathStrategy, Todo
from .builder import AdjacencyMap, compute_in_degrees, todo_to_graph
from .topology import topological_ordering

logger = logging.getLogger(__name__)


@dataclass
class LongestPath:
    """Deepest node reached from one root."""
    id: int
    length: int


def longest_path_frontier(root: int, graph: AdjacencyMap) -> LongestPath:
    """Level-by-level relaxation from a single root."""
    lengths: Dict[int, int] = {root: 0}
    queue = deque([root])

    while queue:
        frontier = list(queue)
        queue.clear()

        for node in frontier:
            for child in graph.get(node, []):
                if child.id not in lengths:
                    queue.append(child.id)
                lengths[child.id] = max(lengths[node] + 1, lengths.get(child.id, 0))

    return _deepest(root, lengths)


def longest_path_topological(root: int, graph: AdjacencyMap, order: List[int]) -> LongestPath:
    """Relaxation in topological order; every parent is final before its children."""
    lengths: Dict[int, int] = {root: 0}

    for node in order:
        if node not in lengths:
            continue
        for child in graph.get(node, []):
            lengths[child.id] = max(lengths[node] + 1, lengths.get(child.id, 0))

    return _deepest(root, lengths)


def _deepest(root: int, lengths: Dict[int, int]) -> LongestPath:
    best = LongestPath(id=root, length=0)
    for node_id, length in lengths.items():
        if length > best.length:
            best = LongestPath(id=node_id, length=length)
    return best


def get_critical_path(
    todos: List[Todo],
    strategy: CriticalPathStrategy = CriticalPathStrategy.FRONTIER,
    graph: Optional[AdjacencyMap] = None,
) -> List[Todo]:
    """
    Find the deepest todo and the chain back to its root.

    Args:
        todos: Complete list of todos
        strategy: Longest-path relaxation to use
        graph: Prebuilt adjacency map for the same todos, built if omitted

    Returns:
        Todos from the deepest one to its root (terminal first). Empty for
        an empty list or a graph with no roots; just the root when no
        todo has a dependency.
    """
    if not todos:
        return []

    if graph is None:
        graph = todo_to_graph(todos)

    in_degree = compute_in_degrees(graph)
    roots = [node_id for node_id, degree in in_degree.items() if degree == 0]
    if not roots:
        logger.error("Critical path requested for a todo graph with no roots")
        return []

    order = topological_ordering(graph) if strategy == CriticalPathStrategy.TOPOLOGICAL else []

    best: Optional[LongestPath] = None
    for root in roots:
        if strategy == CriticalPathStrategy.TOPOLOGICAL:
            current = longest_path_topological(root, graph, order)
        else:
            current = longest_path_frontier(root, graph)
        if best is None or current.length > best.length:
            best = current

    by_id = {t.id: t for t in todos}
    node = by_id.get(best.id)
    if node is None:
        return []

    path = [node]
    seen = {node.id}
    while node.parent_id is not None:
        parent = by_id.get(node.parent_id)
        if parent is None or parent.id in seen:
            break
        path.append(parent)
        seen.add(parent.id)
        node = parent

    logger.debug(f"Critical path ({strategy.value}): {[t.id for t in path]}")
    return path


def earliest_start_date(path: List[Todo]) -> Optional[datetime]:
    """Creation time of the critical path's root, or None for an empty path."""
    if not path:
        return None
    return path[-1].created_at
