"""
Todo Graph - Graph Builder
==========================
Converts a flat list of todos into an adjacency map (parent id -> dependents).
"""

import logging
from typing import Dict, List

from todo_types import Todo

logger = logging.getLogger(__name__)

AdjacencyMap = Dict[int, List[Todo]]


def todo_to_graph(todos: List[Todo]) -> AdjacencyMap:
    """
    Build the adjacency map for a snapshot of todos.

    Every todo id is a key, even without dependents. Children keep input
    order. A todo whose parent_id does not resolve is left out of every
    children list, so traversals treat it as a root.

    Args:
        todos: Complete list of todos

    Returns:
        Mapping of todo id -> list of direct dependent todos
    """
    graph: AdjacencyMap = {todo.id: [] for todo in todos}

    for todo in todos:
        if todo.parent_id is None:
            continue

        children = graph.get(todo.parent_id)
        if children is None:
            continue
        children.append(todo)

    return graph


def find_dangling_references(todos: List[Todo]) -> List[int]:
    """Ids of todos whose parent_id points at a todo missing from the list."""
    known = {t.id for t in todos}
    dangling = [t.id for t in todos if t.parent_id is not None and t.parent_id not in known]
    if dangling:
        logger.warning(f"Dangling parent references dropped from graph: {dangling}")
    return dangling


def compute_in_degrees(graph: AdjacencyMap) -> Dict[int, int]:
    """
    Count incoming edges per node.

    Children that are not keys of the graph still get an entry.
    """
    in_degree = {node_id: 0 for node_id in graph}
    for children in graph.values():
        for child in children:
            in_degree[child.id] = in_degree.get(child.id, 0) + 1
    return in_degree

