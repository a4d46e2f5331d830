"""
Todo Graph - Topological Sorter
===============================
Kahn's algorithm over an adjacency map.
"""

import logging
from collections import deque
from typing import List

from .builder import AdjacencyMap, compute_in_degrees

logger = logging.getLogger(__name__)


def topological_ordering(graph: AdjacencyMap) -> List[int]:
    """
    Order node ids so every parent precedes all of its dependents.

    Nodes whose in-degree never reaches zero are left out, so an output
    shorter than the node count means the graph contains a cycle.
    Ties between ready nodes are broken first-in first-out.

    Args:
        graph: Adjacency map from todo_to_graph

    Returns:
        List of todo ids in dependency order
    """
    in_degree = compute_in_degrees(graph)

    ready = deque(node_id for node_id, degree in in_degree.items() if degree == 0)
    ordering: List[int] = []

    while ready:
        node_id = ready.popleft()
        ordering.append(node_id)

        for child in graph.get(node_id, []):
            in_degree[child.id] -= 1
            if in_degree[child.id] == 0:
                ready.append(child.id)

    if len(ordering) < len(in_degree):
        logger.debug(f"Topological ordering stopped at {len(ordering)}/{len(in_degree)} nodes")

    return ordering


def is_acyclic(graph: AdjacencyMap) -> bool:
    return len(topological_ordering(graph)) == len(compute_in_degrees(graph))
