"""
Todo Graph Module - Dependency Graph Engine
===========================================
Pure functions over a snapshot of todos: build, validate, order, check, analyze.
"""

# Re-export all functions for clean imports
from .builder import AdjacencyMap, todo_to_graph, find_dangling_references, compute_in_degrees
from .topology import topological_ordering, is_acyclic
from .validation import validate_edge
from .due_dates import check_due_dates, check_link_due_dates, effective_due_date
from .critical_path import get_critical_path, earliest_start_date, LongestPath
from .view import GraphView, GraphNode, GraphEdge, build_graph_view, node_label
from .analysis import analyze_todos

__all__ = [
    # Builder
    "AdjacencyMap",
    "todo_to_graph",
    "find_dangling_references",
    "compute_in_degrees",
    # Topology
    "topological_ordering",
    "is_acyclic",
    # Validation
    "validate_edge",
    # Due dates
    "check_due_dates",
    "check_link_due_dates",
    "effective_due_date",
    # Critical path
    "get_critical_path",
    "earliest_start_date",
    "LongestPath",
    # View
    "GraphView",
    "GraphNode",
    "GraphEdge",
    "build_graph_view",
    "node_label",
    # Analysis
    "analyze_todos",
]
