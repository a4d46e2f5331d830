"""
Todo Graph - View Model
=======================
Nodes and edges handed to the layout collaborator for the graph page.
No coordinates are computed here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple

from engine_config import LayoutConfig
from todo_types import Todo, normalize_due_date


@dataclass
class GraphNode:
    id: str
    label: str
    width: int
    height: int
    critical: bool = False
    focused: bool = False    # Todo the page was opened for


@dataclass
class GraphEdge:
    id: str
    source: str
    target: str
    critical: bool = False   # Rendered animated


@dataclass
class GraphView:
    nodes: List[GraphNode] = field(default_factory=list)
    edges: List[GraphEdge] = field(default_factory=list)
    layout: Dict[str, Any] = field(default_factory=dict)


def node_label(todo: Todo) -> str:
    due = normalize_due_date(todo.due_date)
    if due is None:
        return f"Id:{todo.id}. {todo.title}"
    return f"Id:{todo.id} Title:{todo.title} Due:{due.month}/{due.day}/{due.year}"


def critical_edges(path: List[Todo]) -> Set[Tuple[int, int]]:
    """(parent, child) pairs along a terminal-first critical path."""
    return {(path[i + 1].id, path[i].id) for i in range(len(path) - 1)}


def build_graph_view(
    todos: List[Todo],
    critical_path: Optional[List[Todo]] = None,
    layout: Optional[LayoutConfig] = None,
    focus_id: Optional[int] = None,
) -> GraphView:
    """
    Build the node/edge payload for the layout collaborator.

    Only links whose parent is in `todos` become edges. Edges on the
    critical path are flagged so the page can animate them, and the node
    for `focus_id` is flagged for emphasis.
    """
    layout = layout or LayoutConfig()
    path = critical_path or []
    on_path = {t.id for t in path}
    highlighted = critical_edges(path)
    known = {t.id for t in todos}

    view = GraphView(layout={
        "rankdir": layout.rank_direction,
        "ranksep": layout.rank_separation,
        "nodesep": layout.node_separation,
    })

    for todo in todos:
        view.nodes.append(GraphNode(
            id=str(todo.id),
            label=node_label(todo),
            width=layout.node_width,
            height=layout.node_height,
            critical=todo.id in on_path,
            focused=todo.id == focus_id,
        ))

    for todo in todos:
        if todo.parent_id is None or todo.parent_id not in known:
            continue
        view.edges.append(GraphEdge(
            id=f"e-{todo.parent_id}-{todo.id}",
            source=str(todo.parent_id),
            target=str(todo.id),
            critical=(todo.parent_id, todo.id) in highlighted,
        ))

    return view
