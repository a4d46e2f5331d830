"""
Todo Graph - Snapshot Analysis
==============================
Runs every read-only pass over one snapshot and bundles the results.
"""

import logging
from typing import List, Optional

from engine_config import EngineConfig
from graph_metrics import graph_metrics
from todo_types import GraphReport, Todo
from .builder import compute_in_degrees, find_dangling_references, todo_to_graph
from .critical_path import earliest_start_date, get_critical_path
from .due_dates import check_due_dates
from .topology import topological_ordering

logger = logging.getLogger(__name__)


def analyze_todos(
    todos: List[Todo],
    config: Optional[EngineConfig] = None,
    focus_id: Optional[int] = None,
) -> GraphReport:
    """
    Analyze a snapshot of todos for the graph view.

    The adjacency map is built once and shared by every pass.

    Args:
        todos: Complete list of todos
        config: Engine configuration (defaults if omitted)
        focus_id: Todo the page is centered on, used for its title

    Returns:
        GraphReport for the snapshot
    """
    config = config or EngineConfig()

    with graph_metrics.track_analysis() as metadata:
        graph = todo_to_graph(todos)
        dangling = find_dangling_references(todos)
        graph_metrics.record_dangling(dangling)

        in_degree = compute_in_degrees(graph)
        order = topological_ordering(graph)
        path = get_critical_path(todos, strategy=config.critical_path_strategy, graph=graph)
        due_dates = check_due_dates(todos, graph=graph)

        metadata["critical_path_length"] = len(path)
        metadata["due_date_valid"] = due_dates.valid

    focus = next((t for t in todos if t.id == focus_id), None) if focus_id is not None else None

    report = GraphReport(
        root_ids=[node_id for node_id, degree in in_degree.items() if degree == 0],
        topological_order=order,
        is_acyclic=len(order) == len(in_degree),
        critical_path=path,
        earliest_start_date=earliest_start_date(path),
        due_dates=due_dates,
        dangling_ids=dangling,
        focus_title=focus.title if focus else None,
    )

    logger.info(
        f"Analyzed {len(todos)} todos: acyclic={report.is_acyclic}, "
        f"critical path={report.critical_path_ids}, due dates valid={due_dates.valid}"
    )
    return report
