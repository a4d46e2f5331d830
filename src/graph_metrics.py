"""
Todo Graph - Metrics Collection
===============================
Prometheus metrics for observability.

Usage:
    from graph_metrics import graph_metrics

    with graph_metrics.track_analysis() as metadata:
        report = analyze_todos(todos)
        metadata["critical_path_length"] = len(report.critical_path)

    graph_metrics.edge_validation_total.labels(result='accepted').inc()
"""

from prometheus_client import Counter, Histogram
import time
from contextlib import contextmanager
from typing import Iterable, Optional


class GraphMetrics:
    """Metrics for graph queries"""

    def __init__(self):
        self.edge_validation_total = Counter(
            'todo_graph_edge_validation_total',
            'Proposed dependency edges by outcome',
            ['result']  # accepted, structural_violation, constraint_violation, cycle_detected, due_date_violation
        )

        self.constraint_violation_total = Counter(
            'todo_graph_constraint_violation_total',
            'Rejected edges by broken constraint',
            ['reason']  # child_has_parent, parent_not_found, duplicate_edge
        )

        # Todos whose parent_id points at a todo missing from the snapshot
        self.dangling_references_total = Counter(
            'todo_graph_dangling_references_total',
            'Dangling parent references seen in task snapshots'
        )

        self.due_date_violation_total = Counter(
            'todo_graph_due_date_violation_total',
            'Due-date consistency failures'
        )

        self.analysis_duration = Histogram(
            'todo_graph_analysis_duration_seconds',
            'Time to analyze one snapshot of todos',
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0]
        )

        self.critical_path_length = Histogram(
            'todo_graph_critical_path_length',
            'Number of todos on the critical path',
            buckets=[0, 1, 2, 3, 5, 10, 20, 50, 100]
        )

    def record_edge_validation(self, result: str, reason: Optional[str] = None):
        self.edge_validation_total.labels(result=result).inc()
        if reason:
            self.constraint_violation_total.labels(reason=reason).inc()

    def record_dangling(self, dangling_ids: Iterable[int]):
        count = len(list(dangling_ids))
        if count > 0:
            self.dangling_references_total.inc(count)

    @contextmanager
    def track_analysis(self):
        """Context manager to track a full snapshot analysis"""
        start = time.time()
        metadata = {"critical_path_length": None, "due_date_valid": True}

        try:
            yield metadata

            if metadata.get("critical_path_length") is not None:
                self.critical_path_length.observe(metadata["critical_path_length"])
            if not metadata.get("due_date_valid", True):
                self.due_date_violation_total.inc()

        finally:
            self.analysis_duration.observe(time.time() - start)


# =============================================================================
# GLOBAL INSTANCES
# =============================================================================

graph_metrics = GraphMetrics()
