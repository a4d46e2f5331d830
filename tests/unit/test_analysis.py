"""
Unit tests for snapshot analysis.
Tests analyze_todos from todo_graph/analysis.py
"""
import pytest
import sys
from datetime import date, datetime
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from engine_config import EngineConfig
import graph_metrics  # noqa: F401  registers the counters
from prometheus_client import REGISTRY
from todo_types import CriticalPathStrategy, Todo
from todo_graph import analyze_todos


@pytest.fixture
def todos():
    return [
        Todo(id=1, title="Design", created_at=datetime(2024, 1, 1), due_date=date(2024, 1, 10)),
        Todo(id=2, title="Build", created_at=datetime(2024, 1, 2), parent_id=1, due_date=date(2024, 1, 20)),
        Todo(id=3, title="Test", created_at=datetime(2024, 1, 3), parent_id=2),
        Todo(id=4, title="Docs", created_at=datetime(2024, 1, 4)),
    ]


class TestAnalyzeTodos:
    """Test analyze_todos function."""

    def test_report_contents(self, todos):
        report = analyze_todos(todos)

        assert report.root_ids == [1, 4]
        assert report.is_acyclic is True
        assert sorted(report.topological_order) == [1, 2, 3, 4]
        assert report.critical_path_ids == [3, 2, 1]
        assert report.earliest_start_date == datetime(2024, 1, 1)
        assert report.due_dates.valid is True
        assert report.due_dates.effective_due_dates[3] == datetime(2024, 1, 20)
        assert report.dangling_ids == []
        assert report.focus_title is None

    def test_focus_title(self, todos):
        assert analyze_todos(todos, focus_id=3).focus_title == "Test"
        assert analyze_todos(todos, focus_id=99).focus_title is None

    def test_empty_snapshot(self):
        report = analyze_todos([])

        assert report.critical_path == []
        assert report.earliest_start_date is None
        assert report.is_acyclic is True

    def test_cyclic_snapshot(self):
        report = analyze_todos([Todo(id=1, title="A", parent_id=2), Todo(id=2, title="B", parent_id=1)])

        assert report.is_acyclic is False
        assert report.topological_order == []
        assert report.critical_path == []

    def test_dangling_ids_reported_and_counted(self, todos):
        todos.append(Todo(id=5, title="Orphan", parent_id=77))
        before = (REGISTRY.get_sample_value("todo_graph_dangling_references_total") or 0)

        report = analyze_todos(todos)

        assert report.dangling_ids == [5]
        assert 5 in report.root_ids
        assert (REGISTRY.get_sample_value("todo_graph_dangling_references_total") or 0) == before + 1

    def test_due_date_failure_surfaces(self, todos):
        todos[1].due_date = date(2024, 1, 5)
        report = analyze_todos(todos)

        assert report.due_dates.valid is False
        assert report.due_dates.violation.child_id == 2

    def test_uses_configured_strategy(self, todos):
        config = EngineConfig(critical_path_strategy=CriticalPathStrategy.TOPOLOGICAL)
        assert analyze_todos(todos, config=config).critical_path_ids == [3, 2, 1]
