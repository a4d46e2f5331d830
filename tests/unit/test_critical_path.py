"""
Unit tests for critical path analysis.
Tests get_critical_path, earliest_start_date and the longest-path helpers from todo_graph/critical_path.py
"""
import pytest
import sys
from datetime import datetime
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from todo_types import CriticalPathStrategy, Todo
from todo_graph import get_critical_path, earliest_start_date, todo_to_graph
from todo_graph.critical_path import longest_path_frontier, longest_path_topological, LongestPath
from todo_graph.topology import topological_ordering


def _ids(path):
    return [t.id for t in path]


@pytest.fixture
def chain():
    """A(root) -> B -> C -> D."""
    return [
        Todo(id=1, title="A", created_at=datetime(2024, 1, 1, 9, 0)),
        Todo(id=2, title="B", created_at=datetime(2024, 1, 2), parent_id=1),
        Todo(id=3, title="C", created_at=datetime(2024, 1, 3), parent_id=2),
        Todo(id=4, title="D", created_at=datetime(2024, 1, 4), parent_id=3),
    ]


@pytest.fixture
def rejoining_dag():
    """
    R -> X -> Y -> Z -> W plus a shortcut R -> Z.

    Z is first reached through the shortcut, so level-by-level relaxation
    raises Z's length later without revisiting W.
    """
    todos = [
        Todo(id=1, title="R"),
        Todo(id=2, title="X", parent_id=1),
        Todo(id=3, title="Y", parent_id=2),
        Todo(id=4, title="Z", parent_id=3),
        Todo(id=5, title="W", parent_id=4),
    ]
    by_id = {t.id: t for t in todos}
    graph = {
        1: [by_id[2], by_id[4]],
        2: [by_id[3]],
        3: [by_id[4]],
        4: [by_id[5]],
        5: [],
    }
    return todos, graph


class TestGetCriticalPath:
    """Test get_critical_path function."""

    def test_empty(self):
        assert get_critical_path([]) == []

    def test_chain_terminal_first(self, chain):
        path = get_critical_path(chain)
        assert _ids(path) == [4, 3, 2, 1]

    def test_chain_in_any_input_order(self, chain):
        path = get_critical_path(list(reversed(chain)))
        assert _ids(path) == [4, 3, 2, 1]

    def test_no_edges_returns_first_root(self):
        todos = [Todo(id=7, title="Alone"), Todo(id=8, title="Also alone")]
        assert _ids(get_critical_path(todos)) == [7]

    def test_single_todo(self):
        only = Todo(id=1, title="Only")
        assert get_critical_path([only]) == [only]

    def test_deeper_branch_wins(self):
        """The shallow branch is discovered first but the deeper one is selected."""
        todos = [
            Todo(id=1, title="Root"),
            Todo(id=2, title="Shallow", parent_id=1),
            Todo(id=3, title="Deep", parent_id=1),
            Todo(id=4, title="Deep 2", parent_id=3),
            Todo(id=5, title="Deep 3", parent_id=4),
        ]
        assert _ids(get_critical_path(todos)) == [5, 4, 3, 1]

    def test_deepest_across_roots(self):
        todos = [
            Todo(id=1, title="Root A"),
            Todo(id=2, title="A1", parent_id=1),
            Todo(id=3, title="Root B"),
            Todo(id=4, title="B1", parent_id=3),
            Todo(id=5, title="B2", parent_id=4),
        ]
        assert _ids(get_critical_path(todos)) == [5, 4, 3]

    def test_ties_keep_first_found(self):
        todos = [
            Todo(id=1, title="Root A"),
            Todo(id=2, title="A1", parent_id=1),
            Todo(id=3, title="Root B"),
            Todo(id=4, title="B1", parent_id=3),
        ]
        assert _ids(get_critical_path(todos)) == [2, 1]

    def test_dangling_todo_is_its_own_root(self):
        todos = [
            Todo(id=1, title="Root"),
            Todo(id=2, title="Orphan", parent_id=99),
            Todo(id=3, title="Orphan child", parent_id=2),
        ]
        assert _ids(get_critical_path(todos)) == [3, 2]

    def test_no_roots_returns_empty(self):
        todos = [Todo(id=1, title="A", parent_id=2), Todo(id=2, title="B", parent_id=1)]
        assert get_critical_path(todos) == []

    def test_does_not_mutate_input(self, chain):
        before = [(t.id, t.parent_id) for t in chain]
        get_critical_path(chain)
        assert [(t.id, t.parent_id) for t in chain] == before

    def test_strategies_agree_on_forest(self):
        todos = [
            Todo(id=1, title="Root"),
            Todo(id=2, title="B", parent_id=1),
            Todo(id=3, title="C", parent_id=1),
            Todo(id=4, title="D", parent_id=3),
            Todo(id=5, title="E", parent_id=2),
            Todo(id=6, title="F", parent_id=5),
        ]
        frontier = get_critical_path(todos, strategy=CriticalPathStrategy.FRONTIER)
        topological = get_critical_path(todos, strategy=CriticalPathStrategy.TOPOLOGICAL)

        assert _ids(frontier) == _ids(topological) == [6, 5, 2, 1]

    def test_frontier_misses_rejoined_descendants(self, rejoining_dag):
        todos, graph = rejoining_dag
        path = get_critical_path(todos, strategy=CriticalPathStrategy.FRONTIER, graph=graph)
        assert _ids(path) == [4, 3, 2, 1]

    def test_topological_is_exact(self, rejoining_dag):
        todos, graph = rejoining_dag
        path = get_critical_path(todos, strategy=CriticalPathStrategy.TOPOLOGICAL, graph=graph)
        assert _ids(path) == [5, 4, 3, 2, 1]


class TestLongestPathHelpers:
    """Per-root relaxation helpers."""

    def test_frontier_on_chain(self, chain):
        assert longest_path_frontier(1, todo_to_graph(chain)) == LongestPath(id=4, length=3)

    def test_topological_on_chain(self, chain):
        graph = todo_to_graph(chain)
        order = topological_ordering(graph)
        assert longest_path_topological(1, graph, order) == LongestPath(id=4, length=3)

    def test_leaf_root(self):
        graph = {1: []}
        assert longest_path_frontier(1, graph) == LongestPath(id=1, length=0)


class TestEarliestStartDate:
    """Test earliest_start_date function."""

    def test_root_created_at(self, chain):
        path = get_critical_path(chain)
        assert earliest_start_date(path) == chain[0].created_at

    def test_empty_path(self):
        assert earliest_start_date([]) is None
