import pytest

from problemset.graphs import reachable_nodes


def test_worked_example_triangle():
    assert reachable_nodes([[0, 1, 10], [0, 2, 1], [1, 2, 2]], 6, 3) == 13


def test_worked_example_four_nodes():
    edges = [[0, 1, 4], [1, 2, 6], [0, 2, 8], [1, 3, 1]]
    assert reachable_nodes(edges, 10, 4) == 23


def test_start_disconnected_from_all_edges():
    edges = [[1, 2, 4], [1, 4, 5], [1, 3, 1], [2, 3, 4], [3, 4, 5]]
    assert reachable_nodes(edges, 17, 5) == reachable_nodes([], 17, 1)


def test_zero_moves_reaches_only_start():
    edges = [[0, 1, 3], [0, 2, 0]]
    assert reachable_nodes(edges, 0, 3) == reachable_nodes([], 0, 1)


def test_unlimited_moves_reach_everything():
    edges = [[0, 1, 4], [1, 2, 6], [0, 2, 8], [1, 3, 1]]
    n = 4
    total = n + sum(count for _, _, count in edges)
    assert reachable_nodes(edges, 10_000, n) == total


@pytest.mark.parametrize("moves", range(0, 12))
def test_single_chain_counts_moves_plus_start(moves):
    # a path 0 -> 1 with 10 inner nodes; every move reaches one more node
    edges = [[0, 1, 10]]
    assert reachable_nodes(edges, moves, 2) == min(moves, 11) + 1


def test_result_is_monotonic_in_moves():
    edges = [[0, 1, 10], [0, 2, 1], [1, 2, 2]]
    results = [reachable_nodes(edges, moves, 3) for moves in range(20)]
    assert results == sorted(results)


def test_input_edges_are_left_unchanged():
    edges = [[0, 1, 10], [0, 2, 1], [1, 2, 2]]
    snapshot = [list(edge) for edge in edges]
    reachable_nodes(edges, 6, 3)
    assert edges == snapshot


def test_out_of_range_node_raises():
    with pytest.raises(ValueError):
        reachable_nodes([[0, 5, 1]], 3, 2)


def test_negative_moves_raise():
    with pytest.raises(ValueError):
        reachable_nodes([[0, 1, 1]], -1, 2)


def test_empty_graph_raises():
    with pytest.raises(ValueError):
        reachable_nodes([], 3, 0)