from __future__ import annotations

from PsQ_Enumerator import CompletionEnumerator, enumerate_completions
from conftest import SAMPLE


def test_exactly_288_distinct_valid_completions(solutions):
    assert len(solutions) == 288
    keys = [g.serialize() for g in solutions]
    assert len(set(keys)) == 288
    assert all(g.is_valid(ignore_incomplete=False) for g in solutions)


def test_solutions_come_out_in_ascending_order(solutions):
    keys = [g.serialize() for g in solutions]
    assert keys == sorted(keys)
    assert keys[0] == SAMPLE


def test_incremental_search_finds_the_same_solutions(solutions):
    fast = CompletionEnumerator(incremental=True).enumerate()
    assert [g.serialize() for g in fast] == [g.serialize() for g in solutions]


def test_enumeration_is_repeatable():
    enumerator = CompletionEnumerator(incremental=True)
    first = enumerator.enumerate()
    second = enumerator.enumerate()
    assert first == second
    assert enumerate_completions(incremental=True) == first


def test_published_solutions_are_detached_from_the_search_grid():
    enumerator = CompletionEnumerator(incremental=True)
    result = enumerator.enumerate()
    assert enumerator.grid.serialize() == "0" * 16
    assert all(g is not enumerator.grid for g in result)
    assert all(g.is_initialized() for g in result)


def test_history_records_visited_cells():
    enumerator = CompletionEnumerator(incremental=True, history=True)
    enumerator.enumerate()
    visited = enumerator.history
    assert visited[0] == (0, 0)
    assert all(0 <= r < 4 and 0 <= c < 4 for r, c in visited)
    # every one of the 288 leaves places a digit into the last cell
    assert visited.count((3, 3)) == 288


def test_history_is_off_by_default():
    assert CompletionEnumerator().history is None
