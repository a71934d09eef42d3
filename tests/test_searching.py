"""Tests for the searching step recorders."""

import pytest

from algoviz.elements import ElementState, UnknownAlgorithmError
from algoviz.searching import (
    BINARY_SEARCH,
    JUMP_SEARCH,
    LINEAR_SEARCH,
    SEARCHING_ALGORITHMS,
    get_searching_algorithm,
)

ALL_SEARCHES = [LINEAR_SEARCH, BINARY_SEARCH, JUMP_SEARCH]


@pytest.fixture(params=ALL_SEARCHES, ids=lambda a: a.key)
def algo(request):
    return request.param


def _searched_values(algo, values):
    return sorted(values) if algo.requires_sorted else list(values)


class TestSearchInvariants:
    @pytest.mark.parametrize("values,target", [
        ([4, 2, 9, 1], 9),
        ([4, 2, 9, 1], 4),
        ([10, 20, 30, 40, 50, 60], 60),
        ([10, 20, 30, 40, 50, 60], 10),
        (list(range(0, 100, 3)), 51),
    ])
    def test_found_index_points_at_target(self, algo, values, target):
        steps = algo.record(values, target)
        last = steps[-1]
        assert last.is_complete
        assert last.found_index is not None
        assert last.values[last.found_index] == target
        assert last.array[last.found_index].state == ElementState.SORTED

    @pytest.mark.parametrize("values,target", [
        ([4, 2, 9, 1], 5),
        ([1, 3, 5, 7, 9], 0),
        ([1, 3, 5, 7, 9], 10),
        ([], 3),
    ])
    def test_absent_target(self, algo, values, target):
        last = algo.record(values, target)[-1]
        assert last.is_complete
        assert last.found_index is None

    def test_found_index_only_on_terminal_step(self, algo):
        steps = algo.record([1, 2, 3, 4, 5, 6, 7, 8, 9], 7)
        assert all(s.found_index is None for s in steps[:-1])
        assert not any(s.is_complete for s in steps[:-1])

    def test_first_step_is_initial(self, algo):
        values = [8, 3, 5]
        first = algo.record(values, 3)[0]
        assert first.comparisons == 0
        assert not first.is_complete
        assert first.current_index is None
        assert first.values == _searched_values(algo, values)

    def test_comparisons_never_decrease(self, algo):
        steps = algo.record(list(range(50)), 37)
        for prev, cur in zip(steps, steps[1:]):
            assert cur.comparisons >= prev.comparisons

    def test_input_not_mutated(self, algo):
        values = [9, 1, 5, 3]
        algo.record(values, 5)
        assert values == [9, 1, 5, 3]

    def test_deterministic(self, algo):
        assert algo.record([5, 1, 4, 2], 4) == algo.record([5, 1, 4, 2], 4)

    def test_unsorted_input_is_corrected(self, algo):
        values = [9, 7, 5, 3, 1]
        last = algo.record(values, 3)[-1]
        assert last.values == _searched_values(algo, values)
        assert last.values[last.found_index] == 3


class TestLinearSearch:
    def test_example(self):
        assert LINEAR_SEARCH.record([4, 2, 9, 1], 9)[-1].found_index == 2

    def test_duplicates_resolve_to_first(self):
        last = LINEAR_SEARCH.record([3, 7, 7, 7], 7)[-1]
        assert last.found_index == 1
        assert last.current_index == 1
        assert last.comparisons == 2

    def test_exhaustion_probes_every_element(self):
        steps = LINEAR_SEARCH.record([4, 2, 9, 1], 5)
        assert steps[-1].comparisons == 4
        assert [s.current_index for s in steps[1:-1]] == [0, 1, 2, 3]
        assert steps[-1].current_index is None


class TestBinarySearch:
    def test_example_not_found(self):
        assert BINARY_SEARCH.record([1, 3, 5, 7, 9], 6)[-1].found_index is None

    def test_probe_tags_range_and_midpoint(self):
        steps = BINARY_SEARCH.record([1, 3, 5, 7, 9], 9)
        probe = steps[1]
        assert probe.current_index == 2
        assert [el.state for el in probe.array] == [
            ElementState.COMPARING,
            ElementState.COMPARING,
            ElementState.PIVOT,
            ElementState.COMPARING,
            ElementState.COMPARING,
        ]

    def test_interval_halves(self):
        steps = BINARY_SEARCH.record(list(range(1, 1025)), 1)
        assert steps[-1].found_index == 0
        assert steps[-1].comparisons <= 11


class TestJumpSearch:
    def test_example(self):
        assert JUMP_SEARCH.record([1, 2, 3, 4, 5, 6, 7, 8, 9], 7)[-1].found_index == 6

    def test_duplicates_resolve_to_first(self):
        last = JUMP_SEARCH.record([1, 4, 4, 4, 4, 4, 4, 9, 9], 4)[-1]
        assert last.found_index == 1

    def test_target_beyond_last_block(self):
        last = JUMP_SEARCH.record([1, 2, 3, 4, 5, 6, 7, 8, 9], 100)[-1]
        assert last.found_index is None

    @pytest.mark.parametrize("n", range(0, 201))
    def test_never_probes_out_of_bounds(self, n):
        values = list(range(0, 2 * n, 2))
        for target in (-1, 0, n, 2 * n - 2, 2 * n - 1, 2 * n + 5):
            steps = JUMP_SEARCH.record(values, target)
            for step in steps:
                if step.current_index is not None:
                    assert 0 <= step.current_index < n
            last = steps[-1]
            if target in values:
                assert last.values[last.found_index] == target
            else:
                assert last.found_index is None


class TestRegistry:
    def test_keys(self):
        assert list(SEARCHING_ALGORITHMS) == ["linearSearch", "binarySearch", "jumpSearch"]

    def test_requires_sorted(self):
        assert not LINEAR_SEARCH.requires_sorted
        assert BINARY_SEARCH.requires_sorted
        assert JUMP_SEARCH.requires_sorted

    def test_unknown_key(self):
        with pytest.raises(UnknownAlgorithmError):
            get_searching_algorithm("interpolationSearch")
