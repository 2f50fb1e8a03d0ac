import pytest

from fluents import ExitMode, create
from fluents.computation import GeneratorComputation, Last
from fluents.search import permutations, queens, subset_sums


def _unwrap(items: list) -> list:
    return [item.value if isinstance(item, Last) else item for item in items]


def test_four_queens_has_two_solutions() -> None:
    assert _unwrap(list(queens(4))) == [(1, 3, 0, 2), (2, 0, 3, 1)]


def test_unsolvable_board_has_no_solutions() -> None:
    assert list(queens(3)) == []


def test_negative_board_is_rejected() -> None:
    with pytest.raises(ValueError):
        list(queens(-1))


def test_single_queen_is_final() -> None:
    assert list(queens(1)) == [Last((0,))]


def test_subset_sums_lists_matching_subsets() -> None:
    assert _unwrap(list(subset_sums([1, 2, 3], 3))) == [(1, 2), (3,)]


def test_empty_subset_of_nothing_is_final() -> None:
    assert list(subset_sums([], 0)) == [Last(())]


def test_permutations_mark_last_ordering() -> None:
    items = list(permutations("abc"))

    assert len(items) == 6
    assert all(not isinstance(item, Last) for item in items[:-1])
    assert items[-1] == Last(("c", "b", "a"))


def test_fluent_over_permutations_reports_final_on_last() -> None:
    with create(None, GeneratorComputation(lambda: permutations([1, 2]))) as fluent:
        first = fluent.get()
        second = fluent.get()
        third = fluent.get()

    assert first is not None and first.exit_mode is ExitMode.MORE_POSSIBLE
    assert second is not None and second.value == (2, 1)
    assert second.exit_mode is ExitMode.FINAL
    assert third is None


def test_fluent_over_queens_needs_one_more_get_to_find_the_end() -> None:
    with create(None, lambda: queens(4)) as fluent:
        modes = [solution.exit_mode for solution in fluent]

    assert modes == [ExitMode.MORE_POSSIBLE, ExitMode.MORE_POSSIBLE]
