import pytest

from algodrills.graphs import Employee, can_finish, get_importance, num_islands


def test_can_finish_simple_chain():
    assert can_finish(2, [[1, 0]]) is True


def test_can_finish_detects_cycle():
    assert can_finish(2, [[1, 0], [0, 1]]) is False


def test_can_finish_without_prerequisites():
    assert can_finish(5, []) is True


def test_can_finish_longer_cycle_with_free_course():
    assert can_finish(4, [[1, 0], [2, 1], [0, 2]]) is False


def test_can_finish_diamond():
    assert can_finish(4, [[1, 0], [2, 0], [3, 1], [3, 2]]) is True


def _staff():
    return [
        Employee(1, 5, [2, 3]),
        Employee(2, 3, []),
        Employee(3, 3, []),
    ]


def test_get_importance_of_root_covers_everyone():
    staff = _staff()
    assert get_importance(staff, 1) == sum(e.importance for e in staff)


def test_get_importance_of_leaf_is_own_score():
    staff = _staff()
    assert get_importance(staff, 2) == staff[1].importance


def test_get_importance_unknown_id_raises():
    with pytest.raises(KeyError):
        get_importance(_staff(), 99)


GRID_ONE = [
    list("11110"),
    list("11010"),
    list("11000"),
    list("00000"),
]

GRID_THREE = [
    list("11000"),
    list("11000"),
    list("00100"),
    list("00011"),
]


def test_num_islands_single_island():
    assert num_islands(GRID_ONE) == 1


def test_num_islands_three_islands():
    assert num_islands(GRID_THREE) == 3


def test_num_islands_leaves_grid_unchanged():
    grid = [row[:] for row in GRID_THREE]
    num_islands(grid)
    assert grid == GRID_THREE


def test_num_islands_same_on_transpose():
    transposed = [list(column) for column in zip(*GRID_THREE)]
    assert num_islands(transposed) == num_islands(GRID_THREE)


def test_num_islands_empty_and_water():
    assert num_islands([]) == 0
    assert num_islands([list("000"), list("000")]) == 0


def test_num_islands_accepts_strings():
    assert num_islands(["".join(row) for row in GRID_THREE]) == num_islands(GRID_THREE)