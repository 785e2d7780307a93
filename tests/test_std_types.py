import pytest

from rustdrill.lessons.std_types import (
    Cons,
    create_empty_list,
    create_non_empty_list,
    offset_sums,
)


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty != create_empty_list()
    assert list(non_empty) == [1, 2, 3]


def test_cons_equality():
    assert create_non_empty_list() == Cons(1, Cons(2, Cons(3)))


def test_offset_sums_small():
    assert offset_sums([1, 2, 3, 4], 2) == [4, 6]


def test_offset_sums_cover_everything():
    numbers = list(range(100))
    sums = offset_sums(numbers, 8)
    assert len(sums) == 8
    assert sum(sums) == sum(numbers)


def test_offset_sums_prints(capsys):
    offset_sums([5, 7], 2)
    out = capsys.readouterr().out
    assert "Sum of offset 0 is 5" in out
    assert "Sum of offset 1 is 7" in out


def test_offset_sums_rejects_zero_workers():
    with pytest.raises(ValueError):
        offset_sums([1, 2, 3], 0)