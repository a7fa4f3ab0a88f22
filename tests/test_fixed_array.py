import io

import pytest

from algonotes.fixed_array import Array


def make(*values, size=10):
    arr = Array(size)
    for value in values:
        arr.append(value)
    return arr


def test_append():
    arr = make(1, 2, 3)
    assert arr.get(0) == 1
    assert arr.get(1) == 2
    assert arr.get(2) == 3
    assert arr.get(3) == -1


def test_append_beyond_capacity_is_ignored():
    arr = make(1, 2, 3, size=2)
    assert list(arr) == [1, 2]
    assert len(arr) == 2


def test_average():
    assert make(1, 2, 3).average() == pytest.approx(2.0)


def test_delete():
    arr = make(1, 2, 3)
    arr.delete(1)
    assert arr.get(0) == 1
    assert arr.get(1) == 3
    assert arr.get(2) == -1


def test_difference_sorted():
    result = make(1, 3, 5).difference_sorted(make(2, 3, 6))
    assert result.get(0) == 1
    assert result.get(1) == 5
    assert result.get(2) == -1


def test_display():
    out = io.StringIO()
    make(1, 2, 3).display(out)
    assert out.getvalue() == "1 2 3 \n"


def test_display_to_stdout(capsys):
    make(1, 2, 3).display()
    assert capsys.readouterr().out == "1 2 3 \n"


def test_get():
    assert make(1, 2, 3).get(1) == 2


def test_insert():
    arr = make(1, 2, 3)
    arr.insert(1, 5)
    assert arr.get(0) == 1
    assert arr.get(1) == 5
    assert arr.get(2) == 2
    assert arr.get(3) == 3


def test_insert_when_full_is_ignored():
    arr = make(1, 2, size=2)
    arr.insert(0, 5)
    assert list(arr) == [1, 2]


def test_intersection_sorted():
    result = make(1, 3, 5).intersection_sorted(make(2, 3, 6))
    assert result.get(0) == 3
    assert result.get(1) == -1


def test_is_sorted():
    assert make(1, 2, 3).is_sorted() is True
    assert make(3, 2, 1).is_sorted() is False


def test_max():
    assert make(1, 2, 3).max() == 3


def test_max_empty_raises():
    with pytest.raises(ValueError):
        Array(10).max()


def test_merge_equal_length():
    result = make(1, 3, 5).merge(make(2, 4, 6))
    assert [result.get(i) for i in range(6)] == [1, 2, 3, 4, 5, 6]


def test_merge_different_length():
    result = make(1, 3, 5).merge(make(2, 4))
    assert [result.get(i) for i in range(5)] == [1, 2, 3, 4, 5]
    assert len(result) == 5


def test_min():
    assert make(1, 2, 3).min() == 1


def test_rearrange():
    arr = make(2, -3, 25, 10, -15, -7)
    arr.rearrange()
    assert list(arr) == [-7, -3, -15, 10, 25, 2]


def test_reverse():
    arr = make(1, 2, 3)
    arr.reverse()
    assert list(arr) == [3, 2, 1]


def test_set():
    arr = make(1, 2, 3)
    arr.set(1, 5)
    assert arr.get(1) == 5


def test_sum():
    assert make(1, 2, 3).sum() == 6


def test_union_sorted():
    result = make(1, 3, 5).union_sorted(make(2, 3, 6))
    assert [result.get(i) for i in range(5)] == [1, 2, 3, 5, 6]


def test_negative_size_raises():
    with pytest.raises(ValueError):
        Array(-1)