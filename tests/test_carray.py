import io

import pytest

from algonotes import carray


def test_append():
    arr = []
    carray.append(arr, 1, 10)
    carray.append(arr, 2, 10)
    carray.append(arr, 3, 10)
    assert arr == [1, 2, 3]
    assert len(arr) == 3


def test_append_respects_capacity():
    arr = [1, 2]
    carray.append(arr, 3, 2)
    assert arr == [1, 2]


def test_average():
    assert carray.average([1, 2, 3]) == pytest.approx(2.0)


def test_delete():
    arr = [1, 2, 3]
    carray.delete(arr, 1)
    assert arr == [1, 3]
    assert len(arr) == 2


def test_delete_out_of_range_is_ignored():
    arr = [1, 2, 3]
    carray.delete(arr, 3)
    carray.delete(arr, -1)
    assert arr == [1, 2, 3]


def test_difference_sorted():
    result = carray.difference_sorted([1, 3, 5], [2, 3, 6])
    assert result == [1, 5]


def test_display():
    out = io.StringIO()
    carray.display([1, 2, 3], out)
    assert out.getvalue() == "1 2 3 \n"


def test_display_defaults_to_stdout(capsys):
    carray.display([1, 2, 3])
    assert capsys.readouterr().out == "1 2 3 \n"


def test_get():
    assert carray.get([1, 2, 3], 1) == 2
    assert carray.get([1, 2, 3], 3) == -1


def test_insert():
    arr = [1, 2, 3]
    carray.insert(arr, 1, 5)
    assert arr == [1, 5, 2, 3]
    assert len(arr) == 4


def test_insert_out_of_range_is_ignored():
    arr = [1, 2, 3]
    carray.insert(arr, 5, 9)
    assert arr == [1, 2, 3]


def test_intersection_sorted():
    result = carray.intersection_sorted([1, 3, 5], [2, 3, 6])
    assert result == [3]
    assert len(result) == 1


def test_is_sorted():
    assert carray.is_sorted([1, 2, 3]) is True
    assert carray.is_sorted([3, 2, 1]) is False


def test_maximum():
    assert carray.maximum([1, 2, 3]) == 3


def test_maximum_empty_raises():
    with pytest.raises(ValueError):
        carray.maximum([])


def test_merge_equal_length():
    result = carray.merge([1, 3, 5], [2, 4, 6])
    assert result == [1, 2, 3, 4, 5, 6]
    assert len(result) == 6


def test_merge_different_length():
    result = carray.merge([1, 3, 5], [2, 4])
    assert result == [1, 2, 3, 4, 5]
    assert len(result) == 5


def test_minimum():
    assert carray.minimum([1, 2, 3]) == 1


def test_minimum_empty_raises():
    with pytest.raises(ValueError):
        carray.minimum([])


def test_rearrange():
    arr = [2, -3, 25, 10, -15, -7]
    carray.rearrange(arr)
    assert arr == [-7, -3, -15, 10, 25, 2]


def test_rearrange_all_negative_unchanged():
    arr = [-1, -2, -3]
    carray.rearrange(arr)
    assert arr == [-1, -2, -3]


def test_reverse():
    arr = [1, 2, 3]
    carray.reverse(arr)
    assert arr == [3, 2, 1]


def test_set_item():
    arr = [1, 2, 3]
    carray.set_item(arr, 1, 5)
    assert arr[1] == 5


def test_total():
    assert carray.total([1, 2, 3]) == 6


def test_union_sorted():
    result = carray.union_sorted([1, 3, 5], [2, 3, 6])
    assert result == [1, 2, 3, 5, 6]
    assert len(result) == 5