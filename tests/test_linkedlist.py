import io

from algonotes.linkedlist import LinkedList


def _filled():
    items = LinkedList()
    for value in (1, 2, 3):
        items.add(value)
    return items


def test_display_empty_list():
    out = io.StringIO()
    LinkedList().display(out)
    assert out.getvalue() == "\n"


def test_display_list():
    out = io.StringIO()
    _filled().display(out)
    assert out.getvalue() == "1 2 3 \n"


def test_display_defaults_to_stdout(capsys):
    _filled().display()
    assert capsys.readouterr().out == "1 2 3 \n"


def test_size_of_empty_list():
    assert len(LinkedList()) == 0


def test_size_with_elements():
    assert len(_filled()) == 3


def test_sum_of_empty_list():
    assert LinkedList().sum() == 0


def test_sum_with_elements():
    assert _filled().sum() == 6


def test_iteration_keeps_insertion_order():
    items = LinkedList()
    for value in (5, -1, 7, 5):
        items.add(value)
    assert list(items) == [5, -1, 7, 5]