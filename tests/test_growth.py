import pytest

from toolbox.growth import IntSlice, append_int, append_slice, main


def test_capacity_growth_matches_documented_output():
    x = IntSlice()
    caps = []
    for i in range(10):
        x = append_int(x, i)
        caps.append(x.cap)
    assert caps == [1, 2, 4, 4, 8, 8, 8, 8, 16, 16]
    assert list(x) == list(range(10))


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "0  cap=1\t[0]"
    assert lines[2] == "2  cap=4\t[0 1 2]"
    assert lines[9] == "9  cap=16\t[0 1 2 3 4 5 6 7 8 9]"


def test_append_with_room_shares_storage():
    x = IntSlice([1, 2], capacity=4)
    a = append_int(x, 3)
    b = append_int(x, 4)
    assert a[2] == 4
    assert list(b) == [1, 2, 4]
    assert len(x) == 2


def test_append_without_room_copies():
    x = IntSlice([1])
    a = append_int(x, 2)
    a[0] = 9
    assert x[0] == 1
    assert a.cap >= len(a)


def test_append_to_none():
    z = append_int(None, 7)
    assert z == [7]


def test_append_slice_contents_and_capacity():
    x = IntSlice([1])
    z = append_slice(x, 2, 3)
    assert z == [1, 2, 3]
    assert z.cap >= len(z)


def test_append_slice_nothing_keeps_contents():
    x = IntSlice([4, 5], capacity=3)
    z = append_slice(x)
    assert z == x
    assert z.cap == x.cap


def test_append_slice_doubles_when_full():
    x = IntSlice([1, 2, 3, 4])
    z = append_slice(x, 5)
    assert z.cap == 2 * len(x)


def test_index_errors_and_bad_capacity():
    s = IntSlice([1, 2], capacity=5)
    with pytest.raises(IndexError):
        s[2]
    with pytest.raises(ValueError):
        IntSlice([1, 2, 3], capacity=2)


def test_str_format():
    assert str(IntSlice([0, 1, 2])) == "[0 1 2]"
    assert str(IntSlice()) == "[]"