import io

import pytest

from ldnkit.errors import FileError, InvalidIndex, ZeroDivision
from ldnkit.vector import Vector


def make(values):
    vector = Vector(len(values))
    for index, value in enumerate(values):
        vector.set(value, index)
    return vector


def test_new_vector_is_all_zero():
    vector = Vector(4)
    assert len(vector) == 4
    assert list(vector) == [0, 0, 0, 0]
    assert vector.is_null()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Vector(-1)


def test_set_and_get():
    vector = Vector(3)
    vector.set(7, 1)
    vector[2] = 9
    assert vector.get(1) == 7
    assert vector[2] == 9
    assert not vector.is_null()


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_out_of_range_index_raises(index):
    vector = Vector(3)
    with pytest.raises(InvalidIndex):
        vector.get(index)
    with pytest.raises(IndexError):
        vector.set(1, index)


def test_resize_grow_pads_with_zeros():
    vector = make([1, 2])
    vector.resize(4)
    assert list(vector) == [1, 2, 0, 0]


def test_resize_shrink_truncates():
    vector = make([1, 2, 3, 4])
    vector.resize(2)
    assert list(vector) == [1, 2]
    with pytest.raises(ValueError):
        vector.resize(-2)


def test_count():
    vector = make([1, 2, 1, 3, 1])
    assert vector.count(1) == 3
    assert vector.count(4) == 0


def test_swap_and_invalid_swap():
    vector = make([1, 2, 3])
    vector.swap(0, 2)
    assert list(vector) == [3, 2, 1]
    with pytest.raises(InvalidIndex):
        vector.swap(0, 3)
    assert list(vector) == [3, 2, 1]


def test_sort_orders_elements():
    values = [5, -1, 3, 3, 0]
    vector = make(values)
    assert not vector.is_sorted()
    vector.sort()
    assert vector.is_sorted()
    assert list(vector) == sorted(values)


def test_reverse_twice_is_identity():
    values = [1, 2, 3, 4, 5]
    vector = make(values)
    vector.reverse()
    assert list(vector) == values[::-1]
    vector.reverse()
    assert list(vector) == values


def test_scale():
    vector = make([1, -2, 3])
    vector.scale(2)
    assert list(vector) == [2, -4, 6]


def test_norm_of_three_four():
    assert make([3, 4]).norm() == pytest.approx(5.0)


def test_normalize_gives_unit_length():
    vector = make([3, 4, 12])
    assert not vector.is_normalized()
    vector.normalize()
    assert vector.is_normalized()
    assert vector.norm() == pytest.approx(1.0)


def test_normalize_null_vector_raises():
    with pytest.raises(ZeroDivision):
        Vector(3).normalize()


def test_scan_reads_from_stream():
    vector = Vector(3)
    vector.scan(io.StringIO("4 5\n6\n"))
    assert list(vector) == [4, 5, 6]


def test_scan_short_input_raises():
    vector = Vector(3)
    with pytest.raises(ValueError):
        vector.scan(io.StringIO("1 2"))


def test_save_writes_size_then_elements(tmp_path):
    path = tmp_path / "vector.txt"
    make([1, 2, 3]).save(path)
    assert path.read_text() == "3\n1\n2\n3\n"


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "vector.txt"
    original = make([1.5, -2, 0.25, 7])
    original.save(path)
    loaded = Vector(0)
    loaded.load(path)
    assert list(loaded) == list(original)


def test_load_missing_file_raises(tmp_path):
    missing = tmp_path / "absent.txt"
    with pytest.raises(FileError) as info:
        Vector(1).load(missing)
    assert info.value.path == str(missing)


def test_format_lists_elements():
    text = make([3, 8]).format()
    assert text.splitlines() == ["Print the Vector:", "Element 1: 3", "Element 2: 8"]