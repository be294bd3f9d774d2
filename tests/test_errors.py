import pytest

from ldnkit.errors import (
    FileError,
    InvalidIndex,
    LdnError,
    MathError,
    NegativeRoot,
    NullPointer,
    ZeroDivision,
    check_division,
    check_index,
    check_pointer,
    check_root,
    open_file,
)


def test_check_division_zero_raises_with_zero_value():
    with pytest.raises(ZeroDivision) as info:
        check_division(0)
    assert info.value.value == 0
    assert info.value.message == "Division by zero!"


def test_zero_division_is_builtin_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        check_division(0.0)


def test_check_division_passes_nonzero_through():
    assert check_division(5) == 5
    assert check_division(-0.5) == -0.5


def test_zero_division_text():
    err = ZeroDivision("Division by zero!")
    assert str(err) == (
        "Division by Zero Exception!!!\nDivision by zero!\n"
        "The operation has returned the value: 0!!!"
    )


def test_check_root_negative_raises_with_root_of_magnitude():
    with pytest.raises(NegativeRoot) as info:
        check_root(-16)
    assert info.value.value == pytest.approx(4.0)
    assert info.value.message == "Square Root of a Negative Number!"
    assert isinstance(info.value, MathError)


def test_check_root_accepts_zero_and_positive():
    assert check_root(0) == 0
    assert check_root(9.5) == 9.5


def test_negative_root_stores_absolute_value():
    err = NegativeRoot(-3.5, "msg")
    assert err.value == 3.5
    assert str(err).startswith("Negative Root Exception!!!\nmsg\n")


@pytest.mark.parametrize("index,size", [(-1, 3), (3, 3), (10, 3), (0, 0)])
def test_check_index_out_of_range(index, size):
    with pytest.raises(InvalidIndex) as info:
        check_index(index, size)
    assert info.value.message == "Index out of range!"
    assert isinstance(info.value, IndexError)


@pytest.mark.parametrize("index,size", [(0, 1), (2, 3), (0, 3)])
def test_check_index_in_range_returns_index(index, size):
    assert check_index(index, size) == index


def test_invalid_index_text():
    assert str(InvalidIndex("Index out of range!")) == (
        "Invalid Index Exception!!!\nIndex out of range!"
    )


def test_check_pointer_none_raises():
    with pytest.raises(NullPointer) as info:
        check_pointer(None)
    assert str(info.value) == "Null Pointer Exception!!!\nThis pointer leads to NULL!"


def test_check_pointer_returns_object():
    obj = [1, 2]
    assert check_pointer(obj) is obj
    assert check_pointer(0) == 0


def test_open_file_round_trip(tmp_path):
    target = tmp_path / "data.txt"
    with open_file(target, "w") as handle:
        handle.write("3\n1 2 3\n")
    with open_file(target, "r") as handle:
        assert handle.read() == "3\n1 2 3\n"


def test_open_file_binary_mode(tmp_path):
    target = tmp_path / "data.bin"
    with open_file(target, "wb") as handle:
        handle.write(b"\x00\x01")
    with open_file(target, "rb") as handle:
        assert handle.read() == b"\x00\x01"


def test_open_file_missing_raises_file_error(tmp_path):
    missing = tmp_path / "nope" / "absent.txt"
    with pytest.raises(FileError) as info:
        open_file(missing, "r")
    assert info.value.path == str(missing)
    assert info.value.message == "Error in opening the file!"
    assert str(info.value) == (
        f"File Exception!!!\nError in opening the file!\nFile path: {missing}"
    )


def test_all_errors_share_base_class():
    errors = [
        ZeroDivision("a"),
        NegativeRoot(1, "b"),
        InvalidIndex("c"),
        NullPointer("d"),
        FileError("p", "e"),
    ]
    assert all(isinstance(err, LdnError) for err in errors)
    assert [err.message for err in errors] == ["a", "b", "c", "d", "e"]