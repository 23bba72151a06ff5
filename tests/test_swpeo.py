import pytest

from enviread.swpeo import (
    ELEMSIZE_ERROR,
    FILESIZE_ERROR,
    OPEN_ERROR,
    SwapError,
    check_elem_size,
    main,
    swap_file_bytes,
)


@pytest.mark.parametrize("size", [2, 4, 8])
def test_check_elem_size_accepts(size):
    assert check_elem_size(size) == size


@pytest.mark.parametrize("size", [0, 1, 3, 16, -2])
def test_check_elem_size_rejects(size):
    with pytest.raises(SwapError) as info:
        check_elem_size(size)
    assert info.value.code == ELEMSIZE_ERROR


def test_swap_two_byte_elements(tmp_path):
    path = tmp_path / "data.raw"
    path.write_bytes(bytes([1, 2, 3, 4]))
    swap_file_bytes(path, 2)
    assert path.read_bytes() == bytes([2, 1, 4, 3])


def test_swap_four_byte_elements(tmp_path):
    path = tmp_path / "data.raw"
    path.write_bytes(bytes([1, 2, 3, 4, 5, 6, 7, 8]))
    swap_file_bytes(path, 4)
    assert path.read_bytes() == bytes([4, 3, 2, 1, 8, 7, 6, 5])


def test_swap_eight_byte_elements(tmp_path):
    path = tmp_path / "data.raw"
    original = bytes(range(8))
    path.write_bytes(original)
    swap_file_bytes(path, 8)
    assert path.read_bytes() == original[::-1]


@pytest.mark.parametrize("size", [2, 4, 8])
def test_swap_twice_restores(tmp_path, size):
    path = tmp_path / "data.raw"
    original = bytes(range(48))
    path.write_bytes(original)
    swap_file_bytes(path, size)
    swap_file_bytes(path, size)
    assert path.read_bytes() == original


def test_empty_file_unchanged(tmp_path):
    path = tmp_path / "empty.raw"
    path.write_bytes(b"")
    swap_file_bytes(path, 4)
    assert path.read_bytes() == b""


def test_bad_file_size(tmp_path):
    path = tmp_path / "odd.raw"
    path.write_bytes(bytes(5))
    with pytest.raises(SwapError) as info:
        swap_file_bytes(path, 4)
    assert info.value.code == FILESIZE_ERROR
    assert path.read_bytes() == bytes(5)


def test_missing_file(tmp_path):
    with pytest.raises(SwapError) as info:
        swap_file_bytes(tmp_path / "missing.raw", 2)
    assert info.value.code == OPEN_ERROR


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage: swpeo" in capsys.readouterr().out


def test_main_bad_elem_size(capsys):
    assert main(["3"]) == ELEMSIZE_ERROR
    assert "element size must be 2, 4 or 8" in capsys.readouterr().err


def test_main_non_numeric_elem_size():
    assert main(["abc"]) == ELEMSIZE_ERROR


def test_main_swaps_files(tmp_path):
    first = tmp_path / "a.raw"
    second = tmp_path / "b.raw"
    first.write_bytes(bytes([1, 2]))
    second.write_bytes(bytes([5, 6, 7, 8]))
    assert main(["2", str(first), str(second)]) == 0
    assert first.read_bytes() == bytes([2, 1])
    assert second.read_bytes() == bytes([6, 5, 8, 7])


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.raw"
    assert main(["4", str(missing)]) == OPEN_ERROR
    assert "failed to open file" in capsys.readouterr().err


def test_main_bad_size_stops(tmp_path):
    bad = tmp_path / "bad.raw"
    bad.write_bytes(bytes(3))
    assert main(["2", str(bad)]) == FILESIZE_ERROR