import pytest

from hdfskit.cli.format import format_bytes

_UNITS = {"K": 1024, "M": 1024 ** 2, "G": 1024 ** 3, "T": 1024 ** 4}


def test_small_sizes_are_plain_bytes():
    assert format_bytes(0) == "0B"
    assert format_bytes(1024) == "1024B"


def test_half_kilobyte_step():
    assert format_bytes(1536) == "1.5K"


@pytest.mark.parametrize(
    "size, suffix",
    [
        (1025, "K"),
        (1024 ** 2, "K"),
        (1024 ** 2 + 1, "M"),
        (1024 ** 3 + 1, "G"),
        (1024 ** 4 + 1, "T"),
        (5 * 1024 ** 5, "T"),
    ],
)
def test_suffix_thresholds(size, suffix):
    assert format_bytes(size).endswith(suffix)


@pytest.mark.parametrize("size", [2000, 123456, 98765432, 5 * 1024 ** 3 + 17, 3 * 1024 ** 4 + 99])
def test_value_is_close_to_size(size):
    text = format_bytes(size)
    unit = _UNITS[text[-1]]
    assert abs(float(text[:-1]) * unit - size) <= 0.05 * unit