import pytest

from intcalc.utils import maxsize, minsize, truncate_divide, wrap_word


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, 0),
        (maxsize, maxsize),
        (minsize, minsize),
        (maxsize + 1, minsize),
        (minsize - 1, maxsize),
        (2**64 + 5, 5),
        (-(2**64) - 5, -5),
    ],
)
def test_wrap_word(value, expected):
    assert wrap_word(value) == expected


@pytest.mark.parametrize(
    "dividend,divisor,expected",
    [
        (7, 2, 3),
        (-7, 2, -3),
        (7, -2, -3),
        (-7, -2, 3),
        (1, 5, 0),
        (-1, 5, 0),
        (minsize, -1, minsize),
    ],
)
def test_truncate_divide(dividend, divisor, expected):
    assert truncate_divide(dividend, divisor) == expected
