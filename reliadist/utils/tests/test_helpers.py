import pytest

import numpy as np

from reliadist.utils.helpers import is_number, check_arg, check_number


@pytest.mark.parametrize("value, expected", [
    (True, False),
    (np.bool_(True), False),
    (1, True),
    (1.e-5, True),
    (-np.inf, True),
    (np.nan, True),
    (np.float64(2.5), True),
    (np.int32(-3), True),
    (1 + 2j, False),
    (np.complex128(1j), False),
    (np.asarray(True), False),
    (np.asarray(1), True),
    (np.asarray(1.e-5), True),
    (np.asarray('str'), False),
    (np.ones(2), False),
    ('string', False),
    ([1.0], False),
    ((), False),
    (None, False),
])
def test_is_number(value, expected):
    assert is_number(value) == expected


def test_check_arg_type():
    check_arg(3, 'tag', int)
    check_arg(3.0, 'x', (int, float))

    with pytest.raises(TypeError, match="argument 'tag' should be int; got float 3.0"):
        check_arg(3.0, 'tag', int)

    with pytest.raises(TypeError, match=r"should be one of \(float, str\)"):
        check_arg(3, 'x', (str, float))


def test_check_arg_value():
    check_arg(2, 'tag', int, lambda v: v > 0)

    with pytest.raises(ValueError, match="argument 'tag' was given invalid value -2"):
        check_arg(-2, 'tag', int, lambda v: v > 0)


@pytest.mark.parametrize("value, expected", [
    (1, 1.0),
    (-2.5, -2.5),
    (np.float32(0.5), 0.5),
    (np.asarray(4.0), 4.0),
    (np.inf, np.inf),
])
def test_check_number(value, expected):
    result = check_number(value, 'x')
    assert isinstance(result, float)
    assert result == expected


@pytest.mark.parametrize("value", [True, 'a', None, 1j, [1.0], np.zeros(3)])
def test_check_number_error(value):
    with pytest.raises(TypeError, match="argument 'x' should be"):
        check_number(value, 'x')
