import math

import pytest

from cmac.core import accuracy_from_error, calculate_error
from cmac.errors import InvalidParametersError


def test_error_divides_root_by_sample_count() -> None:
    actual = [(0.0, 1.0), (1.0, 2.0)]
    predicted = [(0.0, 1.0), (1.0, 4.0)]
    error = calculate_error(actual, predicted)
    assert error == 1.0
    assert accuracy_from_error(error) == 0.0


def test_accuracy_uses_absolute_error() -> None:
    assert accuracy_from_error(0.25) == 0.75
    assert accuracy_from_error(-0.25) == 0.75


def test_nan_propagates_without_raising() -> None:
    error = calculate_error([(0.0, 1.0)], [(0.0, float("nan"))])
    assert math.isnan(error)


def test_empty_and_mismatched_inputs_fail() -> None:
    with pytest.raises(InvalidParametersError):
        calculate_error([], [])
    with pytest.raises(InvalidParametersError):
        calculate_error([(0.0, 1.0)], [])
