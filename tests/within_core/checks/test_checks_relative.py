import pytest

from decimal import Decimal

import numpy as np

from within_core.checks.relative import RelativeCheck
from within_core.common.enums import FailureKind, ToleranceMode
from within_core.common.model import CheckRequest


@pytest.fixture
def check():
    return RelativeCheck()


def make_request(measurement, target, tolerance):
    return CheckRequest(
        mode=ToleranceMode.RELATIVE,
        measurement=measurement,
        target=target,
        tolerance=tolerance,
        measurement_label="val",
        target_label="target",
        site="t.py:1",
    )


def test_mode(check):
    assert check.mode == ToleranceMode.RELATIVE


def test_bounds(check):
    assert check.lower_bound(Decimal("100"), Decimal("0.05")) == Decimal("95.00")
    assert check.upper_bound(Decimal("100"), Decimal("0.05")) == Decimal("105.00")


@pytest.mark.parametrize(
    "measurement, target, tolerance, expected_kind",
    [
        (104.0, 100.0, 0.05, None),
        (96.0, 100.0, 0.05, None),
        (94.9, 100.0, 0.05, FailureKind.BELOW_RANGE),
        (105.1, 100.0, 0.05, FailureKind.ABOVE_RANGE),
        (0.0, 0.0, 0.5, None),
        (1e-300, 0.0, 0.5, FailureKind.ABOVE_RANGE),
        (Decimal("95"), Decimal("100"), Decimal("0.05"), None),
        (Decimal("105"), Decimal("100"), Decimal("0.05"), None),
        (Decimal("94.99"), Decimal("100"), Decimal("0.05"), FailureKind.BELOW_RANGE),
        # negative targets use the same formula, so the bounds come out inverted
        (-100.0, -100.0, 0.0, None),
        (-100.0, -100.0, 0.05, FailureKind.BELOW_RANGE),
    ]
)
def test_evaluate(check, measurement, target, tolerance, expected_kind):
    failure = check.evaluate(make_request(measurement, target, tolerance))
    if expected_kind is None:
        assert failure is None
    else:
        assert failure.kind == expected_kind


@pytest.mark.parametrize("target", [0.0, 1.0, 100.0, 3.5e8])
@pytest.mark.parametrize("tolerance", [0.0, 0.05, 0.5])
def test_bounds_are_inclusive(check, target, tolerance):
    lower = (1.0 - tolerance) * target
    upper = (1.0 + tolerance) * target
    assert check.evaluate(make_request(lower, target, tolerance)) is None
    assert check.evaluate(make_request(upper, target, tolerance)) is None
    below = check.evaluate(make_request(np.nextafter(lower, -np.inf), target, tolerance))
    above = check.evaluate(make_request(np.nextafter(upper, np.inf), target, tolerance))
    assert below.kind == FailureKind.BELOW_RANGE
    assert above.kind == FailureKind.ABOVE_RANGE


def test_range_failure_description(check):
    failure = check.evaluate(make_request(94.9, 100.0, 0.05))
    assert failure.description == "`val` was less than (1 ± 0.05) * `target`"
    assert failure.values == (("left", 94.9), ("right", 100.0))

    failure = check.evaluate(make_request(200.0, 100.0, 0.05))
    assert failure.description == "`val` was greater than (1 ± 0.05) * `target`"


def test_float32_stays_float32(check):
    target = np.float32(100.0)
    tolerance = np.float32(0.05)
    assert check.lower_bound(target, tolerance).dtype == np.float32
    assert check.upper_bound(target, tolerance).dtype == np.float32
