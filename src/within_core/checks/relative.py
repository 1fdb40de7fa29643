from typing import Any

from within_core.checks.base import ToleranceCheck
from within_core.common.enums import ToleranceMode
from within_core.common.math import one_like
from within_core.common.model import CheckRequest


class RelativeCheck(ToleranceCheck):
    """
    Accepts measurements in [(1 - tolerance) * target, (1 + tolerance) * target].

    The bounds are computed literally, so for a negative target the "lower" bound is
    larger than the "upper" one and any tolerance above 0 rejects every measurement,
    the target itself included. Compare negated values instead.
    """
    mode = ToleranceMode.RELATIVE

    def lower_bound(self, target: Any, tolerance: Any) -> Any:
        return (one_like(tolerance) - tolerance) * target

    def upper_bound(self, target: Any, tolerance: Any) -> Any:
        return (one_like(tolerance) + tolerance) * target

    def describe_below(self, request: "CheckRequest") -> str:
        return f"`{request.measurement_label}` was less than (1 ± {request.tolerance}) * `{request.target_label}`"

    def describe_above(self, request: "CheckRequest") -> str:
        return f"`{request.measurement_label}` was greater than (1 ± {request.tolerance}) * `{request.target_label}`"
