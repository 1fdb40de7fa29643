from typing import Any

from within_core.checks.base import ToleranceCheck
from within_core.common.enums import ToleranceMode
from within_core.common.model import CheckRequest


class AdditiveCheck(ToleranceCheck):
    """Accepts measurements in the closed interval [target - tolerance, target + tolerance]."""
    mode = ToleranceMode.ADDITIVE

    def lower_bound(self, target: Any, tolerance: Any) -> Any:
        return target - tolerance

    def upper_bound(self, target: Any, tolerance: Any) -> Any:
        return target + tolerance

    def describe_below(self, request: "CheckRequest") -> str:
        return f"`{request.measurement_label}` was less than `{request.target_label}` - {request.tolerance}"

    def describe_above(self, request: "CheckRequest") -> str:
        return f"`{request.measurement_label}` was greater than `{request.target_label}` + {request.tolerance}"
