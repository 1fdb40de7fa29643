from typing import Optional

from within_core.common.enums import FailureKind
from within_core.common.math import is_nan, zero_like
from within_core.common.model import CheckFailure, CheckRequest


class CommonValidator:
    """
    Input checks shared by every tolerance model, run in this order:
      1) tolerance is NaN
      2) tolerance is negative
      3) measurement is NaN
      4) target is NaN
    The first violation is returned and later checks are not evaluated.
    """

    @staticmethod
    def validate_tolerance(request: "CheckRequest") -> Optional["CheckFailure"]:
        tolerance = request.tolerance

        if is_nan(tolerance):
            return CheckFailure(
                kind=FailureKind.INVALID_TOLERANCE,
                site=request.site,
                description=f"epsilon was Nan: {tolerance}",
            )

        if tolerance < zero_like(tolerance):
            return CheckFailure(
                kind=FailureKind.INVALID_TOLERANCE,
                site=request.site,
                description=f"Epsilon cannot be negative when used with assert_within: {tolerance}",
            )

        return None

    @staticmethod
    def validate_operands(request: "CheckRequest") -> Optional["CheckFailure"]:
        operands = (
            (request.measurement_label, request.measurement),
            (request.target_label, request.target),
        )
        for label, value in operands:
            if is_nan(value):
                return CheckFailure(
                    kind=FailureKind.NOT_A_NUMBER,
                    site=request.site,
                    description=f"`{label}` was Nan: {value}",
                )
        return None

    @staticmethod
    def run_all_validations(request: "CheckRequest") -> Optional["CheckFailure"]:
        """
        Aggregates:
          - tolerance checks
          - operand NaN checks
        Returns the first failure found, or None when the inputs are usable.
        """
        failure = CommonValidator.validate_tolerance(request)
        if failure is not None:
            return failure
        return CommonValidator.validate_operands(request)
