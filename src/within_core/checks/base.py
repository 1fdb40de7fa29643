from abc import ABC, abstractmethod
from typing import Any, Optional

from within_core.common.enums import FailureKind, ToleranceMode
from within_core.common.model import CheckFailure, CheckRequest
from within_core.validation.common_validator import CommonValidator


class ToleranceCheck(ABC):
    """Abstract base class for a tolerance model: how the accepted interval around a target is built."""
    mode: ToleranceMode

    @abstractmethod
    def lower_bound(self, target: Any, tolerance: Any) -> Any:
        """
        Returns the smallest accepted measurement.

        :param target: expected value
        :param tolerance: validated, non-negative tolerance
        """
        pass

    @abstractmethod
    def upper_bound(self, target: Any, tolerance: Any) -> Any:
        """
        Returns the largest accepted measurement.

        :param target: expected value
        :param tolerance: validated, non-negative tolerance
        """
        pass

    @abstractmethod
    def describe_below(self, request: "CheckRequest") -> str:
        pass

    @abstractmethod
    def describe_above(self, request: "CheckRequest") -> str:
        pass

    def evaluate(self, request: "CheckRequest") -> Optional["CheckFailure"]:
        """
        Runs the shared input validation, then compares the measurement against the bounds.
        Bounds are inclusive: a measurement sitting exactly on a bound passes.

        :param request: CheckRequest
        :return: the first CheckFailure found, or None if the measurement is accepted.
        """
        failure = CommonValidator.run_all_validations(request)
        if failure is not None:
            return failure

        measurement, target, tolerance = request.measurement, request.target, request.tolerance

        if measurement < self.lower_bound(target, tolerance):
            return self._range_failure(request, FailureKind.BELOW_RANGE, self.describe_below(request))

        if measurement > self.upper_bound(target, tolerance):
            return self._range_failure(request, FailureKind.ABOVE_RANGE, self.describe_above(request))

        return None

    @staticmethod
    def _range_failure(request: "CheckRequest", kind: "FailureKind", description: str) -> "CheckFailure":
        return CheckFailure(
            kind=kind,
            site=request.site,
            description=description,
            values=(("left", request.measurement), ("right", request.target)),
        )
