import logging
from dataclasses import replace
from typing import Any, Dict, Optional

from within_core.checks.additive import AdditiveCheck
from within_core.checks.base import ToleranceCheck
from within_core.checks.relative import RelativeCheck
from within_core.common.enums import ToleranceMode
from within_core.common.errors import AssertionFailure
from within_core.common.model import CheckRequest
from within_core.common.settings import CheckerSettings

logger = logging.getLogger(__name__)


class ToleranceChecker:
    """
    Asserts that a measured value lies within a tolerance of a target value.

    Two error models are available:
      - check_additive: |measurement - target| <= tolerance
      - check_relative: measurement within (1 +/- tolerance) * target

    A passing check returns None. A failing check raises AssertionFailure carrying
    the site, the operand labels, their values and the caller's context.
    """

    def __init__(self, settings: Optional["CheckerSettings"] = None):
        self._settings = settings or CheckerSettings()
        self._checks: Dict[ToleranceMode, ToleranceCheck] = {
            check.mode: check for check in (AdditiveCheck(), RelativeCheck())
        }

    @property
    def settings(self) -> "CheckerSettings":
        return self._settings

    def check_additive(
        self,
        measurement: Any,
        target: Any,
        tolerance: Any,
        label_m: Optional[str] = None,
        label_t: Optional[str] = None,
        site: Any = None,
        context: str = "",
        *context_args: Any,
        **context_kwargs: Any,
    ) -> None:
        """
        Fails unless target - tolerance <= measurement <= target + tolerance.

        :param measurement: value under test
        :param target: expected value
        :param tolerance: absolute margin, must be >= 0 and not NaN
        :param label_m: text naming the measurement in diagnostics
        :param label_t: text naming the target in diagnostics
        :param site: where the check was made, e.g. CheckSite(__file__, 42)
        :param context: extra message, formatted with context_args/context_kwargs on failure
        """
        self._run(
            self._build_request(
                ToleranceMode.ADDITIVE, measurement, target, tolerance,
                label_m, label_t, site, context, context_args, context_kwargs,
            )
        )

    def check_relative(
        self,
        measurement: Any,
        target: Any,
        tolerance: Any,
        label_m: Optional[str] = None,
        label_t: Optional[str] = None,
        site: Any = None,
        context: str = "",
        *context_args: Any,
        **context_kwargs: Any,
    ) -> None:
        """
        Fails unless (1 - tolerance) * target <= measurement <= (1 + tolerance) * target.
        Tolerance is a fraction, e.g. 0.05 for 5%. Same parameters as check_additive.
        """
        self._run(
            self._build_request(
                ToleranceMode.RELATIVE, measurement, target, tolerance,
                label_m, label_t, site, context, context_args, context_kwargs,
            )
        )

    def check(self, mode: "ToleranceMode", measurement: Any, target: Any, tolerance: Any, **kwargs: Any) -> None:
        if mode == ToleranceMode.ADDITIVE:
            self.check_additive(measurement, target, tolerance, **kwargs)
        elif mode == ToleranceMode.RELATIVE:
            self.check_relative(measurement, target, tolerance, **kwargs)
        else:
            raise NotImplementedError(f"No check for tolerance mode {mode}")

    def _build_request(
        self, mode, measurement, target, tolerance, label_m, label_t, site, context, context_args, context_kwargs
    ) -> "CheckRequest":
        return CheckRequest(
            mode=mode,
            measurement=measurement,
            target=target,
            tolerance=tolerance,
            measurement_label=label_m if label_m is not None else self._settings.measurement_label,
            target_label=label_t if label_t is not None else self._settings.target_label,
            site=site if site is not None else self._settings.default_site,
            context=context,
            context_args=tuple(context_args),
            context_kwargs=dict(context_kwargs),
        )

    def _run(self, request: "CheckRequest") -> None:
        failure = self._checks[request.mode].evaluate(request)
        if failure is None:
            return

        failure = replace(failure, context=request.rendered_context())
        logger.debug("%s check failed at %s: %s", request.mode, failure.site, failure.kind)
        raise AssertionFailure(failure, failure.render(self._settings.header))


_default_checker = ToleranceChecker()


def check_additive(measurement, target, tolerance, label_m=None, label_t=None, site=None, context="",
                   *context_args, **context_kwargs) -> None:
    """Additive check using the default settings. See ToleranceChecker.check_additive."""
    _default_checker.check_additive(
        measurement, target, tolerance, label_m, label_t, site, context, *context_args, **context_kwargs
    )


def check_relative(measurement, target, tolerance, label_m=None, label_t=None, site=None, context="",
                   *context_args, **context_kwargs) -> None:
    """Relative check using the default settings. See ToleranceChecker.check_relative."""
    _default_checker.check_relative(
        measurement, target, tolerance, label_m, label_t, site, context, *context_args, **context_kwargs
    )


def check_within(sigil: str, tolerance, measurement, target, context="", *context_args, label_m=None,
                 label_t=None, site=None, **context_kwargs) -> None:
    """
    Sigil front end: '+' selects the additive check, '~' the relative one.

        check_within("+", 0.001, val, target, site=CheckSite(__file__, 10))
        check_within("~", 0.05, val, target, "after {} iterations", 3)
    """
    mode = ToleranceMode.from_str(sigil)
    if mode == ToleranceMode.ADDITIVE:
        run = _default_checker.check_additive
    else:
        run = _default_checker.check_relative
    run(measurement, target, tolerance, label_m, label_t, site, context, *context_args, **context_kwargs)
