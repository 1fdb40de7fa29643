from within_core.checker import ToleranceChecker, check_additive, check_relative, check_within
from within_core.common.enums import FailureKind, ToleranceMode
from within_core.common.errors import AssertionFailure
from within_core.common.model import CheckSite
from within_core.common.settings import CheckerSettings

__all__ = [
    "AssertionFailure",
    "CheckSite",
    "CheckerSettings",
    "FailureKind",
    "ToleranceChecker",
    "ToleranceMode",
    "check_additive",
    "check_relative",
    "check_within",
]
