from within_core.common.enums import FailureKind
from within_core.common.model import CheckFailure


class AssertionFailure(AssertionError):
    """
    Raised when a tolerance check fails. Subclasses AssertionError so test runners
    report it like any other failed assertion.
    """

    def __init__(self, failure: "CheckFailure", message: str):
        super().__init__(message)
        self.failure = failure

    @property
    def kind(self) -> "FailureKind":
        return self.failure.kind

    @property
    def site(self):
        return self.failure.site
