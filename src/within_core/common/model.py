from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from within_core.common.enums import FailureKind, ToleranceMode
from within_core.common.math import display


@dataclass(frozen=True)
class CheckSite:
    """Where a check was invoked. Rendered as 'file:line' in failure messages."""
    file: str
    line: Optional[int] = None

    def __str__(self):
        if self.line is None:
            return self.file
        return f"{self.file}:{self.line}"


@dataclass(frozen=True)
class CheckRequest:
    """The inputs of a single tolerance check."""
    mode: ToleranceMode
    measurement: Any
    target: Any
    tolerance: Any
    measurement_label: str = "measurement"
    target_label: str = "target"
    site: Any = "<unknown>"
    context: str = ""
    context_args: Tuple[Any, ...] = ()
    context_kwargs: dict = field(default_factory=dict)

    def rendered_context(self) -> str:
        """
        Binds the trailing format arguments into the context string.
        Without arguments the context is returned untouched, so literal braces survive.
        """
        if not self.context_args and not self.context_kwargs:
            return self.context
        try:
            return self.context.format(*self.context_args, **self.context_kwargs)
        except (IndexError, KeyError, ValueError) as e:
            # show the raw pieces so the check's own message still gets through
            extras = [repr(arg) for arg in self.context_args]
            extras += [f"{key}={value!r}" for key, value in self.context_kwargs.items()]
            return f"{self.context} ({', '.join(extras)}) [context format error: {e!r}]"


@dataclass(frozen=True)
class CheckFailure:
    """Describes why a check failed; 'values' lists the left/right operands for range failures."""
    kind: FailureKind
    site: Any
    description: str
    values: Tuple[Tuple[str, Any], ...] = ()
    context: str = ""

    def render(self, header: str) -> str:
        lines = [f"{header} at {self.site}:", self.description]
        if self.kind.is_range_failure:
            for name, value in self.values:
                lines.append(f"{name}:".ljust(6) + f" {display(value)}")
        lines.append(self.context)
        return "\n".join(lines)
