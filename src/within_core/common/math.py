from typing import Any


def is_nan(value: Any) -> bool:
    # Decimal exposes is_nan(); comparing a signalling NaN would raise.
    checker = getattr(value, "is_nan", None)
    if callable(checker):
        return bool(checker())
    return bool(value != value)


def zero_like(value: Any) -> Any:
    """Returns 0 in the numeric type of 'value' (float32 stays float32, Decimal stays Decimal)."""
    return type(value)(0)


def one_like(value: Any) -> Any:
    """Returns 1 in the numeric type of 'value'."""
    return type(value)(1)


def display(value: Any) -> str:
    return str(value)
