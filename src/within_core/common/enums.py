from enum import Enum


class ToleranceMode(Enum):
    ADDITIVE = "+"
    RELATIVE = "~"

    @classmethod
    def from_str(cls, mode_str: str) -> "ToleranceMode":
        """
        Convert a sigil ('+' or '~') or a mode name to a ToleranceMode enum.
        :param mode_str: str
        :return: ToleranceMode or NotImplementedError
        """
        cleaned = mode_str.strip()
        if cleaned == ToleranceMode.ADDITIVE.value or cleaned.upper() == ToleranceMode.ADDITIVE.name:
            return ToleranceMode.ADDITIVE
        elif cleaned == ToleranceMode.RELATIVE.value or cleaned.upper() == ToleranceMode.RELATIVE.name:
            return ToleranceMode.RELATIVE
        else:
            raise NotImplementedError(f"No tolerance mode enum for {mode_str}")

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.__str__()


class FailureKind(Enum):
    INVALID_TOLERANCE = "INVALID_TOLERANCE"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    BELOW_RANGE = "BELOW_RANGE"
    ABOVE_RANGE = "ABOVE_RANGE"

    @property
    def is_range_failure(self) -> bool:
        return self in (FailureKind.BELOW_RANGE, FailureKind.ABOVE_RANGE)

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.__str__()
