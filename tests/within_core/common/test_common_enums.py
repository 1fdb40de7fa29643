import pytest
from within_core.common.enums import FailureKind, ToleranceMode


class TestToleranceMode:
    @pytest.mark.parametrize(
        "input_str, expected_enum",
        [
            ("+", ToleranceMode.ADDITIVE),
            (" + ", ToleranceMode.ADDITIVE),
            ("ADDITIVE", ToleranceMode.ADDITIVE),
            ("additive", ToleranceMode.ADDITIVE),
            ("~", ToleranceMode.RELATIVE),
            ("RELATIVE", ToleranceMode.RELATIVE),
            ("relative", ToleranceMode.RELATIVE),
        ],
    )
    def test_from_str_valid(self, input_str, expected_enum):
        """Test that from_str accepts both sigils and names."""
        assert ToleranceMode.from_str(input_str) == expected_enum

    @pytest.mark.parametrize("input_str", ["", "-", "*", "add", "relativex"])
    def test_from_str_invalid(self, input_str):
        """Test that from_str raises NotImplementedError for unknown sigils."""
        with pytest.raises(NotImplementedError):
            ToleranceMode.from_str(input_str)

    def test_str(self):
        assert str(ToleranceMode.ADDITIVE) == "ADDITIVE"
        assert str(ToleranceMode.RELATIVE) == "RELATIVE"

    def test_repr(self):
        assert repr(ToleranceMode.RELATIVE) == "RELATIVE"


class TestFailureKind:
    @pytest.mark.parametrize(
        "kind, expected",
        [
            (FailureKind.INVALID_TOLERANCE, False),
            (FailureKind.NOT_A_NUMBER, False),
            (FailureKind.BELOW_RANGE, True),
            (FailureKind.ABOVE_RANGE, True),
        ],
    )
    def test_is_range_failure(self, kind, expected):
        assert kind.is_range_failure is expected

    def test_str(self):
        assert str(FailureKind.BELOW_RANGE) == "BELOW_RANGE"
