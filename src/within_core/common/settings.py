from pydantic import BaseModel, ConfigDict, Field, field_validator


class CheckerSettings(BaseModel):
    """Configures how a ToleranceChecker labels and renders its failures."""
    model_config = ConfigDict(frozen=True)

    header: str = Field("assert_within failed", description="First words of every failure message")
    default_site: str = Field("<unknown>", description="Site shown when the caller passes none")
    measurement_label: str = Field("measurement", description="Label used when the measurement has none")
    target_label: str = Field("target", description="Label used when the target has none")

    @field_validator("header", "measurement_label", "target_label")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value
