"""Pydantic models for weather reports."""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from metar_decoder.exceptions import ErrorCode


class WeatherReport(BaseModel):
    """Outcome of one fetch-and-decode request.

    A report is either a success (raw METAR and friendly summary, no error)
    or a failure (airport code and error message only). ``error_code``
    classifies the outcome and is never serialized.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    airport_code: str
    raw_metar: str | None = None
    friendly_report: str | None = None
    error: str | None = None
    error_code: ErrorCode | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def check_shape(self) -> "WeatherReport":
        """Allow only a complete success or an error-only failure."""
        if self.error_code is None:
            if self.error is not None:
                raise ValueError("a report with an error message needs an error code")
            if self.raw_metar is None or self.friendly_report is None:
                raise ValueError("a successful report needs both raw_metar and friendly_report")
        else:
            if self.error is None:
                raise ValueError("a failed report needs an error message")
            if self.raw_metar is not None or self.friendly_report is not None:
                raise ValueError("a failed report cannot carry raw_metar or friendly_report")
        return self

    @property
    def is_success(self) -> bool:
        """True when the report carries a decoded summary."""
        return self.error_code is None

    @classmethod
    def success(cls, airport_code: str, raw_metar: str, friendly_report: str) -> "WeatherReport":
        """Create a fully populated report."""
        return cls(airport_code=airport_code, raw_metar=raw_metar, friendly_report=friendly_report)

    @classmethod
    def failure(cls, airport_code: str, message: str, error_code: ErrorCode) -> "WeatherReport":
        """Create an error report carrying only the airport code and message."""
        return cls(airport_code=airport_code, error=message, error_code=error_code)
