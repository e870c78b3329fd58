"""JMA forecast document models.

Wire documents use camelCase keys (``timeDefines``, ``weatherCodes`` ...);
the models expose snake_case attributes and accept either spelling.
"""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

WIRE_MODEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "frozen": True,
    "extra": "ignore",
}


class AreaDetail(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    name: str
    code: str


class AreaObservation(BaseModel):
    """One area's values within a block.

    Every attribute list is parallel to the owning block's ``time_defines``.
    Lists the upstream omits for a block come back as empty tuples.
    """

    model_config = WIRE_MODEL_CONFIG

    area: AreaDetail
    weather_codes: tuple[str, ...] = ()
    weathers: tuple[str, ...] = ()
    winds: tuple[str, ...] = ()
    waves: tuple[str, ...] = ()
    pops: tuple[str, ...] = ()
    temps: tuple[str, ...] = ()

    @field_validator(
        "weather_codes", "weathers", "winds", "waves", "pops", "temps",
        mode="before",
    )
    @classmethod
    def _null_to_empty(cls, value):
        return () if value is None else value


class TimeSeriesBlock(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    time_defines: tuple[str, ...]
    areas: tuple[AreaObservation, ...]


class ForecastDocument(BaseModel):
    model_config = WIRE_MODEL_CONFIG

    publishing_office: str
    report_datetime: str  # raw ISO-8601 text
    time_series: tuple[TimeSeriesBlock, ...]


class OverviewDocument(BaseModel):
    """JMA ``overview_forecast`` document (free-text outlook)."""

    model_config = WIRE_MODEL_CONFIG

    publishing_office: str
    report_datetime: str
    target_area: str
    headline_text: str = ""
    text: str


@dataclass(frozen=True)
class TimeSpecificObservation:
    time: datetime
    area_name: str
    weathers: tuple[str, ...]
    temps: tuple[str, ...]
