"""Table, summary and overview renderers for forecast documents."""

import json
from collections.abc import Iterable, Sequence
from datetime import datetime
from enum import StrEnum

from weatherrelay.errors import TimestampParseError
from weatherrelay.models.forecast import (
    AreaObservation,
    ForecastDocument,
    OverviewDocument,
    TimeSpecificObservation,
)

IDEOGRAPHIC_SPACE = "\u3000"
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class TableField(StrEnum):
    WEATHER = "weather"
    TEMPERATURE = "temperature"


_TABLE_HEADERS = {
    TableField.WEATHER: (
        "| Time            | Area         | Weather         |\n"
        "| --------------- | ------------ | --------------- |"
    ),
    TableField.TEMPERATURE: (
        "| Time            | Area         | Temperature (℃) |\n"
        "| --------------- | ------------ | ---------------- |"
    ),
}
_VALUE_WIDTH = {TableField.WEATHER: 15, TableField.TEMPERATURE: 16}

# (label, attribute, normalize) in display order
_SUMMARY_ATTRIBUTES = (
    ("Weather Codes", "weather_codes", False),
    ("Weathers", "weathers", True),
    ("Winds", "winds", True),
    ("Waves", "waves", True),
    ("Pops", "pops", False),
    ("Temps", "temps", False),
)


def normalize_spaces(text: str) -> str:
    """Replace full-width (U+3000) spaces with ordinary spaces."""
    return text.replace(IDEOGRAPHIC_SPACE, " ")


def format_time(dt: datetime) -> str:
    """Format as ``MM/DD HH:MM Dow`` independent of the process locale."""
    return f"{dt:%m/%d %H:%M} {WEEKDAYS[dt.weekday()]}"


def parse_time_define(value: str) -> datetime:
    try:
        dt = datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise TimestampParseError(f"invalid timeDefines entry {value!r}: {e}") from e
    if dt.tzinfo is None:
        raise TimestampParseError(f"timeDefines entry {value!r} has no UTC offset")
    return dt


def extract_time_specific_observations(
    doc: ForecastDocument,
) -> list[TimeSpecificObservation]:
    """Flatten a document into one record per (block, area).

    Every area in a block is labelled with the block's first timeDefines
    entry, not the per-slot instant. A malformed first entry in any block
    fails the whole extraction.
    """
    observations: list[TimeSpecificObservation] = []
    for index, block in enumerate(doc.time_series):
        if not block.time_defines:
            raise TimestampParseError(f"timeSeries[{index}] has no timeDefines")
        time = parse_time_define(block.time_defines[0])
        for area in block.areas:
            observations.append(
                TimeSpecificObservation(
                    time=time,
                    area_name=area.area.name,
                    weathers=area.weathers,
                    temps=area.temps,
                )
            )
    return observations


def render_table(
    observations: Iterable[TimeSpecificObservation], field: TableField | str
) -> str:
    """Render a fixed-width three-column table for weather or temperature.

    Returns an empty string (no header) when no observation carries a value
    for the selected field.
    """
    field = TableField(field)
    width = _VALUE_WIDTH[field]
    rows = []
    for obs in observations:
        if field == TableField.WEATHER:
            values = [normalize_spaces(v) for v in obs.weathers]
        else:
            values = list(obs.temps)
        if not values:
            continue
        rows.append(
            f"| {format_time(obs.time):<15.15} | {obs.area_name:<12} "
            f"| {' / '.join(values):<{width}} |"
        )
    if not rows:
        return ""
    return "\n".join([_TABLE_HEADERS[field], *rows])


def render_report(doc: ForecastDocument) -> str:
    """Weather table followed by temperature table, as printed on the console."""
    observations = extract_time_specific_observations(doc)
    return "\n".join([
        "Time-specific Weather:",
        render_table(observations, TableField.WEATHER),
        "",
        "Time-specific Temperature:",
        render_table(observations, TableField.TEMPERATURE),
    ])


def render_summary(doc: ForecastDocument) -> str:
    """Full diagnostic dump of a document, skipping empty attribute lists."""
    lines = [
        f"Publishing Office: {doc.publishing_office}",
        f"Report Datetime: {doc.report_datetime}",
        "Time Series:",
    ]
    for i, block in enumerate(doc.time_series):
        lines.append(f"  [{i}] Time Defines:")
        lines.extend(f"    {t}" for t in block.time_defines)
        lines.append(f"  [{i}] Areas:")
        for area in block.areas:
            lines.extend(_summary_area_lines(area))
    return "\n".join(lines)


def _summary_area_lines(area: AreaObservation) -> list[str]:
    lines = [f"    Area: {area.area.name} ({area.area.code})"]
    for label, attr, normalize in _SUMMARY_ATTRIBUTES:
        values: Sequence[str] = getattr(area, attr)
        if not values:
            continue
        if normalize:
            values = [normalize_spaces(v) for v in values]
        lines.append(f"    {label}: {json.dumps(list(values), ensure_ascii=False)}")
    return lines


def render_overview(overview: OverviewDocument) -> str:
    """Headline of an overview document, or its body text on quiet days.

    Overview notifications carry the headline rather than the full ``text``;
    ``text`` is used only when JMA leaves the headline empty.
    """
    return normalize_spaces(overview.headline_text or overview.text)
