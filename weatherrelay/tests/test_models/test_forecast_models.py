"""Tests for forecast document models."""

import pytest
from pydantic import ValidationError

from weatherrelay.models.forecast import (
    AreaDetail,
    AreaObservation,
    ForecastDocument,
    OverviewDocument,
    TimeSeriesBlock,
)

OPTIONAL_LISTS = ("weather_codes", "weathers", "winds", "waves", "pops", "temps")
WIRE_NAMES = {
    "weather_codes": "weatherCodes",
    "weathers": "weathers",
    "winds": "winds",
    "waves": "waves",
    "pops": "pops",
    "temps": "temps",
}


class TestAreaObservation:
    def test_all_optional_lists_default_empty(self):
        obs = AreaObservation.model_validate({"area": {"name": "Tokyo", "code": "130010"}})
        for attr in OPTIONAL_LISTS:
            assert getattr(obs, attr) == ()

    @pytest.mark.parametrize("present", OPTIONAL_LISTS)
    def test_present_list_preserved_others_empty(self, present: str):
        values = ["a　b", "c"]
        obs = AreaObservation.model_validate({
            "area": {"name": "Tokyo", "code": "130010"},
            WIRE_NAMES[present]: values,
        })
        assert getattr(obs, present) == tuple(values)
        for attr in OPTIONAL_LISTS:
            if attr != present:
                assert getattr(obs, attr) == ()

    def test_null_list_is_empty(self):
        obs = AreaObservation.model_validate({
            "area": {"name": "Tokyo", "code": "130010"},
            "winds": None,
        })
        assert obs.winds == ()

    def test_snake_case_names_accepted(self):
        obs = AreaObservation(
            area=AreaDetail(name="Tokyo", code="130010"),
            weather_codes=["100"],
        )
        assert obs.weather_codes == ("100",)

    def test_missing_area_code_rejected(self):
        with pytest.raises(ValidationError):
            AreaObservation.model_validate({"area": {"name": "Tokyo"}})

    def test_frozen(self):
        detail = AreaDetail(name="Tokyo", code="130010")
        with pytest.raises(ValidationError):
            detail.name = "Osaka"


class TestTimeSeriesBlock:
    def test_time_defines_alias(self):
        block = TimeSeriesBlock.model_validate({
            "timeDefines": ["2024-01-01T06:00:00+09:00"],
            "areas": [],
        })
        assert block.time_defines == ("2024-01-01T06:00:00+09:00",)

    def test_time_defines_required(self):
        with pytest.raises(ValidationError):
            TimeSeriesBlock.model_validate({"areas": []})


class TestForecastDocument:
    def test_unknown_fields_ignored(self):
        doc = ForecastDocument.model_validate({
            "publishingOffice": "気象庁",
            "reportDatetime": "2024-01-01T05:00:00+09:00",
            "timeSeries": [],
            "tempAverage": {"areas": []},
        })
        assert doc.publishing_office == "気象庁"
        assert doc.time_series == ()

    def test_dump_uses_wire_names(self, basic_document: ForecastDocument):
        data = basic_document.model_dump(by_alias=True)
        assert "publishingOffice" in data
        assert "timeDefines" in data["timeSeries"][0]
        assert data["timeSeries"][0]["areas"][0]["weatherCodes"] == ()


class TestOverviewDocument:
    def test_headline_defaults_empty(self):
        doc = OverviewDocument.model_validate({
            "publishingOffice": "気象庁",
            "reportDatetime": "2024-01-01T04:37:00+09:00",
            "targetArea": "東京都",
            "text": "晴れ",
        })
        assert doc.headline_text == ""
        assert doc.target_area == "東京都"
