"""Tests for plain-text formatting of weather records."""

from __future__ import annotations

from core.formatting import (
    format_alert,
    format_alerts_report,
    format_forecast_report,
    format_number,
    format_period,
)
from core.models import Alert, ForecastPeriod


def _full_alert() -> Alert:
    return Alert.from_json(
        {
            "properties": {
                "event": "Flood Warning",
                "areaDesc": "Sacramento County",
                "severity": "Severe",
                "status": "Actual",
                "headline": "Flood Warning issued",
            }
        }
    )


class TestFormatAlert:
    def test_field_order(self):
        text = format_alert(_full_alert())
        assert text.split("\n") == [
            "Event: Flood Warning",
            "Area: Sacramento County",
            "Severity: Severe",
            "Status: Actual",
            "Headline: Flood Warning issued",
            "---",
        ]

    def test_missing_severity_renders_unknown(self):
        alert = Alert.from_json({"properties": {"event": "Heat Advisory"}})
        text = format_alert(alert)
        assert "Severity: Unknown" in text
        assert "Headline: No headline" in text
        assert len(text.split("\n")) == 6

    def test_feature_without_properties(self):
        text = format_alert(Alert.from_json({}))
        assert text.startswith("Event: Unknown\nArea: Unknown")

    def test_idempotent(self):
        alert = _full_alert()
        assert format_alert(alert) == format_alert(alert)


class TestFormatPeriod:
    def test_full_period(self):
        period = ForecastPeriod.from_json(
            {
                "name": "Tonight",
                "temperature": 54,
                "temperatureUnit": "F",
                "windSpeed": "5 mph",
                "windDirection": "NW",
                "shortForecast": "Clear",
            }
        )
        assert format_period(period) == "Tonight:\nTemperature: 54°F\nWind: 5 mph NW\nClear\n---"

    def test_missing_fields_use_placeholders(self):
        text = format_period(ForecastPeriod.from_json({}))
        assert text.split("\n") == [
            "Unknown:",
            "Temperature: Unknown°F",
            "Wind: Unknown ",
            "No forecast available",
            "---",
        ]

    def test_zero_temperature_is_kept(self):
        text = format_period(ForecastPeriod(name="Night", temperature=0, temperature_unit="C"))
        assert "Temperature: 0°C" in text


class TestReports:
    def test_alerts_report_header(self):
        text = format_alerts_report("CA", [_full_alert(), _full_alert()])
        assert text.startswith("Active alerts for CA:\n\nEvent: Flood Warning")
        assert text.count("---") == 2

    def test_forecast_report_header(self):
        text = format_forecast_report(38.5, -121.0, [ForecastPeriod(name="Today")])
        assert text.startswith("Forecast for 38.5, -121:\n\nToday:")


class TestFormatNumber:
    def test_integral_float(self):
        assert format_number(5.0) == "5"

    def test_fraction(self):
        assert format_number(0.1 + 0.2) == "0.30000000000000004"

    def test_int(self):
        assert format_number(-3) == "-3"
