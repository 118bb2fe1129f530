"""Plain-text rendering of weather records.

Every function here is pure: same record in, same text out. Each declared
line is always emitted; a missing field is replaced by a placeholder rather
than dropped.
"""

from core.models import Alert, ForecastPeriod

SEPARATOR = "---"
UNKNOWN = "Unknown"


def _or(value, placeholder: str = UNKNOWN) -> str:
    if value is None or value == "":
        return placeholder
    return str(value)


def format_alert(alert: Alert) -> str:
    """Render one alert as Event/Area/Severity/Status/Headline lines."""
    return "\n".join(
        [
            f"Event: {_or(alert.event)}",
            f"Area: {_or(alert.area_desc)}",
            f"Severity: {_or(alert.severity)}",
            f"Status: {_or(alert.status)}",
            f"Headline: {_or(alert.headline, 'No headline')}",
            SEPARATOR,
        ]
    )


def format_period(period: ForecastPeriod) -> str:
    """Render one forecast period as name/temperature/wind/summary lines."""
    return "\n".join(
        [
            f"{_or(period.name)}:",
            f"Temperature: {_or(period.temperature)}°{_or(period.temperature_unit, 'F')}",
            f"Wind: {_or(period.wind_speed)} {_or(period.wind_direction, '')}",
            _or(period.short_forecast, "No forecast available"),
            SEPARATOR,
        ]
    )


def format_alerts_report(state_code: str, alerts: list[Alert]) -> str:
    body = "\n".join(format_alert(alert) for alert in alerts)
    return f"Active alerts for {state_code}:\n\n{body}"


def format_forecast_report(latitude: float, longitude: float, periods: list[ForecastPeriod]) -> str:
    body = "\n".join(format_period(period) for period in periods)
    return f"Forecast for {format_number(latitude)}, {format_number(longitude)}:\n\n{body}"


def format_number(value: float) -> str:
    """Render a number the way a person would type it (2.0 -> "2")."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
