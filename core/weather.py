# =============================================================================
# core/weather.py  —  National Weather Service flows
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Talks to the NWS REST API (https://api.weather.gov, free, no key) and
#   turns its GeoJSON into the plain text the tools return.
#
# TWO FLOWS:
#   get_alerts(state)        GET /alerts?area={STATE}
#   get_forecast(lat, lon)   GET /points/{lat},{lon}   → forecast URL
#                            GET {forecast URL}        → periods
#
# FAILURES:
#   A fetch that yields no JSON raises UpstreamUnavailableError whose message
#   is the exact text the host should see.  "Nothing to report" (no alerts,
#   no periods) is NOT a failure: it returns a normal sentence.
#
#   The NWS only covers the United States.  Coordinates elsewhere make the
#   /points call fail, which is why that message mentions US coverage.
# =============================================================================

import logging

from core.exceptions import UpstreamUnavailableError
from core.formatting import format_alerts_report, format_forecast_report, format_number
from core.http import HttpClient
from core.models import Alert, ForecastPeriod

logger = logging.getLogger(__name__)


class WeatherService:
    """NWS alerts and forecasts rendered as text."""

    def __init__(self, http: HttpClient, base_url: str):
        self._http = http
        self._base_url = base_url.rstrip("/")

    def alerts_url(self, state_code: str) -> str:
        return f"{self._base_url}/alerts?area={state_code}"

    def points_url(self, latitude: float, longitude: float) -> str:
        return f"{self._base_url}/points/{latitude:.4f},{longitude:.4f}"

    def get_alerts(self, state: str) -> str:
        """Return the active alerts for a two-letter state code.

        Raises:
            UpstreamUnavailableError: If the alerts feed cannot be fetched.
        """
        state_code = state.upper()
        result = self._http.get_json(self.alerts_url(state_code))
        if not result.ok:
            raise UpstreamUnavailableError("Failed to retrieve alerts data")

        features = (result.data.get("features") or []) if isinstance(result.data, dict) else None
        if not isinstance(features, list):
            raise UpstreamUnavailableError("Failed to retrieve alerts data")

        features = [feature for feature in features if isinstance(feature, dict)]
        if not features:
            return f"No active alerts for {state_code}"

        alerts = [Alert.from_json(feature) for feature in features]
        logger.info("Found %d active alerts for %s", len(alerts), state_code)
        return format_alerts_report(state_code, alerts)

    def get_forecast(self, latitude: float, longitude: float) -> str:
        """Return the forecast periods for a US location.

        Two sequential requests: the /points lookup resolves the grid
        forecast URL, which is then fetched.

        Raises:
            UpstreamUnavailableError: With a message naming the step that failed.
        """
        points = self._http.get_json(self.points_url(latitude, longitude))
        if not points.ok:
            raise UpstreamUnavailableError(
                "Failed to retrieve grid point data for coordinates: "
                f"{format_number(latitude)}, {format_number(longitude)}. "
                "This location may not be supported by the NWS API "
                "(only US locations are supported)."
            )

        forecast_url = _nested(points.data, "properties", "forecast")
        if not forecast_url or not isinstance(forecast_url, str):
            raise UpstreamUnavailableError("Failed to get forecast URL from grid point data")

        forecast = self._http.get_json(forecast_url)
        if not forecast.ok:
            raise UpstreamUnavailableError("Failed to retrieve forecast data")

        raw_periods = _nested(forecast.data, "properties", "periods") or []
        if not isinstance(raw_periods, list) or not raw_periods:
            return "No forecast periods available"

        periods = [ForecastPeriod.from_json(period) for period in raw_periods]
        logger.info("Got %d forecast periods for %s, %s", len(periods), latitude, longitude)
        return format_forecast_report(latitude, longitude, periods)


def _nested(data, *keys):
    """Walk dict keys, returning None as soon as something is missing."""
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data
