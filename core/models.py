# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# Provider JSON is untyped.  These dataclasses give each record we actually
# consume a fixed shape, with every field optional: the National Weather
# Service and Replicate both omit fields freely, and the formatter decides
# what a missing value looks like.
#
# The from_json() constructors never raise on missing keys.  They only pick
# the fields the tools care about and ignore the rest.
# =============================================================================

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


def _properties(record: Any) -> dict:
    """Return record["properties"] when it is a dict, else an empty dict."""
    if not isinstance(record, dict):
        return {}
    props = record.get("properties")
    return props if isinstance(props, dict) else {}


# -----------------------------------------------------------------------------
# Alert — one feature from GET /alerts?area={STATE}
# -----------------------------------------------------------------------------
@dataclass
class Alert:
    """An active weather alert."""

    event: Optional[str] = None
    area_desc: Optional[str] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    headline: Optional[str] = None

    @classmethod
    def from_json(cls, feature: Any) -> "Alert":
        props = _properties(feature)
        return cls(
            event=props.get("event"),
            area_desc=props.get("areaDesc"),
            severity=props.get("severity"),
            status=props.get("status"),
            headline=props.get("headline"),
        )


# -----------------------------------------------------------------------------
# ForecastPeriod — one entry of properties.periods from a gridpoint forecast
# -----------------------------------------------------------------------------
@dataclass
class ForecastPeriod:
    """A named forecast period ("Tonight", "Saturday", ...)."""

    name: Optional[str] = None
    temperature: Optional[float] = None
    temperature_unit: Optional[str] = None
    wind_speed: Optional[str] = None
    wind_direction: Optional[str] = None
    short_forecast: Optional[str] = None

    @classmethod
    def from_json(cls, period: Any) -> "ForecastPeriod":
        if not isinstance(period, dict):
            return cls()
        return cls(
            name=period.get("name"),
            temperature=period.get("temperature"),
            temperature_unit=period.get("temperatureUnit"),
            wind_speed=period.get("windSpeed"),
            wind_direction=period.get("windDirection"),
            short_forecast=period.get("shortForecast"),
        )


# -----------------------------------------------------------------------------
# PredictionInput — the 13 generation parameters sent to Replicate
# -----------------------------------------------------------------------------
# Defaults match the SDXL model version the server is pinned to.  Only the
# prompt is mandatory; callers may override any other field.
# -----------------------------------------------------------------------------
@dataclass
class PredictionInput:
    """Input block of a Replicate prediction request."""

    prompt: str
    width: int = 768
    height: int = 768
    refine: str = "expert_ensemble_refiner"
    scheduler: str = "K_EULER"
    lora_scale: float = 0.6
    num_outputs: int = 1
    guidance_scale: float = 7.5
    apply_watermark: bool = False
    high_noise_frac: float = 0.8
    negative_prompt: str = ""
    prompt_strength: float = 0.8
    num_inference_steps: int = 25

    def to_json(self) -> dict:
        return asdict(self)


@dataclass
class Prediction:
    """The subset of a Replicate prediction response we read."""

    id: Optional[str] = None
    output: list = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def from_json(cls, data: Any) -> "Prediction":
        if not isinstance(data, dict):
            return cls()
        output = data.get("output")
        if not isinstance(output, list):
            output = []
        return cls(id=data.get("id"), output=output, error=data.get("error") or None)
