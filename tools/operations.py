# =============================================================================
# tools/operations.py  —  The operation catalogue
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares every tool the server exposes: its name, the description the
#   host's model reads, a pydantic input model (the argument schema), and a
#   handler that calls into core/.
#
# TOOLS:
#   get-alerts               Active NWS alerts for a US state
#   get-forecast             NWS forecast for a latitude/longitude
#   generate-image           Replicate SDXL image, returns its URL
#   display_generated_image  Open an image URL in the default viewer
#   add                      Sum two numbers
#
# Input models are strict: "45" is not a latitude and true is not a number.
# Range and length limits live on the Field() declarations, so a bad
# latitude is rejected before any request is made.
# =============================================================================

import webbrowser
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.formatting import format_number
from core.image_gen import ImageGenerator, display_image
from core.weather import WeatherService
from tools.registry import Operation, ToolRegistry


class ToolInput(BaseModel):
    model_config = ConfigDict(strict=True)


class AlertsInput(ToolInput):
    state: str = Field(
        min_length=2,
        max_length=2,
        description="Two-letter state code (e.g. CA, NY)",
    )


class ForecastInput(ToolInput):
    latitude: float = Field(ge=-90, le=90, description="Latitude of the location")
    longitude: float = Field(ge=-180, le=180, description="Longitude of the location")


class GenerateImageInput(ToolInput):
    prompt: str = Field(description="Prompt for the image generation")
    width: Optional[int] = Field(default=None, ge=64, le=2048, description="Output width in pixels (default 768)")
    height: Optional[int] = Field(default=None, ge=64, le=2048, description="Output height in pixels (default 768)")
    negative_prompt: Optional[str] = Field(default=None, description="Things the image should not contain")
    num_inference_steps: Optional[int] = Field(
        default=None, ge=1, le=500, description="Number of denoising steps (default 25)"
    )
    guidance_scale: Optional[float] = Field(
        default=None, ge=1, le=50, description="Classifier-free guidance scale (default 7.5)"
    )


class DisplayImageInput(ToolInput):
    model_config = ConfigDict(strict=True, populate_by_name=True)

    image_url: str = Field(alias="imageUrl", min_length=1, description="The URL of the generated image")


class AddInput(ToolInput):
    a: float = Field(description="First number")
    b: float = Field(description="Second number")


def add_numbers(params: AddInput) -> str:
    total = params.a + params.b
    return f"The sum of {format_number(params.a)} and {format_number(params.b)} is {format_number(total)}"


def build_registry(
    weather: WeatherService,
    images: ImageGenerator,
    opener: Callable[[str], bool] = webbrowser.open,
) -> ToolRegistry:
    """Create, populate and freeze the registry for one server process.

    Args:
        weather: NWS client used by get-alerts / get-forecast.
        images: Replicate client used by generate-image.
        opener: Callable that shows a URL (webbrowser.open in production).

    Returns:
        A frozen ToolRegistry.
    """

    def get_alerts(params: AlertsInput) -> str:
        return weather.get_alerts(params.state)

    def get_forecast(params: ForecastInput) -> str:
        return weather.get_forecast(params.latitude, params.longitude)

    def generate_image(params: GenerateImageInput) -> str:
        overrides = params.model_dump(exclude_none=True, exclude={"prompt"})
        image_url = images.generate_image(params.prompt, **overrides)
        return f"Generated image URL: {image_url}"

    def display_generated_image(params: DisplayImageInput) -> str:
        return display_image(params.image_url, opener=opener)

    registry = ToolRegistry()
    registry.register(Operation("get-alerts", "Get weather alerts for a state", AlertsInput, get_alerts))
    registry.register(Operation("get-forecast", "Get weather forecast for a location", ForecastInput, get_forecast))
    registry.register(
        Operation("generate-image", "Generate an image using Replicate", GenerateImageInput, generate_image)
    )
    registry.register(
        Operation(
            "display_generated_image",
            "This function will display the generated image in a new tab",
            DisplayImageInput,
            display_generated_image,
        )
    )
    registry.register(Operation("add", "Add two numbers", AddInput, add_numbers))
    return registry.freeze()
