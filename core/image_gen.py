# =============================================================================
# core/image_gen.py  —  Replicate image generation + local display
# =============================================================================
#
# generate_image():
#   1. Reads REPLICATE_API_TOKEN (at call time, not at import)
#   2. Builds {version, input} with the PredictionInput defaults
#   3. POSTs to /v1/predictions with "Prefer: wait" so Replicate holds the
#      connection open until the prediction finishes
#   4. Returns the first output URL
#
# display_image():
#   Opens a URL in the platform's default viewer.  Pure side effect.
# =============================================================================

import logging
import webbrowser
from typing import Callable, Optional

from core.config import REPLICATE_TOKEN_ENV, get_replicate_token
from core.exceptions import MissingCredentialError, UpstreamLogicalError
from core.http import HttpClient
from core.models import Prediction, PredictionInput

logger = logging.getLogger(__name__)


class ImageGenerator:
    """Synchronous Replicate prediction client."""

    def __init__(
        self,
        http: HttpClient,
        base_url: str,
        model_version: str,
        token_provider: Callable[[], Optional[str]] = get_replicate_token,
    ):
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._model_version = model_version
        self._token_provider = token_provider

    @property
    def predictions_url(self) -> str:
        return f"{self._base_url}/v1/predictions"

    def build_payload(self, prompt: str, **overrides) -> dict:
        """Merge the prompt and any overrides into the default input block."""
        prediction_input = PredictionInput(prompt=prompt, **overrides)
        return {"version": self._model_version, "input": prediction_input.to_json()}

    def generate_image(self, prompt: str, **overrides) -> str:
        """Run a prediction and return the first generated image URL.

        Args:
            prompt: Text prompt for the model.
            **overrides: Any PredictionInput field except `prompt`.

        Raises:
            MissingCredentialError: No token configured; nothing is sent.
            UpstreamLogicalError: Replicate refused the request or produced
                no usable output.
        """
        token = self._token_provider()
        if not token:
            raise MissingCredentialError(f"{REPLICATE_TOKEN_ENV} environment variable is not set")

        payload = self.build_payload(prompt, **overrides)
        headers = {"Authorization": f"Bearer {token}", "Prefer": "wait"}
        result = self._http.post_json(self.predictions_url, payload, headers=headers)

        if not result.ok:
            logger.error("Error generating image with Replicate: %s", result.describe())
            raise UpstreamLogicalError(result.message or "Failed to create prediction")

        prediction = Prediction.from_json(result.data)
        if prediction.error:
            logger.error("Replicate prediction %s failed: %s", prediction.id, prediction.error)
            raise UpstreamLogicalError(prediction.error)
        if not prediction.output:
            raise UpstreamLogicalError("No output generated or invalid output format")

        logger.info("Replicate prediction %s finished", prediction.id)
        return prediction.output[0]


def display_image(image_url: str, opener: Callable[[str], bool] = webbrowser.open) -> str:
    """Open `image_url` in the default viewer and confirm."""
    opener(image_url)
    logger.info("Image displayed at %s", image_url)
    return f"Image displayed at {image_url}"
