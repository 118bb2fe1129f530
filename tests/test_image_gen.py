"""Tests for Replicate image generation and image display."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from core.exceptions import MissingCredentialError, UpstreamLogicalError
from core.image_gen import display_image
from conftest import MODEL_VERSION, make_response

IMAGE_URL = "https://replicate.delivery/out-0.png"


class TestBuildPayload:
    def test_defaults(self, images):
        payload = images.build_payload("a red fox")

        assert payload["version"] == MODEL_VERSION
        assert payload["input"] == {
            "prompt": "a red fox",
            "width": 768,
            "height": 768,
            "refine": "expert_ensemble_refiner",
            "scheduler": "K_EULER",
            "lora_scale": 0.6,
            "num_outputs": 1,
            "guidance_scale": 7.5,
            "apply_watermark": False,
            "high_noise_frac": 0.8,
            "negative_prompt": "",
            "prompt_strength": 0.8,
            "num_inference_steps": 25,
        }

    def test_overrides(self, images):
        payload = images.build_payload("a red fox", width=1024, negative_prompt="blurry")
        assert payload["input"]["width"] == 1024
        assert payload["input"]["height"] == 768
        assert payload["input"]["negative_prompt"] == "blurry"


class TestGenerateImage:
    def test_returns_first_output(self, images, session):
        session.request.return_value = make_response(
            status_code=201, json_data={"id": "p1", "output": [IMAGE_URL, "https://other"]}
        )

        assert images.generate_image("a red fox") == IMAGE_URL

        args, kwargs = session.request.call_args
        assert args == ("POST", "https://replicate.test/v1/predictions")
        assert kwargs["headers"]["Authorization"] == "Bearer r8_test_token"
        assert kwargs["headers"]["Prefer"] == "wait"
        assert kwargs["json"]["input"]["prompt"] == "a red fox"

    def test_missing_token_makes_no_request(self, images, session, token):
        token["value"] = None

        with pytest.raises(MissingCredentialError, match="REPLICATE_API_TOKEN environment variable is not set"):
            images.generate_image("a red fox")

        session.request.assert_not_called()

    def test_provider_error_field(self, images, session):
        session.request.return_value = make_response(json_data={"id": "p1", "error": "NSFW content detected"})

        with pytest.raises(UpstreamLogicalError, match="NSFW content detected"):
            images.generate_image("a red fox")

    def test_http_error_uses_provider_message(self, images, session):
        session.request.return_value = make_response(status_code=401, json_data={"detail": "Invalid token."})

        with pytest.raises(UpstreamLogicalError, match="Invalid token."):
            images.generate_image("a red fox")

    def test_http_error_without_message(self, images, session):
        session.request.return_value = make_response(status_code=500, invalid_json=True)

        with pytest.raises(UpstreamLogicalError, match="Failed to create prediction"):
            images.generate_image("a red fox")

    @pytest.mark.parametrize("body", [{"id": "p1"}, {"id": "p1", "output": []}, {"id": "p1", "output": "x"}])
    def test_missing_output(self, images, session, body):
        session.request.return_value = make_response(json_data=body)

        with pytest.raises(UpstreamLogicalError, match="No output generated"):
            images.generate_image("a red fox")


class TestDisplayImage:
    def test_opens_url_and_confirms(self):
        opener = Mock(return_value=True)

        text = display_image(IMAGE_URL, opener=opener)

        opener.assert_called_once_with(IMAGE_URL)
        assert text == f"Image displayed at {IMAGE_URL}"
