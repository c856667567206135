"""
Gemini Mood Classifier
======================

Sends a webcam frame to a Gemini vision model and reads back a single-word
mood label.
"""

import os
import base64
import binascii
import logging
from typing import Any, Optional

import google.generativeai as genai

from .config import (
    GEMINI_API_KEY,
    GEMINI_MODEL,
    IMAGE_MIME_TYPE,
    HTTP_TIMEOUT_SECONDS,
    SUPPORTED_MOODS,
)
from .errors import ClassificationFailure, InvalidInput
from .utils import strip_data_uri

logger = logging.getLogger(__name__)

MOOD_PROMPT = (
    "Analyze the mood/emotion of the person in this image. "
    "Respond with ONLY a single word emotion from this list: "
    f"{', '.join(SUPPORTED_MOODS)}. "
    "Choose the most accurate emotion based on facial expression, "
    "body language, and overall appearance."
)


class MoodClassifier:
    """
    Wrapper around a Gemini GenerativeModel for mood classification.

    Attributes:
        model_name: Gemini model identifier
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: str = GEMINI_MODEL,
        model: Any = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ):
        """
        Initialize the classifier.

        Args:
            api_key: Gemini API key (read from the environment if None)
            model_name: Model to use when building the model lazily
            model: Pre-built model object exposing generate_content
            timeout: Request timeout in seconds
        """
        self.api_key = api_key or os.environ.get("GEMINI_API_KEY") or GEMINI_API_KEY
        self.model_name = model_name
        self.timeout = timeout
        self._model = model

    @property
    def model(self):
        """Gemini model, configured on first use."""
        if self._model is None:
            if not self.api_key:
                raise ClassificationFailure(
                    "Failed to analyze mood", details="GEMINI_API_KEY is not configured"
                )
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(self.model_name)
        return self._model

    def classify(self, image_payload: str) -> str:
        """
        Classify the mood shown in an image.

        Args:
            image_payload: Base64 JPEG, optionally as a data URI

        Returns:
            Model answer, trimmed and lowercased. Not checked against the
            mood vocabulary.

        Raises:
            InvalidInput: If the payload is empty or not base64
            ClassificationFailure: If the model call fails
        """
        image_bytes = decode_image_payload(image_payload)

        try:
            response = self.model.generate_content(
                [MOOD_PROMPT, {"mime_type": IMAGE_MIME_TYPE, "data": image_bytes}],
                request_options={"timeout": self.timeout},
            )
            text = response.text
        except ClassificationFailure:
            raise
        except Exception as e:
            logger.error("Error analyzing mood: %s", e)
            raise ClassificationFailure("Failed to analyze mood", details=str(e)) from e

        mood = (text or "").strip().lower()
        if not mood:
            raise ClassificationFailure(
                "Failed to analyze mood", details="Model returned an empty response"
            )

        logger.info("🎭 Detected mood: %s", mood)
        return mood


def decode_image_payload(image_payload: str) -> bytes:
    """
    Decode a data URI or raw base64 string into image bytes.

    Raises:
        InvalidInput: If nothing is left after stripping or it is not base64
    """
    if not image_payload:
        raise InvalidInput("No image provided")

    # MIME-style line wrapping is accepted
    raw = "".join(strip_data_uri(image_payload.strip()).split())
    try:
        image_bytes = base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInput("Image is not valid base64", details=str(e)) from e

    if not image_bytes:
        raise InvalidInput("No image provided")
    return image_bytes
