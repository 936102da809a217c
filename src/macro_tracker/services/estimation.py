"""Nutrition estimation from food photos and descriptions using LLMs."""

import base64
import binascii
import json
import logging
import re
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from macro_tracker.domain.errors import EstimationError, InvalidInputError
from macro_tracker.domain.estimates import NutritionEstimate

_logger = logging.getLogger(__name__)

FOOD_SYSTEM_PROMPT = """You are a nutritionist AI. Analyze the food image and \
description provided and return ONLY a JSON object with nutritional estimates \
per serving. Format:
{
  "name": "food name",
  "calories": number,
  "protein": number,
  "carbs": number,
  "fat": number,
  "servingSize": number (in grams)
}"""

LABEL_SYSTEM_PROMPT = """You are a nutrition label analyzer. Extract nutritional \
information from the nutrition label image and return ONLY a JSON object with \
the following format:
{
  "name": "product name",
  "servingSize": number (in grams),
  "calories": number,
  "protein": number (in grams),
  "carbs": number (in grams - total carbohydrates),
  "fat": number (in grams - total fat)
}

Extract the values PER SERVING as shown on the label."""

LABEL_USER_PROMPT = (
    "Please analyze this nutrition label and extract the nutritional information."
)

_FENCE_START = re.compile(r"^```(?:json)?\s*", flags=re.IGNORECASE)
_FENCE_END = re.compile(r"\s*```$")


class EstimationClient(Protocol):
    """Interface for chat-completion calls to a multimodal model."""

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, object]],
        max_tokens: int,
    ) -> str:
        """Return the text content of the model's reply."""


@dataclass
class EstimationService:
    """Service that prepares nutrition prompts and validates replies."""

    client: EstimationClient
    model: str
    max_tokens: int = 500

    async def estimate_food(
        self, image_base64: str | None, description: str | None
    ) -> NutritionEstimate:
        """Estimate per-serving nutrition from a photo and/or a description."""
        text = (description or "").strip()
        image = (image_base64 or "").strip()
        if not text and not image:
            raise InvalidInputError(
                "description", "Either image or description required"
            )
        prompt = f"Analyze this food: {text}" if text else "Analyze this food."
        if image:
            content: object = [
                {"type": "text", "text": prompt},
                {"type": "image_url", "image_url": {"url": _to_data_url(image)}},
            ]
        else:
            content = prompt
        messages: list[dict[str, object]] = [
            {"role": "system", "content": FOOD_SYSTEM_PROMPT},
            {"role": "user", "content": content},
        ]
        return await self._run(messages)

    async def analyze_label(self, image_base64: str | None) -> NutritionEstimate:
        """Read per-serving nutrition from a photographed nutrition label."""
        image = (image_base64 or "").strip()
        if not image:
            raise InvalidInputError("imageBase64", "Image required")
        messages: list[dict[str, object]] = [
            {"role": "system", "content": LABEL_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": LABEL_USER_PROMPT},
                    {"type": "image_url", "image_url": {"url": _to_data_url(image)}},
                ],
            },
        ]
        return await self._run(messages)

    async def _run(self, messages: list[dict[str, object]]) -> NutritionEstimate:
        try:
            reply = await self.client.complete(
                model=self.model,
                messages=messages,
                max_tokens=self.max_tokens,
            )
        except Exception as exc:
            raise EstimationError(f"{type(exc).__name__}: {exc}") from exc
        return parse_estimate(reply)


def parse_estimate(reply: str | None) -> NutritionEstimate:
    """Parse a model reply into a validated estimate.

    Raises EstimationError when the reply is not a JSON object or lacks a
    usable name or calorie value.
    """
    cleaned = strip_code_fences(reply or "")
    if not cleaned:
        raise EstimationError("Model returned an empty response")
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        _logger.warning("Model reply is not valid JSON", extra={"reply": cleaned})
        raise EstimationError("Model reply is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise EstimationError("Model reply is not a JSON object")
    missing = [key for key in ("name", "calories") if payload.get(key) is None]
    if missing:
        _logger.warning(
            "Model reply is missing required fields", extra={"missing": missing}
        )
        raise EstimationError(f"Model reply is missing {', '.join(missing)}")
    try:
        return NutritionEstimate.model_validate(payload)
    except ValidationError as exc:
        raise EstimationError(f"Model reply failed validation: {exc}") from exc


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence from model output."""
    cleaned = text.strip()
    cleaned = _FENCE_START.sub("", cleaned)
    cleaned = _FENCE_END.sub("", cleaned)
    return cleaned.strip()


def _to_data_url(image_base64: str) -> str:
    """Convert a base64 payload (or data URL) to an image data URL."""
    if image_base64.startswith("data:"):
        return image_base64
    try:
        image_bytes = base64.b64decode(image_base64, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidInputError("imageBase64", "Image must be base64 encoded") from None
    mime_type = _detect_mime_type(image_bytes)
    return f"data:{mime_type};base64,{image_base64}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
