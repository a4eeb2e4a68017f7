"""Gemini client (text, structured JSON and image editing) on the async SDK surface."""

import json
import logging
from typing import Any

from google import genai
from google.genai import types

from ..models.image import UploadedImage

logger = logging.getLogger(__name__)


class GeminiError(Exception):
    """Base class for Gemini call failures."""

    pass


class UpstreamTransportError(GeminiError):
    """The request failed at the network/API layer."""

    pass


class MalformedResponseError(GeminiError):
    """The response body failed JSON or schema validation."""

    def __init__(self, message: str, raw_output: str = ""):
        self.raw_output = raw_output
        super().__init__(message)


class GeminiClient:
    """Client for Gemini text and image generation.

    One instance is built by the caller and passed to every service; nothing
    here keeps module-level state.
    """

    def __init__(
        self,
        api_key: str | None,
        text_model: str = "gemini-2.5-flash",
        image_model: str = "gemini-2.5-flash-image-preview",
    ):
        if not api_key:
            raise ValueError("GEMINI_API_KEY must be set")
        self.client = genai.Client(api_key=api_key)
        self.text_model = text_model
        self.image_model = image_model

    async def generate_text(
        self,
        prompt: str,
        temperature: float | None = None,
        thinking_budget: int | None = None,
    ) -> str:
        """
        Plain text generation.

        Args:
            prompt: Instruction text.
            temperature: Optional sampling temperature.
            thinking_budget: Optional thinking budget (0 disables deliberation).

        Returns:
            Response text ("" when the model returned no text).
        """
        thinking_config = None
        if thinking_budget is not None:
            thinking_config = types.ThinkingConfig(thinking_budget=thinking_budget)
        config = types.GenerateContentConfig(temperature=temperature, thinking_config=thinking_config)

        response = await self._call(self.text_model, [prompt], config)
        return response.text or ""

    async def generate_json(self, prompt: str, schema: types.Schema) -> Any:
        """
        Structured generation constrained by `schema`.

        Returns the decoded JSON value. Shape validation is left to the caller.
        """
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=schema,
        )
        response = await self._call(self.text_model, [prompt], config)

        raw = (response.text or "").strip()
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(f"Response is not valid JSON: {e}", raw_output=raw) from e

    async def generate_image(self, prompt: str, source: UploadedImage) -> bytes | None:
        """
        Generate an image from a source image plus an instruction.

        Returns:
            Image bytes, or None when the response carries no image part.
        """
        contents = [
            types.Part.from_bytes(data=source.data, mime_type=source.mime_type),
            prompt,
        ]
        config = types.GenerateContentConfig(response_modalities=["IMAGE", "TEXT"])

        response = await self._call(self.image_model, contents, config)
        return extract_image(response)

    async def _call(
        self,
        model: str,
        contents: list[Any],
        config: types.GenerateContentConfig,
    ) -> types.GenerateContentResponse:
        """Issue one request, wrapping any SDK/transport failure."""
        try:
            return await self.client.aio.models.generate_content(
                model=model,
                contents=contents,
                config=config,
            )
        except Exception as e:
            raise UpstreamTransportError(f"Gemini request to {model} failed: {e}") from e


def extract_image(response: types.GenerateContentResponse) -> bytes | None:
    """Return the first inline image payload of the first candidate, if any."""
    if not response.candidates:
        return None

    content = response.candidates[0].content
    if not content or not content.parts:
        return None

    for part in content.parts:
        if part.inline_data and part.inline_data.data:
            mime_type = part.inline_data.mime_type or ""
            if mime_type.startswith("image/"):
                return part.inline_data.data

    logger.debug("Response carried no image part")
    return None
