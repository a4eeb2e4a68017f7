"""Scene service - lifestyle scene descriptions that drive usage images."""

import logging

from ..clients.gemini import GeminiClient, MalformedResponseError
from ..prompts import fallback_scene, scene_prompt
from ..schemas import SCENES_SCHEMA

logger = logging.getLogger(__name__)


class SceneService:
    """Generate short scene descriptions. Never raises: falls back to generic scenes."""

    def __init__(self, gemini: GeminiClient):
        self.gemini = gemini

    async def generate_scenes(
        self,
        product_title: str,
        product_type: str,
        core_benefit: str,
        count: int = 4,
    ) -> list[str]:
        """
        Generate up to `count` scene descriptions.

        Longer responses are cut to `count`; a short but non-empty list is
        returned as-is. Transport errors, non-JSON bodies and anything that is
        not a non-empty list of strings yield `count` fallback scenes.
        """
        prompt = scene_prompt(product_title, product_type, core_benefit, count)
        try:
            data = await self.gemini.generate_json(prompt, SCENES_SCHEMA)
            scenes = self._validate(data)
        except Exception as e:
            logger.warning(f"Failed to get valid scene descriptions, using fallbacks: {e}")
            return [fallback_scene(i) for i in range(1, count + 1)]

        if len(scenes) < count:
            logger.warning(f"Got {len(scenes)} scene descriptions, expected {count}")
        return scenes[:count]

    def _validate(self, data) -> list[str]:
        """Accept only a non-empty JSON array of strings."""
        if not isinstance(data, list) or not data:
            raise MalformedResponseError(f"Expected a non-empty array of scenes, got {data!r}")
        if not all(isinstance(scene, str) for scene in data):
            raise MalformedResponseError("Scene array contains non-string items")
        return data
