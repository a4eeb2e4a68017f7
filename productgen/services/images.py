"""Image service - studio shot, usage images and post illustrations via Gemini."""

import logging

from ..clients.gemini import GeminiClient
from ..models.image import UploadedImage
from ..prompts import social_image_prompt, studio_image_prompt, usage_image_prompt
from ..utils import join_best_effort

logger = logging.getLogger(__name__)


class ImageGenerationError(Exception):
    """Failed to generate images."""

    pass


class ImageService:
    """Derive new images from the uploaded product photo."""

    def __init__(self, gemini: GeminiClient):
        self.gemini = gemini

    async def synthesize_images(
        self,
        source: UploadedImage,
        scenes: list[str],
        product_type: str,
    ) -> list[bytes]:
        """
        Place the product into each scene, one concurrent request per scene.

        Failed requests and responses without image data are logged and left
        out. Nothing is retried or substituted.

        Returns:
            Successful images in scene order (may be shorter than `scenes`).

        Raises:
            ImageGenerationError: scenes were given but no image came back.
        """
        if not scenes:
            return []

        images = await join_best_effort(
            [self._usage_image(source, scene, product_type) for scene in scenes],
            label="Usage image",
        )

        if not images:
            raise ImageGenerationError(
                "The AI failed to generate any usage example images (no images produced). "
                "This could be due to content safety filters or a temporary issue. "
                "Please try a different product or image."
            )

        logger.info(f"Generated {len(images)}/{len(scenes)} usage images")
        return images

    async def generate_studio_image(self, source: UploadedImage, product_type: str) -> bytes:
        """
        Product on a pure white studio background.

        Raises:
            ImageGenerationError: the response carried no image data.
        """
        image = await self.gemini.generate_image(studio_image_prompt(product_type), source)
        if image is None:
            raise ImageGenerationError("The AI failed to generate an edited product image.")
        return image

    async def illustrate_post(
        self,
        source: UploadedImage,
        image_prompt: str,
        product_type: str,
        core_benefit: str,
    ) -> bytes | None:
        """Best-effort illustration for a social post. Returns None on any failure."""
        try:
            image = await self.gemini.generate_image(
                social_image_prompt(image_prompt, product_type, core_benefit),
                source,
            )
        except Exception as e:
            logger.error(f"Failed to generate social media image: {e}")
            return None

        if image is None:
            logger.warning("Social media image request returned no image data")
        return image

    async def _usage_image(self, source: UploadedImage, scene: str, product_type: str) -> bytes:
        image = await self.gemini.generate_image(usage_image_prompt(scene, product_type), source)
        if image is None:
            raise ImageGenerationError("request succeeded but returned no image data")
        return image
