"""Content generation service - orchestrates text and image generation."""

import logging

from ..clients.gemini import GeminiClient
from ..config import SCENE_COUNT
from ..models import GeneratedContent, GenerationOptions, PostTone, SocialMediaPost, UploadedImage
from ..utils import join_required
from .images import ImageService
from .scenes import SceneService
from .text import TextService

logger = logging.getLogger(__name__)


class EmptyResultError(Exception):
    """Every selected output category came back empty."""

    pass


class ContentService:
    """Orchestrate a full content run plus the "generate more" extensions.

    Callers must pass the safety gate before calling `generate`.
    """

    def __init__(self, gemini: GeminiClient, scene_count: int = SCENE_COUNT):
        self.text_service = TextService(gemini)
        self.scene_service = SceneService(gemini)
        self.image_service = ImageService(gemini)
        self.scene_count = scene_count

    async def generate(
        self,
        image: UploadedImage,
        product_type: str,
        core_benefit: str,
        options: GenerationOptions,
    ) -> GeneratedContent:
        """
        Generate every selected output category.

        1. Listing and initial social post text concurrently (all-or-nothing)
        2. Best-effort illustration for the post
        3. Studio image and usage images concurrently (all-or-nothing)

        Returns content holding only the selected categories.
        """
        if not options.any_selected:
            raise ValueError("Please select at least one type of content to generate.")

        content = GeneratedContent()

        # 1-2. Text content
        text_tasks = {}
        if options.include_listing:
            text_tasks["listing"] = self.text_service.generate_listing(product_type, core_benefit)
        if options.include_social_media:
            text_tasks["post"] = self._social_post(image, product_type, core_benefit)

        if text_tasks:
            logger.info(f"Generating text content: {', '.join(text_tasks)}")
            results = dict(zip(text_tasks, await join_required(*text_tasks.values())))

            if "listing" in results:
                content.product_title, content.product_description = results["listing"]
            if "post" in results:
                content.social_media_posts = [results["post"]]

        # 3. Images
        if options.include_images:
            display_title = content.product_title or product_type
            logger.info(f"Generating images for {display_title!r}")
            studio_image, usage_images = await join_required(
                self.image_service.generate_studio_image(image, product_type),
                self._usage_images(image, display_title, product_type, core_benefit),
            )
            content.product_image = studio_image
            content.usage_images = usage_images

        if content.is_empty:
            raise EmptyResultError("No content was generated. Please check your selections.")

        return content

    async def generate_more_usage_images(
        self,
        image: UploadedImage,
        product_title: str,
        product_type: str,
        core_benefit: str,
    ) -> list[bytes]:
        """Another batch of usage images; the caller appends them."""
        return await self._usage_images(image, product_title, product_type, core_benefit)

    async def generate_new_social_post(
        self,
        image: UploadedImage,
        product_title: str,
        product_type: str,
        core_benefit: str,
        tone: PostTone = PostTone.DEFAULT,
    ) -> SocialMediaPost:
        """One more social post in the given tone; the caller appends it."""
        return await self._social_post(image, product_type, core_benefit, product_title, tone)

    async def _usage_images(
        self,
        image: UploadedImage,
        product_title: str,
        product_type: str,
        core_benefit: str,
    ) -> list[bytes]:
        scenes = await self.scene_service.generate_scenes(
            product_title, product_type, core_benefit, self.scene_count
        )
        return await self.image_service.synthesize_images(image, scenes, product_type)

    async def _social_post(
        self,
        image: UploadedImage,
        product_type: str,
        core_benefit: str,
        product_title: str | None = None,
        tone: PostTone = PostTone.DEFAULT,
    ) -> SocialMediaPost:
        """Text first (required), then the illustration (optional)."""
        draft = await self.text_service.generate_social_post(
            product_type, core_benefit, product_title, tone
        )
        post = draft.post

        if draft.image_prompt:
            post.image = await self.image_service.illustrate_post(
                image, draft.image_prompt, product_type, core_benefit
            )
        return post
