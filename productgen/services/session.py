"""Content session - one product, one uploaded image, incremental results."""

import logging

from ..clients.gemini import GeminiClient
from ..models import GeneratedContent, GenerationOptions, PostTone, SocialMediaPost, UploadedImage
from .content import ContentService
from .safety import SafetyService

logger = logging.getLogger(__name__)


class ContentSession:
    """Holds the inputs and the current content of a session.

    "Generate more" actions only append to a category the last successful run
    produced (per its options snapshot). There is no guard against overlapping
    calls.
    """

    def __init__(self, gemini: GeminiClient):
        self.safety_service = SafetyService(gemini)
        self.content_service = ContentService(gemini)
        self.reset()

    def reset(self) -> None:
        """Discard inputs and results."""
        self.image: UploadedImage | None = None
        self.product_type = ""
        self.core_benefit = ""
        self.options: GenerationOptions | None = None
        self.content: GeneratedContent | None = None

    def set_inputs(self, image: UploadedImage, product_type: str, core_benefit: str) -> None:
        self.image = image
        self.product_type = product_type.strip()
        self.core_benefit = core_benefit.strip()

    @property
    def product_title(self) -> str:
        """Generated title when there is one, else the raw product type."""
        if self.content and self.content.product_title:
            return self.content.product_title
        return self.product_type

    async def submit(self, options: GenerationOptions) -> GeneratedContent:
        """
        Validate inputs, pass the safety gate, then run a full generation.

        Existing content is replaced only when the run succeeds.

        Raises:
            ValueError: missing inputs or nothing selected.
            SafetyRejectedError: the safety gate did not pass.
        """
        if self.image is None or not self.product_type or not self.core_benefit:
            raise ValueError("Please fill out all fields and upload an image.")
        if not options.any_selected:
            raise ValueError("Please select at least one type of content to generate.")

        await self.safety_service.check(self.product_type, self.core_benefit)

        content = await self.content_service.generate(
            self.image, self.product_type, self.core_benefit, options
        )
        self.content = content
        self.options = options
        return content

    async def more_usage_images(self) -> list[bytes]:
        """Generate another batch of usage images and append it."""
        self._require_category("images", self.options and self.options.include_images)
        images = await self.content_service.generate_more_usage_images(
            self.image, self.product_title, self.product_type, self.core_benefit
        )
        self.content.add_usage_images(images)
        logger.info(f"Usage images now: {len(self.content.usage_images)}")
        return images

    async def new_social_post(self, tone: PostTone = PostTone.DEFAULT) -> SocialMediaPost:
        """Generate one more social post and append it."""
        self._require_category("social media posts", self.options and self.options.include_social_media)
        post = await self.content_service.generate_new_social_post(
            self.image, self.product_title, self.product_type, self.core_benefit, tone
        )
        self.content.add_social_post(post)
        return post

    def _require_category(self, category: str, selected: bool | None) -> None:
        """More of a category is only offered when the last run produced it."""
        if self.content is None or self.image is None:
            raise RuntimeError("Generate content before asking for more")
        if not selected:
            raise RuntimeError(f"The last run did not include {category}")
