"""Text generation service - listing and social post copy via structured output."""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..clients.gemini import GeminiClient, MalformedResponseError
from ..models import PostTone, ProductDescription, SocialMediaPost, SocialPostDraft
from ..models.responses import ListingResponse, SocialPostResponse
from ..prompts import listing_prompt, social_post_prompt
from ..schemas import LISTING_SCHEMA, SOCIAL_POST_SCHEMA

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class TextService:
    """Generate listing and social post copy."""

    def __init__(self, gemini: GeminiClient):
        self.gemini = gemini

    async def generate_listing(
        self, product_type: str, core_benefit: str
    ) -> tuple[str, ProductDescription]:
        """
        Generate a listing title and description.

        Raises:
            UpstreamTransportError: the request failed.
            MalformedResponseError: the JSON violated the listing contract.
        """
        data = await self.gemini.generate_json(
            listing_prompt(product_type, core_benefit), LISTING_SCHEMA
        )
        listing = self._parse(data, ListingResponse)

        description = listing.product_description
        return listing.product_title, ProductDescription(
            hook=description.hook,
            features=list(description.features),
            cta=description.cta,
        )

    async def generate_social_post(
        self,
        product_type: str,
        core_benefit: str,
        product_title: str | None = None,
        tone: PostTone = PostTone.DEFAULT,
    ) -> SocialPostDraft:
        """
        Generate one social post (text only).

        The returned draft carries the post plus the model's image prompt, if
        any; illustrating it is a separate best-effort step.
        """
        data = await self.gemini.generate_json(
            social_post_prompt(product_type, core_benefit, product_title, tone),
            SOCIAL_POST_SCHEMA,
        )
        response = self._parse(data, SocialPostResponse)

        post = SocialMediaPost(
            hook=response.hook,
            body=response.body,
            hashtags=list(response.hashtags),
        )
        return SocialPostDraft(post=post, image_prompt=response.image_prompt or None)

    def _parse(self, data: Any, model: type[M]) -> M:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning(f"{model.__name__} validation failed: {e}")
            raise MalformedResponseError(f"Response did not match the {model.__name__} contract: {e}") from e
