"""Generated content models."""

import base64
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ProductDescription:
    """Listing description: hook, 3-5 features, call to action."""

    hook: str
    features: list[str]
    cta: str

    def to_text(self) -> str:
        """Copy-ready description text."""
        bullets = "\n".join(f"• {feature}" for feature in self.features)
        return f"{self.hook}\n\n{bullets}\n\n{self.cta}"

    def to_dict(self) -> dict[str, Any]:
        return {"hook": self.hook, "features": list(self.features), "cta": self.cta}


@dataclass
class SocialMediaPost:
    """A social media post. `image` is either complete bytes or None."""

    hook: str
    body: str
    hashtags: list[str]
    image: bytes | None = None

    def to_text(self) -> str:
        """Copy-ready post text."""
        return f"{self.hook}\n\n{self.body}\n\n{' '.join(self.hashtags)}"

    def to_dict(self, include_images: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {
            "hook": self.hook,
            "body": self.body,
            "hashtags": list(self.hashtags),
        }
        if self.image is not None and include_images:
            data["image"] = _b64(self.image)
        return data


@dataclass
class GeneratedContent:
    """Aggregate result of a run. Absent fields were not selected (or not produced)."""

    product_title: str | None = None
    product_description: ProductDescription | None = None
    product_image: bytes | None = None
    usage_images: list[bytes] | None = None
    social_media_posts: list[SocialMediaPost] | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.product_title is None
            and self.product_description is None
            and self.product_image is None
            and self.usage_images is None
            and self.social_media_posts is None
        )

    def add_usage_images(self, images: list[bytes]) -> None:
        """Append usage images; existing entries keep their positions."""
        if self.usage_images is None:
            self.usage_images = []
        self.usage_images.extend(images)

    def add_social_post(self, post: SocialMediaPost) -> None:
        """Append one social media post."""
        if self.social_media_posts is None:
            self.social_media_posts = []
        self.social_media_posts.append(post)

    def to_dict(self, include_images: bool = True) -> dict[str, Any]:
        """
        Serialize to a JSON-ready dict.

        Images are base64 strings; with include_images=False they are left out
        (the CLI writes them as separate files). Absent fields are omitted.
        """
        data: dict[str, Any] = {}
        if self.product_title is not None:
            data["productTitle"] = self.product_title
        if self.product_description is not None:
            data["productDescription"] = self.product_description.to_dict()
        if self.product_image is not None and include_images:
            data["productImage"] = _b64(self.product_image)
        if self.usage_images is not None and include_images:
            data["usageImages"] = [_b64(img) for img in self.usage_images]
        if self.social_media_posts is not None:
            data["socialMediaPosts"] = [
                post.to_dict(include_images=include_images) for post in self.social_media_posts
            ]
        return data


@dataclass
class SocialPostDraft:
    """Committed post text plus the optional prompt for its illustration."""

    post: SocialMediaPost
    image_prompt: str | None = field(default=None)


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
