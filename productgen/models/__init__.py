"""Data models."""

from .content import GeneratedContent, ProductDescription, SocialMediaPost, SocialPostDraft
from .image import InvalidImageError, UploadedImage
from .options import GenerationOptions, PostTone

__all__ = [
    "GeneratedContent",
    "GenerationOptions",
    "InvalidImageError",
    "PostTone",
    "ProductDescription",
    "SocialMediaPost",
    "SocialPostDraft",
    "UploadedImage",
]
