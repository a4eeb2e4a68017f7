"""Business logic services."""

from .content import ContentService, EmptyResultError
from .images import ImageGenerationError, ImageService
from .safety import SafetyRejectedError, SafetyService
from .scenes import SceneService
from .session import ContentSession
from .text import TextService

__all__ = [
    "ContentService",
    "ContentSession",
    "EmptyResultError",
    "ImageGenerationError",
    "ImageService",
    "SafetyRejectedError",
    "SafetyService",
    "SceneService",
    "TextService",
]
