"""Generation options selected before a run."""

from dataclasses import dataclass
from enum import Enum


class PostTone(str, Enum):
    """Voice of a social media post."""

    DEFAULT = "default"  # witty English
    PLAYFUL_BILINGUAL = "playful-bilingual"  # humorous Taglish


@dataclass(frozen=True)
class GenerationOptions:
    """Which output categories a run produces. Frozen so a run never sees changes."""

    include_listing: bool = True
    include_images: bool = True
    include_social_media: bool = True

    @property
    def any_selected(self) -> bool:
        return self.include_listing or self.include_images or self.include_social_media
