"""Safety gate - classifies the product description before any paid generation."""

import logging

from ..clients.gemini import GeminiClient
from ..prompts import safety_prompt

logger = logging.getLogger(__name__)

REJECTED_MESSAGE = (
    "The product information provided does not meet our safety guidelines. "
    "You cannot generate content for this product."
)
UNVERIFIED_MESSAGE = "Unable to verify that the product information is safe. Please try again."


class SafetyRejectedError(Exception):
    """Content was classified unsafe or could not be verified."""

    def __init__(self, message: str, verified: bool = True):
        self.verified = verified
        super().__init__(message)


class SafetyService:
    """SAFE/UNSAFE classification on the fast text model. Fails closed."""

    def __init__(self, gemini: GeminiClient):
        self.gemini = gemini

    async def is_content_safe(self, product_type: str, core_benefit: str) -> bool:
        """True only when the model answers exactly "SAFE" (surrounding whitespace ignored)."""
        safe, _ = await self._classify(product_type, core_benefit)
        return safe

    async def check(self, product_type: str, core_benefit: str) -> None:
        """
        Raise unless the content is safe.

        Raises:
            SafetyRejectedError: unsafe, or the classification call failed.
        """
        safe, verified = await self._classify(product_type, core_benefit)
        if safe:
            return
        if not verified:
            raise SafetyRejectedError(UNVERIFIED_MESSAGE, verified=False)
        raise SafetyRejectedError(REJECTED_MESSAGE)

    async def _classify(self, product_type: str, core_benefit: str) -> tuple[bool, bool]:
        """Return (safe, verified)."""
        try:
            answer = await self.gemini.generate_text(
                safety_prompt(product_type, core_benefit),
                temperature=0,
                thinking_budget=0,
            )
        except Exception as e:
            logger.error(f"Content safety check failed: {e}")
            return False, False

        safe = answer.strip() == "SAFE"
        if not safe:
            logger.info(f"Content classified as not safe: {answer.strip()!r}")
        return safe, True
