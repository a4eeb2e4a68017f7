"""API clients for external services."""

from .gemini import GeminiClient, GeminiError, MalformedResponseError, UpstreamTransportError

__all__ = ["GeminiClient", "GeminiError", "MalformedResponseError", "UpstreamTransportError"]
