"""
Shared pytest fixtures for productgen tests.
"""
import inspect
from io import BytesIO

import pytest
from PIL import Image

from productgen.clients.gemini import UpstreamTransportError
from productgen.models import UploadedImage
from productgen.schemas import LISTING_SCHEMA, SCENES_SCHEMA, SOCIAL_POST_SCHEMA


def png_bytes(color: str = "blue", size: tuple[int, int] = (64, 64)) -> bytes:
    img = Image.new("RGB", size, color=color)
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


class FakeGeminiClient:
    """Scripted stand-in for GeminiClient.

    Each handler receives the prompt and returns a value (or an awaitable of
    one) or raises. Every call is recorded as (kind, prompt).
    """

    def __init__(self):
        self.calls: list[tuple[str, str]] = []
        self.text_handler = lambda prompt: "SAFE"
        self.json_handlers = {}
        self.image_handler = lambda prompt: png_bytes("green")

    async def generate_text(self, prompt, temperature=None, thinking_budget=None):
        self.calls.append(("text", prompt))
        return await _resolve(self.text_handler(prompt))

    async def generate_json(self, prompt, schema):
        self.calls.append(("json", prompt))
        return await _resolve(self.json_handlers[_schema_name(schema)](prompt))

    async def generate_image(self, prompt, source):
        self.calls.append(("image", prompt))
        return await _resolve(self.image_handler(prompt))

    def count(self, kind: str) -> int:
        return sum(1 for k, _ in self.calls if k == kind)


async def _resolve(result):
    if inspect.isawaitable(result):
        return await result
    return result


def _schema_name(schema) -> str:
    if schema is LISTING_SCHEMA:
        return "listing"
    if schema is SOCIAL_POST_SCHEMA:
        return "post"
    if schema is SCENES_SCHEMA:
        return "scenes"
    raise AssertionError(f"Unexpected schema: {schema}")


def transport_error(*_):
    raise UpstreamTransportError("503 Service Unavailable")


LISTING_JSON = {
    "productTitle": "Student Digital Planner",
    "productDescription": {
        "hook": "Never miss a deadline again.",
        "features": ["Weekly spreads", "Assignment tracker", "Exam countdown"],
        "cta": "Download yours today!",
    },
}

POST_JSON = {
    "hook": "Plan smarter, not harder",
    "body": "Your semester, sorted in one place.",
    "hashtags": ["#studygram", "#planner", "#backtoschool"],
    "imagePrompt": "A planner on a desk with coffee and pens",
}

SCENES_JSON = [
    "A student planning at a library desk.",
    "A commuter checking tasks on a train.",
    "A designer journaling in a bright studio.",
    "A family organizing chores on a cozy evening.",
]


@pytest.fixture
def gemini():
    """Fake client where every call succeeds."""
    client = FakeGeminiClient()
    client.json_handlers = {
        "listing": lambda prompt: LISTING_JSON,
        "post": lambda prompt: dict(POST_JSON),
        "scenes": lambda prompt: list(SCENES_JSON),
    }
    return client


@pytest.fixture
def sample_image():
    """Uploaded PNG product photo."""
    return UploadedImage.from_bytes(png_bytes())


@pytest.fixture
def sample_image_file(tmp_path):
    """Sample JPEG product photo on disk."""
    path = tmp_path / "product.jpg"
    Image.new("RGB", (64, 64), color="red").save(str(path), format="JPEG")
    return path
