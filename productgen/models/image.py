"""Uploaded product image model."""

import base64
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

import requests
from PIL import Image, UnidentifiedImageError

from ..config import SUPPORTED_MIME_TYPES


class InvalidImageError(ValueError):
    """The uploaded data is not a supported image."""

    pass


@dataclass(frozen=True)
class UploadedImage:
    """A product photo: raw encoded bytes plus its media type."""

    data: bytes
    mime_type: str

    @property
    def base64(self) -> str:
        """Base64 text form of the payload."""
        return base64.b64encode(self.data).decode("ascii")

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str | None = None) -> "UploadedImage":
        """
        Build from raw bytes, detecting the media type with Pillow when missing.

        Raises:
            InvalidImageError: data is empty, undecodable or an unsupported type.
        """
        if not data:
            raise InvalidImageError("Image data is empty")

        if mime_type is None:
            mime_type = detect_mime_type(data)

        if mime_type not in SUPPORTED_MIME_TYPES:
            raise InvalidImageError(
                f"Unsupported image type {mime_type!r} (expected one of {', '.join(SUPPORTED_MIME_TYPES)})"
            )
        return cls(data=data, mime_type=mime_type)

    @classmethod
    def from_path(cls, path: str | Path) -> "UploadedImage":
        """Read an image file from disk."""
        return cls.from_bytes(Path(path).read_bytes())

    @classmethod
    def from_url(cls, url: str) -> "UploadedImage":
        """Download an image from a URL."""
        headers = {
            "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        }
        try:
            response = requests.get(url, headers=headers, timeout=30)
            response.raise_for_status()
        except requests.RequestException as e:
            raise RuntimeError(f"Failed to download image from {url}: {e}")
        return cls.from_bytes(response.content)


def detect_mime_type(data: bytes) -> str:
    """Sniff the media type of encoded image bytes."""
    try:
        with Image.open(BytesIO(data)) as img:
            fmt = img.format
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Could not decode image: {e}")

    mime_type = Image.MIME.get(fmt or "")
    if not mime_type:
        raise InvalidImageError(f"Unknown image format: {fmt}")
    return mime_type


def guess_extension(data: bytes) -> str:
    """File extension for generated image bytes (defaults to png)."""
    try:
        return {"image/jpeg": "jpeg", "image/webp": "webp"}.get(detect_mime_type(data), "png")
    except InvalidImageError:
        return "png"
