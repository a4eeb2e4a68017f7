"""Command line entry point: generate product content for one photo."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from .clients import GeminiClient
from .config import GEMINI_API_KEY, GEMINI_IMAGE_MODEL, GEMINI_TEXT_MODEL, LOG_LEVEL, OUTPUT_DIR
from .models import GeneratedContent, GenerationOptions, PostTone, UploadedImage
from .models.image import guess_extension
from .services import ContentSession
from .utils import to_slug, today_date


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="productgen",
        description="Generate a product listing, product images and social media posts from one photo.",
    )
    parser.add_argument("image", help="Product photo (file path or http(s) URL)")
    parser.add_argument("--type", dest="product_type", required=True, help='Product type, e.g. "digital planner"')
    parser.add_argument("--benefit", dest="core_benefit", required=True, help="Core feature or benefit")
    parser.add_argument("--no-listing", action="store_true", help="Skip the listing title/description")
    parser.add_argument("--no-images", action="store_true", help="Skip the product and usage images")
    parser.add_argument("--no-social", action="store_true", help="Skip the social media post")
    parser.add_argument("--more-images", type=int, default=0, metavar="N", help="Extra usage image batches")
    parser.add_argument("--more-posts", type=int, default=0, metavar="N", help="Extra social media posts")
    parser.add_argument(
        "--tone",
        choices=[tone.value for tone in PostTone],
        default=PostTone.DEFAULT.value,
        help="Tone of the extra social media posts",
    )
    parser.add_argument("--output", default=None, help=f"Output directory (default: {OUTPUT_DIR}/<type>-<date>)")
    return parser.parse_args(argv)


def load_image(source: str) -> UploadedImage:
    """Load the product photo from a URL or a local path."""
    if source.startswith(("http://", "https://")):
        return UploadedImage.from_url(source)
    return UploadedImage.from_path(source)


async def run(args: argparse.Namespace) -> tuple[GeneratedContent, bool]:
    """Run the main generation plus any extra batches.

    Returns the content and whether every extra batch succeeded.
    """
    gemini = GeminiClient(
        api_key=GEMINI_API_KEY,
        text_model=GEMINI_TEXT_MODEL,
        image_model=GEMINI_IMAGE_MODEL,
    )
    session = ContentSession(gemini)
    session.set_inputs(load_image(args.image), args.product_type, args.core_benefit)

    options = GenerationOptions(
        include_listing=not args.no_listing,
        include_images=not args.no_images,
        include_social_media=not args.no_social,
    )

    print("Generating content...", flush=True)
    content = await session.submit(options)

    # Extra batches keep what was already generated when they fail
    try:
        for i in range(args.more_images):
            print(f"Generating more usage images ({i + 1}/{args.more_images})...", flush=True)
            await session.more_usage_images()

        tone = PostTone(args.tone)
        for i in range(args.more_posts):
            print(f"Generating new {tone.value} social media post ({i + 1}/{args.more_posts})...", flush=True)
            await session.new_social_post(tone)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr, flush=True)
        return content, False

    return content, True


def write_output(content: GeneratedContent, output_dir: Path) -> None:
    """Write text, JSON and image files for the generated content."""
    output_dir.mkdir(parents=True, exist_ok=True)

    (output_dir / "content.json").write_text(
        json.dumps(content.to_dict(include_images=False), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )

    if content.product_title and content.product_description:
        listing = f"{content.product_title}\n\n{content.product_description.to_text()}\n"
        (output_dir / "listing.txt").write_text(listing, encoding="utf-8")

    if content.product_image:
        _write_image(output_dir / "product-image", content.product_image)

    for i, image in enumerate(content.usage_images or [], start=1):
        _write_image(output_dir / f"usage-{i}", image)

    for i, post in enumerate(content.social_media_posts or [], start=1):
        (output_dir / f"post-{i}.txt").write_text(post.to_text() + "\n", encoding="utf-8")
        if post.image:
            _write_image(output_dir / f"post-{i}", post.image)

    print(f"Saved to {output_dir}", flush=True)


def _write_image(stem: Path, data: bytes) -> None:
    stem.with_suffix(f".{guess_extension(data)}").write_bytes(data)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    try:
        content, complete = asyncio.run(run(args))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr, flush=True)
        return 1

    output_dir = Path(args.output or Path(OUTPUT_DIR) / f"{to_slug(args.product_type)}-{today_date()}")
    write_output(content, output_dir)

    if not complete:
        print("Output is partial: an extra batch failed", file=sys.stderr, flush=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
