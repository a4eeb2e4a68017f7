"""Structured-output contracts sent with JSON generation requests."""

from google.genai import types

_STRING = types.Schema(type=types.Type.STRING)

LISTING_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "productTitle": types.Schema(
            type=types.Type.STRING,
            description="A clear, concise, and searchable product title, maximum 60 characters.",
        ),
        "productDescription": types.Schema(
            type=types.Type.OBJECT,
            properties={
                "hook": types.Schema(
                    type=types.Type.STRING,
                    description="A compelling 1-2 sentence hook to grab attention.",
                ),
                "features": types.Schema(
                    type=types.Type.ARRAY,
                    items=_STRING,
                    min_items=3,
                    max_items=5,
                    description="A list of 3-5 key features and their benefits, using action-oriented language.",
                ),
                "cta": types.Schema(
                    type=types.Type.STRING,
                    description="A strong call to action to encourage purchase.",
                ),
            },
            required=["hook", "features", "cta"],
        ),
    },
    required=["productTitle", "productDescription"],
)

SOCIAL_POST_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "hook": types.Schema(
            type=types.Type.STRING,
            description="A catchy title or hook for the social media post, different from the product title.",
        ),
        "body": types.Schema(
            type=types.Type.STRING,
            description="A brief, engaging paragraph (1-3 sentences) for the target audience.",
        ),
        "hashtags": types.Schema(
            type=types.Type.ARRAY,
            items=_STRING,
            min_items=3,
            max_items=5,
            description="A list of 3-5 relevant and trending hashtags.",
        ),
        "imagePrompt": types.Schema(
            type=types.Type.STRING,
            description=(
                "A detailed, creative, and photorealistic prompt to generate a square image for this social "
                "media post. Describe the style, subject, and environment of a scene that is visually "
                "appealing and relevant to the product and post content."
            ),
        ),
    },
    required=["hook", "body", "hashtags"],
)

SCENES_SCHEMA = types.Schema(type=types.Type.ARRAY, items=_STRING)
