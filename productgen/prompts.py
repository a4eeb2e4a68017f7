"""Prompt templates for every generation task.

All builders are pure: same inputs, same string.
"""

from .models.options import PostTone

NO_TEXT_RULE = "Do not add any text, logos, or watermarks"


def safety_prompt(product_type: str, core_benefit: str) -> str:
    return (
        "Is the following product description safe for work and generally family-friendly? "
        'Answer with only "SAFE" or "UNSAFE".\n\n'
        f"Product Type: {product_type}\n"
        f"Benefit: {core_benefit}"
    )


def listing_prompt(product_type: str, core_benefit: str) -> str:
    return (
        "You are an expert e-commerce content creator. "
        "Based on the product information, generate a product listing title and description.\n"
        f"- Product Type: {product_type}\n"
        f"- Core Feature/Benefit: {core_benefit}\n"
        "Respond with a valid JSON object matching the defined schema."
    )


def social_post_prompt(
    product_type: str,
    core_benefit: str,
    product_title: str | None = None,
    tone: PostTone = PostTone.DEFAULT,
) -> str:
    """
    Social post instruction.

    Without a title this is the initial post of a run; with a title it asks
    for a new post that differs from the ones already written.
    """
    if tone == PostTone.PLAYFUL_BILINGUAL:
        persona = "You are a witty and humorous social media manager with a knack for Filipino humor."
        ask = "Create a completely new and funny social media post in Taglish for the following product."
    elif product_title is None:
        persona = "You are a witty and expert social media manager."
        ask = "Create a professional, engaging, and witty social media post in English for a general audience."
    else:
        persona = "You are a witty and expert social media manager."
        ask = "Create a completely new, engaging, and witty social media post in English for the following product."

    lines = [persona, ask]
    if product_title is not None:
        lines.append("Ensure it is different from previous posts.")
        lines += ["", "Product Information:", f"- Product Name: {product_title}"]
    lines += [
        f"- Product Type: {product_type}",
        f"- Core Benefit: {core_benefit}",
        "",
        "Respond with ONLY a valid JSON object matching the defined schema.",
    ]
    return "\n".join(lines)


def scene_prompt(product_title: str, product_type: str, core_benefit: str, count: int) -> str:
    return (
        f'Based on the product "{product_title}", which is a {product_type} that helps with "{core_benefit}", '
        f"briefly describe {count} different, creative, and photorealistic lifestyle scenes where this product "
        "is being actively used by Filipino or Asian people. Each description should be a single, concise "
        "sentence focusing on a unique context (e.g., home office, on-the-go, creative studio, cozy evening). "
        f"Return ONLY a valid JSON array of {count} strings, with no other text or markdown. "
        'Example: ["scene 1", "scene 2", ...]'
    )


def fallback_scene(index: int) -> str:
    """Deterministic stand-in scene, index is 1-based."""
    return (
        "A photorealistic scene of a Filipino or Asian person using the product "
        f"in a modern setting #{index}."
    )


def usage_image_prompt(scene: str, product_type: str) -> str:
    return (
        "Take the product from the user-provided image and seamlessly integrate it into the following "
        f'photorealistic lifestyle scene featuring Filipino or Asian people: "{scene}". '
        f'The product is a "{product_type}", so ensure its size is realistic and proportional to the environment. '
        "The final image must be high-quality, square, and maintain a consistent, appealing aesthetic. "
        f"{NO_TEXT_RULE} to the image. "
        "The product should look like it naturally belongs in the environment."
    )


def social_image_prompt(image_prompt: str, product_type: str, core_benefit: str) -> str:
    return (
        "Take the product from the user-provided image and seamlessly integrate it into the following "
        f'photorealistic lifestyle scene, suitable for a social media post: "{image_prompt}". '
        f'The product is a "{product_type}" that helps with "{core_benefit}". '
        "The final image must be high-quality, square, and have a vibrant, eye-catching aesthetic "
        f"suitable for social media. {NO_TEXT_RULE}."
    )


def studio_image_prompt(product_type: str) -> str:
    return (
        f'Using the user-provided image of a "{product_type}", professionally extract the product and place it '
        "on a seamless, pure white background. The final image should be a minimalist, high-quality, well-lit "
        "studio product photograph. The product must be centered. The final image must be square. "
        f"{NO_TEXT_RULE}."
    )
