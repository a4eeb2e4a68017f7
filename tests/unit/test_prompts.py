"""
Unit tests for prompt builders and structured-output schemas.
"""
from google.genai import types

from productgen import prompts
from productgen.models import PostTone
from productgen.schemas import LISTING_SCHEMA, SCENES_SCHEMA, SOCIAL_POST_SCHEMA


class TestListingPrompt:
    """Tests for the listing instruction."""

    def test_contains_inputs_verbatim(self):
        prompt = prompts.listing_prompt("digital planner", "helps students track assignments")
        assert "digital planner" in prompt
        assert "helps students track assignments" in prompt

    def test_deterministic(self):
        a = prompts.listing_prompt("mug", "keeps coffee hot")
        b = prompts.listing_prompt("mug", "keeps coffee hot")
        assert a == b


class TestSafetyPrompt:
    def test_asks_for_binary_answer(self):
        prompt = prompts.safety_prompt("candle", "relaxing scent")
        assert '"SAFE" or "UNSAFE"' in prompt
        assert "Product Type: candle" in prompt
        assert "Benefit: relaxing scent" in prompt


class TestSocialPostPrompt:
    """Tests for social post instructions."""

    def test_initial_post_has_no_product_name(self):
        prompt = prompts.social_post_prompt("candle", "relaxing scent")
        assert "Product Name" not in prompt
        assert "in English" in prompt

    def test_new_post_includes_title_and_asks_for_difference(self):
        prompt = prompts.social_post_prompt("candle", "relaxing scent", product_title="Lavender Dream")
        assert "- Product Name: Lavender Dream" in prompt
        assert "different from previous posts" in prompt

    def test_playful_bilingual_tone_uses_taglish(self):
        prompt = prompts.social_post_prompt(
            "candle", "relaxing scent", product_title="Lavender Dream", tone=PostTone.PLAYFUL_BILINGUAL
        )
        assert "Taglish" in prompt
        assert "Filipino humor" in prompt

    def test_default_tone_is_english(self):
        prompt = prompts.social_post_prompt("candle", "relaxing scent", product_title="Lavender Dream")
        assert "Taglish" not in prompt


class TestImagePrompts:
    """Tests for image instructions."""

    def test_usage_prompt_embeds_scene_and_type(self):
        prompt = prompts.usage_image_prompt("A student at a library desk.", "digital planner")
        assert '"A student at a library desk."' in prompt
        assert '"digital planner"' in prompt
        assert "square" in prompt
        assert "realistic and proportional" in prompt
        assert "Do not add any text, logos, or watermarks" in prompt

    def test_studio_prompt_white_background(self):
        prompt = prompts.studio_image_prompt("mug")
        assert "pure white background" in prompt
        assert "square" in prompt

    def test_social_image_prompt(self):
        prompt = prompts.social_image_prompt("flat lay on a desk", "mug", "keeps coffee hot")
        assert '"flat lay on a desk"' in prompt
        assert 'helps with "keeps coffee hot"' in prompt


class TestScenePrompts:
    def test_scene_prompt_mentions_count(self):
        prompt = prompts.scene_prompt("Lavender Dream", "candle", "relaxing scent", 4)
        assert "describe 4 different" in prompt
        assert "JSON array of 4 strings" in prompt

    def test_fallback_scenes_distinct_by_index(self):
        scenes = [prompts.fallback_scene(i) for i in range(1, 5)]
        assert len(set(scenes)) == 4
        assert scenes[0].endswith("#1.")
        assert scenes[3].endswith("#4.")


class TestSchemas:
    """Tests for the structured-output contracts."""

    def test_listing_required_fields(self):
        assert LISTING_SCHEMA.required == ["productTitle", "productDescription"]
        description = LISTING_SCHEMA.properties["productDescription"]
        assert description.required == ["hook", "features", "cta"]
        assert description.properties["features"].min_items == 3
        assert description.properties["features"].max_items == 5

    def test_social_post_image_prompt_optional(self):
        assert "imagePrompt" in SOCIAL_POST_SCHEMA.properties
        assert "imagePrompt" not in SOCIAL_POST_SCHEMA.required

    def test_scenes_is_array_of_strings(self):
        assert SCENES_SCHEMA.type == types.Type.ARRAY
        assert SCENES_SCHEMA.items.type == types.Type.STRING
