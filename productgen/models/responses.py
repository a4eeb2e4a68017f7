"""Strict pydantic models for JSON returned by structured requests.

Unknown fields, missing fields and wrong types are all validation errors;
nothing is coerced.
"""

from pydantic import BaseModel, ConfigDict, Field


class _Strict(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)


class DescriptionResponse(_Strict):
    hook: str
    features: list[str]
    cta: str


class ListingResponse(_Strict):
    product_title: str = Field(alias="productTitle")
    product_description: DescriptionResponse = Field(alias="productDescription")


class SocialPostResponse(_Strict):
    hook: str
    body: str
    hashtags: list[str]
    image_prompt: str | None = Field(default=None, alias="imagePrompt")
