"""Request and response models for brands, categories and sliders."""

from pydantic import BaseModel, ConfigDict, Field


class NamedItemRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None


class NamedItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None


BrandRequest = NamedItemRequest
CategoryRequest = NamedItemRequest
BrandResponse = NamedItemResponse
CategoryResponse = NamedItemResponse


class SliderRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    link_url: str | None = None
    position: int = Field(default=0, ge=0)
    active: bool = True


class SliderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    link_url: str | None = None
    image_url: str | None = None
    position: int
    active: bool
