"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional

from recipe_saviour.utilities.config import MAX_PLAN_MEALS


class ExtractRequest(BaseModel):
    """Schema for an extraction request: a URL to fetch, or HTML already fetched."""
    url: str = Field(..., min_length=1, max_length=2048)
    html: Optional[str] = None

    @field_validator('url')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip()


class RecipeInput(BaseModel):
    """Schema for saving a recipe."""
    title: str = Field("Recipe", max_length=300)
    ingredients: List[str] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)
    source_url: str = Field(..., min_length=1, max_length=2048)

    @field_validator('ingredients', 'steps')
    @classmethod
    def drop_blank_lines(cls, v):
        """Trim entries and filter out empty ones."""
        return [line.strip() for line in v if line and line.strip()]

    @model_validator(mode='after')
    def require_content(self):
        if not self.ingredients and not self.steps:
            raise ValueError('Recipe must have at least one ingredient or step')
        return self


class RecipeSelection(BaseModel):
    """Schema for requests working on a set of saved recipes (all of them when omitted)."""
    recipe_ids: Optional[List[str]] = None


class PlanRequest(BaseModel):
    """Schema for an automatic meal plan request."""
    count: int = Field(3, ge=1, le=MAX_PLAN_MEALS)


class FavouritePlanInput(BaseModel):
    """Schema for saving a favourite plan."""
    recipe_ids: List[str] = Field(..., min_length=1)
