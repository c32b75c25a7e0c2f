"""
Input validation schemas using Pydantic for better data integrity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from dinner.utilities.constants import MIN_SCORE, MAX_SCORE


class RecipeSelectionInput(BaseModel):
    """Schema for an ordered recipe selection (shopping list / current plan)."""
    recipeIds: List[str] = Field(default_factory=list)
    savePlan: bool = False

    @field_validator('recipeIds', mode='before')
    @classmethod
    def ids_as_strings(cls, v):
        """Accept numeric ids and drop blanks, keeping selection order."""
        if v is None:
            return []
        if not isinstance(v, list):
            raise ValueError('recipeIds must be a list')
        return [str(i).strip() for i in v if i is not None and str(i).strip()]


class RatingInput(BaseModel):
    """Schema for a single rating."""
    user: str = Field(..., min_length=1, max_length=100)
    recipe: str = Field(..., min_length=1, max_length=200)
    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE)
    date: Optional[str] = None
    dateFormatted: Optional[str] = None

    @field_validator('user', 'recipe')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class ExtractionInput(BaseModel):
    """Schema for relaying an uploaded file to the recipe extraction service."""
    path: str = Field(..., min_length=1)
