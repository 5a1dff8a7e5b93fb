"""Pydantic response schemas for API."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    error: str


class LayoutConstantsResponse(BaseModel):
    """Canvas constants used by the layout engine."""
    model_config = ConfigDict(populate_by_name=True)
    width: int
    height: int
    top_margin: int = Field(..., alias="topMargin")
    level_height: int = Field(..., alias="levelHeight")
