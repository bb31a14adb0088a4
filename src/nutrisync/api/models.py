"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field


class TextRequest(BaseModel):
    """Free-text meal description or nutrition question."""

    text: str = Field(max_length=2000)
