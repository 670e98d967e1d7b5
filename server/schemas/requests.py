"""Pydantic request models for FastAPI endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class OverlayRequest(BaseModel):
    # Free-form on purpose: unknown providers fall back to OpenAI.
    provider: Optional[str] = Field(None, max_length=64)
    model: Optional[str] = Field(None, max_length=128)
