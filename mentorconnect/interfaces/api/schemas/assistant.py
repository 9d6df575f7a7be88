"""Schemas for the local assistant endpoints."""

from pydantic import BaseModel, Field


class AssistantStatusRead(BaseModel):
    available: bool
    model: str


class AssistantGenerateRequest(BaseModel):
    prompt: str = Field(..., min_length=1, description="Prompt sent to the local model")


class AssistantGenerateResponse(BaseModel):
    response: str


__all__ = ["AssistantGenerateRequest", "AssistantGenerateResponse", "AssistantStatusRead"]
