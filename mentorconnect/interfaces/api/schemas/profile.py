"""Profile payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    layout: str
    sections: list[str]
    profile: dict[str, Any]


__all__ = ["ProfileRead"]
