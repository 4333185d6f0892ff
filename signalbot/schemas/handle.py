"""Pydantic schemas for the handles API."""

from pydantic import BaseModel, Field, field_validator


class HandleCreate(BaseModel):
    handle: str = Field(min_length=1, max_length=64)

    @field_validator("handle")
    @classmethod
    def _trim_handle(cls, value: str) -> str:
        text = value.strip()
        if not text or text == "@":
            raise ValueError("must not be empty")
        return text
