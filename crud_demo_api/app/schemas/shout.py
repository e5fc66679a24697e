"""Pydantic schemas for the shout endpoint."""

from pydantic import BaseModel, Field


class ShoutInput(BaseModel):
    word: str = Field(..., examples=["hello"])


class ShoutResult(BaseModel):
    uppercased: str
    length: int
    # True when the word is longer than five characters.
    is_long: bool


class ShoutResponse(BaseModel):
    input: ShoutInput
    result: ShoutResult
    info: str
