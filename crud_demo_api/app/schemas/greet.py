"""Pydantic schemas for the greeting endpoint."""

from pydantic import BaseModel, Field


class GreetInput(BaseModel):
    name: str = Field(..., examples=["David"])
    lang: str = Field("en", examples=["en"], description="One of en, he, es; anything else greets in English")


class GreetResponse(BaseModel):
    """Schema for a successful ``GET /greet`` response."""

    input: GreetInput
    result: str = Field(..., examples=["Hello, David!"])
    info: str
