"""Pydantic schemas for the secure delete endpoint."""

from pydantic import BaseModel, Field


class DeleteInput(BaseModel):
    role: str = Field(..., examples=["admin"])


class DeleteResponse(BaseModel):
    """Schema for a successful ``DELETE /secure/resource`` response.

    The demo never deletes anything; ``result`` is a fixed message.
    """

    input: DeleteInput
    result: str
    info: str
