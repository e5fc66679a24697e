"""
Pydantic schemas for the average endpoint.

``numbers`` is echoed back exactly as received, so the input model
accepts arbitrary JSON values; numeric validation happens in
``MathService``.
"""

from typing import Any, List, Union

from pydantic import BaseModel, Field


class AverageInput(BaseModel):
    numbers: List[Any] = Field(..., examples=[[10, 20, 30, 40]])


class AverageResult(BaseModel):
    count: int
    sum: Union[int, float]
    average: Union[int, float]


class AverageResponse(BaseModel):
    """Schema for a successful ``POST /math/average`` response."""

    input: AverageInput
    result: AverageResult
    info: str
