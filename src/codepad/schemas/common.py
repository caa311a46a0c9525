"""Shared response schemas."""

from typing import Any

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    success: bool = True


class HealthResponse(BaseModel):
    status: str


class DatabaseCheckResponse(BaseModel):
    success: bool
    time: Any = None
