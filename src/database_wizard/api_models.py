"""API request/response models."""

from typing import List
from pydantic import BaseModel, Field


class PreviewResponse(BaseModel):
    """Response from the SQL preview endpoint."""
    success: bool = Field(..., description="Whether the schema validated and SQL was generated")
    sql: str = Field(default="", description="Generated DDL script")
    errors: List[str] = Field(default_factory=list, description="Validation errors, in check order")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    executor_configured: bool = False
