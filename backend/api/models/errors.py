"""
Error response models.

Standardized error responses for the API.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")
    details: Optional[dict[str, Any]] = Field(default_factory=dict)
