"""
Bookmarker — Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the API contract of the user resource.
Why:   Automatic serialization and OpenAPI doc generation.
How:   FastAPI uses these models to serialize responses and document the API.

Design Decision:
    A user document is schema-flexible. UserDocument declares the two fields
    the service guarantees (`id`, `created_at`) and allows any extra keys,
    so stored attributes pass through unchanged.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class UserDocument(BaseModel):
    """
    What:  One user document.
    Who:   Returned by GET /user (as array items) and GET /user/{id}.

    Extra attributes from the stored body are included as-is.
    """
    id: str = Field(description="Document id used for lookups")
    created_at: Optional[datetime] = Field(
        default=None,
        description="When the document was created (UTC ISO 8601)",
    )

    model_config = {"extra": "allow"}


class CreateUserResponse(BaseModel):
    """Returned by POST /user after the document is persisted."""
    success: bool = Field(default=True, description="Always true on success")


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models — Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "server_error", "not_found")
        message: Human-readable description for display to users
        details: Optional extra context
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for monitoring and load balancer health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
