"""Health and error bodies shared by the routes and middleware."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

API_VERSION = "0.1.0"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class HealthResponse(BaseModel):
    """Liveness body for GET /health."""

    status: HealthStatus
    service: str = Field(description="Configured app_name")
    version: str = Field(default=API_VERSION)
    timestamp: datetime = Field(default_factory=_utcnow)


class CheckResult(BaseModel):
    """One dependency checked by GET /health/ready."""

    name: str
    healthy: bool
    latency_ms: float | None = Field(default=None, description="Round trip of the check query")
    error: str | None = Field(default=None, description="Why the check failed")


class ReadinessResponse(BaseModel):
    """Readiness body; unhealthy when any check failed."""

    status: HealthStatus
    checks: list[CheckResult] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=_utcnow)


class ErrorResponse(BaseModel):
    """Body written by the error handler middleware."""

    error: str = Field(description="Machine-readable kind, e.g. not_found")
    message: str = Field(description="Text safe to show the caller")
    timestamp: datetime = Field(default_factory=_utcnow)
