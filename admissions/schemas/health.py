"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    version: str | None = Field(default=None, description="Application version")
    flow_id: str | None = Field(default=None, description="Id of the loaded flow")
