"""
Layered API — Health Response Schema
=====================================
"""

from typing import Dict

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and backend status.
    Who:   Returned by GET /health.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    backends: Dict[str, str] = Field(description="Backend per entity: memory or relational")
    database: str = Field(description="Database connectivity: connected, disconnected, not_used")
    uptime_seconds: float = Field(description="Seconds since service started")
