"""
Pydantic types for health monitoring
"""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthStatus(BaseModel):
    """
    Health check response
    """

    status: str = Field(..., description="Status: 'healthy' or 'unhealthy'")
    database_connected: bool
    timestamp: datetime
    uptime_seconds: float
    version: str
