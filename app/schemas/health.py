"""Schema for GET /health."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus store reachability, for load balancers."""

    status: Literal["ok"] = "ok"
    environment: Literal["dev", "prod"]
    database: Literal["connected", "disconnected"] = Field(
        description="Result of a SELECT 1 against DATABASE_URL",
    )
