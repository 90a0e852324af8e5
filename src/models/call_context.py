"""Per-call identity and clock values supplied by the execution environment."""

from pydantic import BaseModel, ConfigDict, Field


class CallContext(BaseModel):
    """Who is calling and what time it is, in nanoseconds."""
    model_config = ConfigDict(frozen=True)

    caller: str = Field(..., description="Opaque caller identity, compared by value")
    now: int = Field(..., ge=0, description="Current time (ns)")
