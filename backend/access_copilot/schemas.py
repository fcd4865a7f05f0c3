from pydantic import BaseModel, ConfigDict
from typing import Optional, Any


DEFAULT_PERSONA = "General Stanford Patient Access leader"
DEFAULT_GOAL = "Optimize access and experience while protecting resources."


class AnalysisRequest(BaseModel):
    """Scenario submitted by patient access staff. Field names match the wire format."""

    model_config = ConfigDict(extra="ignore")

    # Only presence is checked; values are interpolated as-is.
    callType: Optional[Any] = None
    notes: Optional[Any] = None
    persona: Optional[Any] = None
    goal: Optional[Any] = None


class AnalysisResponse(BaseModel):
    success: bool = True
    # Whatever JSON object the model produced; the shape is not enforced.
    analysis: Any


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
