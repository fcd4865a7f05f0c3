from typing import Optional

from fastapi import APIRouter, Body, Depends

from access_copilot.inference.base import LLMClient
from access_copilot.inference.config import get_llm_client
from access_copilot.pipeline.analyzer import run_patient_access_analysis
from access_copilot.schemas import (
    AnalysisRequest,
    AnalysisResponse,
    ErrorResponse,
    HealthResponse,
)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    return {"status": "ok"}


@router.post(
    "/api/patient-access/analyze",
    response_model=AnalysisResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    tags=["patient-access"],
)
def analyze_patient_access(
    payload: Optional[AnalysisRequest] = Body(None),
    client: LLMClient = Depends(get_llm_client),
):
    # Sync route: the blocking LLM call runs in the threadpool.
    analysis = run_patient_access_analysis(payload or AnalysisRequest(), client)
    return AnalysisResponse(success=True, analysis=analysis)
