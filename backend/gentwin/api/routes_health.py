from __future__ import annotations

from datetime import datetime
from fastapi import APIRouter, Depends
from gentwin.deps import get_diagnostic_generator
from gentwin.models.domain import HealthResponse
from gentwin.services.diagnostic_generator import DiagnosticGenerator

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
async def health(generator: DiagnosticGenerator = Depends(get_diagnostic_generator)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        ts=datetime.now().isoformat(),
        ai_configured=bool(getattr(generator, "configured", True)),
    )
