"""
routes_telemetry.py

Purpose:
  Edge sensor ingest and dashboard read of the latest telemetry record.

Endpoints:
  - POST /api/telemetry: reading -> Gemini diagnostic -> store. 500 if the AI call fails.
  - GET  /api/telemetry: current record (placeholder until the first successful ingest).
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from gentwin.deps import get_diagnostic_generator, get_telemetry_store
from gentwin.models.domain import ErrorResponse, IngestResponse, TelemetryReading, TelemetryRecord
from gentwin.services.diagnostic_generator import DiagnosticGenerator, GenerationFailure
from gentwin.services.telemetry_pipeline import ingest_reading
from gentwin.services.telemetry_store import TelemetryStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=IngestResponse,
    responses={500: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def telemetry_ingest(
    reading: TelemetryReading,
    store: TelemetryStore = Depends(get_telemetry_store),
    generator: DiagnosticGenerator = Depends(get_diagnostic_generator),
):
    try:
        await ingest_reading(store, generator, reading)
    except GenerationFailure as e:
        logger.exception("AI generation error: %s", e)
        return JSONResponse(status_code=500, content={"error": "AI pipeline failed"})

    return IngestResponse()


@router.get("", response_model=TelemetryRecord)
async def telemetry_latest(store: TelemetryStore = Depends(get_telemetry_store)) -> TelemetryRecord:
    return store.get()
