from __future__ import annotations

import logging

from gentwin.models.domain import TelemetryReading, TelemetryRecord, classify_status
from gentwin.services.diagnostic_generator import DiagnosticGenerator
from gentwin.services.telemetry_store import TelemetryStore

logger = logging.getLogger(__name__)


async def ingest_reading(
    store: TelemetryStore,
    generator: DiagnosticGenerator,
    reading: TelemetryReading,
) -> TelemetryRecord:
    """
    Generate a diagnostic for `reading` and make it the current record.

    Raises GenerationFailure without touching the store.
    """
    logger.info("Received telemetry: %s Hz | %s AU", reading.frequency, reading.intensity)

    report = await generator.generate(reading.frequency, reading.intensity)

    record = TelemetryRecord(
        frequency=reading.frequency,
        intensity=reading.intensity,
        status=classify_status(reading.intensity),
        report=report,
    )
    store.set(record)

    logger.info("AI report generated (status=%s)", record.status.value)
    return record
