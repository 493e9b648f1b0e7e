from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================
# 0) ENUMS & CONSTANTS
# ============================================================

class TelemetryStatus(str, Enum):
    WAITING = "WAITING FOR SENSOR"
    HEALTHY = "HEALTHY"
    CRITICAL = "CRITICAL"


# Displacement intensity (AU) above which mounting-bolt looseness is flagged
CRITICAL_INTENSITY_AU = 0.150

ASSET_ID = "HAV-402"

IDLE_REPORT = "System idle. Awaiting baseline telemetry from edge device."


def classify_status(intensity: float) -> TelemetryStatus:
    if intensity > CRITICAL_INTENSITY_AU:
        return TelemetryStatus.CRITICAL
    return TelemetryStatus.HEALTHY


# ============================================================
# 1) TELEMETRY STATE
# ============================================================

class TelemetryRecord(BaseModel):
    """
    Latest reading plus the diagnostic generated for it.
    Frozen: the store swaps whole records, never edits one in place.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    frequency: float            # sway frequency (Hz)
    intensity: float            # displacement intensity (AU)
    status: TelemetryStatus
    report: str = Field(alias="aiReport")

    @classmethod
    def placeholder(cls) -> "TelemetryRecord":
        return cls(
            frequency=0.0,
            intensity=0.0,
            status=TelemetryStatus.WAITING,
            report=IDLE_REPORT,
        )


# ============================================================
# 2) API SCHEMAS
# ============================================================

class TelemetryReading(BaseModel):
    """Sensor payload. Numbers only: no strings, booleans, NaN or Infinity."""
    model_config = ConfigDict(extra="ignore")

    frequency: float = Field(..., strict=True, allow_inf_nan=False, description="Sway frequency (Hz)")
    intensity: float = Field(..., strict=True, allow_inf_nan=False, description="Displacement intensity (AU)")


class IngestResponse(BaseModel):
    success: bool = True
    message: str = "Telemetry processed by GenTwin AI"


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[List[Dict[str, Any]]] = None


class HealthResponse(BaseModel):
    status: str
    ts: str
    ai_configured: bool
