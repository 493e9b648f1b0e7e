"""
deps.py

Purpose:
  Dependency Injection (DI) accessors for the per-app services.

Services Managed:
  - `TelemetryStore` (the cached latest record)
  - `DiagnosticGenerator` (Gemini client wrapper)

Pattern:
  - Instances live on `app.state`, created by `create_app()`, so each app
    (and each process) starts from a fresh placeholder record.
  - Tests swap implementations through `app.dependency_overrides`.
"""
from __future__ import annotations

from fastapi import Request

from gentwin.services.diagnostic_generator import DiagnosticGenerator
from gentwin.services.telemetry_store import TelemetryStore


def get_telemetry_store(request: Request) -> TelemetryStore:
    return request.app.state.telemetry_store


def get_diagnostic_generator(request: Request) -> DiagnosticGenerator:
    return request.app.state.diagnostic_generator
