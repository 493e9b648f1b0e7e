"""
telemetry_store.py

Purpose:
  Owns the single cached TelemetryRecord served to the dashboard.

Contract:
  - `get()` returns the current record (placeholder until the first successful ingest).
  - `set()` swaps in a new record under a lock, so readers never see fields
    from two different ingests.
  - No history and no persistence: a new store starts from the placeholder.
  - Concurrent ingests are last-write-wins in completion order.
"""
from __future__ import annotations

import threading

from gentwin.models.domain import TelemetryRecord


class TelemetryStore:
    def __init__(self, initial: TelemetryRecord | None = None):
        self._lock = threading.Lock()
        self._record = initial or TelemetryRecord.placeholder()

    def get(self) -> TelemetryRecord:
        with self._lock:
            return self._record

    def set(self, record: TelemetryRecord) -> None:
        with self._lock:
            self._record = record
