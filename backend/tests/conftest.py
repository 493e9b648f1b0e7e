from __future__ import annotations

from typing import List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from gentwin.main import create_app
from gentwin.services.diagnostic_generator import GenerationFailure
from gentwin.services.telemetry_store import TelemetryStore


class FakeGenerator:
    """Records every call; returns `report` or raises when `fail` is set."""

    def __init__(self, report: str = "Bolts nominal. Sway within baseline. No action beyond routine inspection."):
        self.report = report
        self.fail: Optional[str] = None
        self.calls: List[Tuple[float, float]] = []
        self.configured = True

    async def generate(self, frequency: float, intensity: float) -> str:
        self.calls.append((frequency, intensity))
        if self.fail:
            raise GenerationFailure(self.fail)
        return self.report


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def store() -> TelemetryStore:
    return TelemetryStore()


@pytest.fixture
def client(store: TelemetryStore, fake_generator: FakeGenerator):
    app = create_app(store=store, generator=fake_generator)
    with TestClient(app) as c:
        yield c
