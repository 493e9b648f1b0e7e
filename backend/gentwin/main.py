# gentwin/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gentwin.api import routes_health, routes_telemetry
from gentwin.config import allowed_origins, env_int, env_str
from gentwin.logging_config import setup_logging
from gentwin.services.diagnostic_generator import DiagnosticGenerator, GeminiDiagnosticGenerator
from gentwin.services.telemetry_store import TelemetryStore

logger = logging.getLogger(__name__)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Offending inputs are not echoed back: NaN/Infinity are not valid JSON
    detail = [
        {"loc": list(err.get("loc", ())), "msg": str(err.get("msg", "")), "type": str(err.get("type", ""))}
        for err in exc.errors()
    ]
    logger.warning("Rejected telemetry payload on %s: %s", request.url.path, detail)
    return JSONResponse(status_code=422, content={"error": "Invalid telemetry payload", "detail": detail})


@asynccontextmanager
async def _lifespan(app: FastAPI):
    setup_logging()
    generator = app.state.diagnostic_generator
    logger.info("GenTwin backend ready (model=%s)", getattr(generator, "model", type(generator).__name__))
    yield


def create_app(
    store: Optional[TelemetryStore] = None,
    generator: Optional[DiagnosticGenerator] = None,
) -> FastAPI:
    app = FastAPI(
        title="GenTwin Backend",
        version="0.1.0",
        description="Edge vibration telemetry relay with Gemini maintenance diagnostics.",
        lifespan=_lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    app.state.telemetry_store = store or TelemetryStore()
    app.state.diagnostic_generator = generator or GeminiDiagnosticGenerator()

    app.include_router(routes_health.router)
    app.include_router(routes_telemetry.router, prefix="/api/telemetry", tags=["telemetry"])
    return app


app = create_app()


def run() -> None:
    # .env must be loaded before the app reads its settings
    load_dotenv()
    setup_logging()
    host = env_str("HOST", "0.0.0.0")
    port = env_int("PORT", 3000)
    logger.info("GenTwin backend running on http://%s:%d", host, port)
    uvicorn.run(create_app(), host=host, port=port)


# Run:
#   python -m gentwin.main
#   uvicorn gentwin.main:app --port 3000 --env-file .env
if __name__ == "__main__":
    run()
