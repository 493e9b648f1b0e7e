from __future__ import annotations

import os
from typing import Optional

DEFAULT_MODEL_ID = "gemini-2.5-flash"


def env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        return int(val.strip())
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        return float(val.strip())
    except ValueError:
        return default


def env_str(name: str, default: str) -> str:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return val.strip()


def gemini_api_key() -> Optional[str]:
    return os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")


def gemini_model_id() -> str:
    return env_str("GEMINI_MODEL_ID", DEFAULT_MODEL_ID)


def ai_timeout_s() -> float:
    # Non-positive values would make every call time out
    timeout = env_float("GENTWIN_AI_TIMEOUT_S", 30.0)
    return timeout if timeout > 0 else 30.0


def allowed_origins() -> list[str]:
    raw = env_str("ALLOWED_ORIGINS", "*")
    if raw == "*":
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]
