from gentwin.config import (
    DEFAULT_MODEL_ID,
    ai_timeout_s,
    allowed_origins,
    env_float,
    env_int,
    gemini_api_key,
    gemini_model_id,
)


def test_env_helpers_fall_back_on_garbage(monkeypatch):
    monkeypatch.setenv("GENTWIN_TEST_INT", "abc")
    monkeypatch.setenv("GENTWIN_TEST_FLOAT", "1.5x")

    assert env_int("GENTWIN_TEST_INT", 3000) == 3000
    assert env_float("GENTWIN_TEST_FLOAT", 30.0) == 30.0


def test_gemini_settings(monkeypatch):
    monkeypatch.delenv("GEMINI_MODEL_ID", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "google-key")

    assert gemini_model_id() == DEFAULT_MODEL_ID == "gemini-2.5-flash"
    assert gemini_api_key() == "google-key"

    monkeypatch.setenv("GEMINI_API_KEY", "gemini-key")
    assert gemini_api_key() == "gemini-key"


def test_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("GENTWIN_AI_TIMEOUT_S", "-1")
    assert ai_timeout_s() == 30.0
    monkeypatch.setenv("GENTWIN_AI_TIMEOUT_S", "4.5")
    assert ai_timeout_s() == 4.5


def test_allowed_origins(monkeypatch):
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    assert allowed_origins() == ["*"]
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test,")
    assert allowed_origins() == ["http://a.test", "http://b.test"]
