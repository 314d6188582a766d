from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    rate_limit: str
    ai_rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    min_job_description_chars: int
    max_input_chars: int
    max_upload_bytes: int
    ai_enabled: bool
    ai_provider: str
    ai_model: str
    openai_api_key: str | None
    openai_base_url: str | None
    ai_timeout_s: float
    ai_max_retries: int


def load_settings() -> Settings:
    return Settings(
        rate_limit=_get_env("RATE_LIMIT", "60/minute") or "60/minute",
        ai_rate_limit=_get_env("AI_RATE_LIMIT", "10/minute") or "10/minute",
        rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
        log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        sentry_dsn=_get_env("SENTRY_DSN"),
        min_job_description_chars=_get_env_int("MIN_JOB_DESCRIPTION_CHARS", 50),
        max_input_chars=_get_env_int("MAX_INPUT_CHARS", 50_000),
        max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
        ai_enabled=_get_env_bool("AI_ENABLED", False),
        ai_provider=(_get_env("AI_PROVIDER", "openai") or "openai").strip().lower(),
        ai_model=(_get_env("AI_MODEL", "gpt-4o-mini") or "gpt-4o-mini").strip(),
        openai_api_key=_get_env("OPENAI_API_KEY"),
        openai_base_url=_get_env("OPENAI_BASE_URL"),
        ai_timeout_s=_get_env_float("AI_TIMEOUT_S", 30.0),
        ai_max_retries=_get_env_int("AI_MAX_RETRIES", 2),
    )


def validate_settings(candidate: Settings) -> Settings:
    if candidate.min_job_description_chars < 1:
        raise RuntimeError("MIN_JOB_DESCRIPTION_CHARS must be a positive integer.")
    if candidate.max_input_chars < candidate.min_job_description_chars:
        raise RuntimeError("MAX_INPUT_CHARS must not be smaller than MIN_JOB_DESCRIPTION_CHARS.")
    if candidate.max_upload_bytes < 1:
        raise RuntimeError("MAX_UPLOAD_BYTES must be a positive integer.")
    if candidate.ai_enabled and candidate.ai_provider == "openai" and not candidate.openai_api_key:
        raise RuntimeError("AI_ENABLED=true with AI_PROVIDER=openai requires OPENAI_API_KEY to be set.")
    return candidate


settings = validate_settings(load_settings())
