from __future__ import annotations

from dataclasses import dataclass

from resume_ats.core.config.settings import Settings, settings as default_settings


@dataclass(frozen=True)
class AIConfig:
    enabled: bool
    provider: str
    model: str
    api_key: str | None = None
    base_url: str | None = None
    timeout_s: float = 30.0
    max_retries: int = 2
    temperature: float = 0.3
    max_tokens: int = 2048


def _looks_like_placeholder(value: str) -> bool:
    lower = value.strip().lower()
    return lower.startswith("your_") or lower.startswith("replace_") or lower in {"changeme", "todo"}


def load_ai_config(source: Settings | None = None) -> AIConfig:
    current = source or default_settings
    api_key = (current.openai_api_key or "").strip() or None
    enabled = current.ai_enabled and not (api_key and _looks_like_placeholder(api_key))
    return AIConfig(
        enabled=enabled,
        provider=current.ai_provider,
        model=current.ai_model,
        api_key=api_key,
        base_url=current.openai_base_url,
        timeout_s=current.ai_timeout_s,
        max_retries=current.ai_max_retries,
    )
