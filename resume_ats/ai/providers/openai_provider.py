from __future__ import annotations

import logging

from openai import OpenAI

from resume_ats.ai.config import AIConfig
from resume_ats.ai.types import AICompletionError

logger = logging.getLogger(__name__)


class OpenAIProvider:
    def __init__(self, config: AIConfig, client: OpenAI | None = None):
        if client is None and not config.api_key:
            raise AICompletionError("OPENAI_API_KEY is missing", code="ai_disabled")
        self._config = config
        self._client = client or OpenAI(
            api_key=config.api_key,
            base_url=config.base_url or None,
            timeout=config.timeout_s,
            max_retries=config.max_retries,
        )

    @property
    def model(self) -> str:
        return self._config.model

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._config.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
                response_format={"type": "json_object"},
            )
        except Exception as exc:  # noqa: BLE001 - surfaced as a typed error
            logger.warning(
                "ai_completion_failed model=%s prompt_len=%s: %s",
                self._config.model,
                len(user_prompt),
                exc,
            )
            raise AICompletionError(f"AI completion failed: {exc}", code="ai_exception") from exc

        content = response.choices[0].message.content if response.choices else ""
        if not content:
            logger.warning("ai_completion_empty model=%s", self._config.model)
            raise AICompletionError("AI completion returned an empty response.", code="ai_empty")
        return str(content)
