from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .provider import TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    """Closed skill vocabularies and the abbreviation table, read once from JSON.

    Vocabulary order is preserved from the file because the job-description
    parser reports hits in vocabulary order.
    """

    def __init__(self, vocabulary_path: str | Path | None = None) -> None:
        path = Path(vocabulary_path) if vocabulary_path else Path(__file__).with_name("vocabulary.json")
        raw = self._load_vocabulary(path)
        self._technical = self._terms(raw, "technical")
        self._soft = self._terms(raw, "soft")
        self._tools = self._terms(raw, "tools")
        self._variants: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {
                str(key).strip().lower(): tuple(str(item).strip().lower() for item in values)
                for key, values in (raw.get("variants") or {}).items()
            }
        )

    @staticmethod
    def _load_vocabulary(path: Path) -> dict[str, Any]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid vocabulary file '{path}': expected a top-level mapping.")
        return raw

    @staticmethod
    def _terms(raw: dict[str, Any], key: str) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for item in raw.get(key) or []:
            term = str(item).strip().lower()
            if term:
                seen.setdefault(term, None)
        return tuple(seen)

    @property
    def technical_skills(self) -> tuple[str, ...]:
        return self._technical

    @property
    def soft_skills(self) -> tuple[str, ...]:
        return self._soft

    @property
    def tools(self) -> tuple[str, ...]:
        return self._tools

    def variants_for(self, keyword: str) -> tuple[str, ...]:
        normalized = keyword.strip().lower()
        variants = list(self._variants.get(normalized, ()))
        for full, abbreviations in self._variants.items():
            if normalized in abbreviations:
                variants.append(full)
        return tuple(variants)
