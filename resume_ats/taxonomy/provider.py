from __future__ import annotations

from typing import Protocol


class TaxonomyProvider(Protocol):
    @property
    def technical_skills(self) -> tuple[str, ...]: ...

    @property
    def soft_skills(self) -> tuple[str, ...]: ...

    @property
    def tools(self) -> tuple[str, ...]: ...

    def variants_for(self, keyword: str) -> tuple[str, ...]:
        """Return known abbreviations/variants of keyword, forward entries first."""
