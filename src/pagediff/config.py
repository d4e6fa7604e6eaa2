"""Diff parameters and named presets."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Dict, Iterable, Mapping, Optional

from .core.diff import DEFAULT_CELL_BUDGET
from .errors import InvalidParamsError

CELL_BUDGET_ENV = "PAGEDIFF_CELL_BUDGET"
SEARCH_CONTEXT_ENV = "PAGEDIFF_SEARCH_CONTEXT"


@dataclass(frozen=True)
class DiffParams:
    """Parameters driving the page diff and search helpers."""

    cell_budget: int = DEFAULT_CELL_BUDGET
    search_context_chars: int = 40

    def to_dict(self) -> Dict[str, int]:
        return {
            "cell_budget": self.cell_budget,
            "search_context_chars": self.search_context_chars,
        }

    def copy(self, **overrides: int) -> "DiffParams":
        return replace(self, **overrides).validate()

    def validate(self) -> "DiffParams":
        if self.cell_budget < 1:
            raise InvalidParamsError(f"cell_budget must be positive, got {self.cell_budget}")
        if self.search_context_chars < 0:
            raise InvalidParamsError(
                f"search_context_chars must not be negative, got {self.search_context_chars}"
            )
        return self

    @classmethod
    def from_env(cls, base: Optional["DiffParams"] = None) -> "DiffParams":
        """Apply ``PAGEDIFF_*`` environment overrides on top of ``base``."""

        params = base or cls()
        overrides = {}
        for field_name, env_name in (
            ("cell_budget", CELL_BUDGET_ENV),
            ("search_context_chars", SEARCH_CONTEXT_ENV),
        ):
            value = os.getenv(env_name)
            if value is None or not value.strip():
                continue
            try:
                overrides[field_name] = int(value)
            except ValueError as exc:
                raise InvalidParamsError(f"{env_name} must be an integer, got {value!r}") from exc
        return params.copy(**overrides)


@dataclass(frozen=True)
class Preset:
    name: str
    description: str
    params: DiffParams

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "params": self.params.to_dict(),
        }


PRESETS: Mapping[str, Preset] = {
    "exact": Preset(
        name="exact",
        description="Token diff on larger pages before falling back to the character diff.",
        params=DiffParams(cell_budget=16_000_000),
    ),
    "default": Preset(
        name="default",
        description="Balanced table budget suitable for typical text pages.",
        params=DiffParams(),
    ),
    "fast": Preset(
        name="fast",
        description="Small table budget; dense pages use the character diff.",
        params=DiffParams(cell_budget=250_000),
    ),
}


def get_preset(name: str) -> Preset:
    key = name.lower()
    if key not in PRESETS:
        raise KeyError(f"Unknown preset '{name}'. Available: {', '.join(sorted(PRESETS))}")
    return PRESETS[key]


def iter_presets() -> Iterable[Preset]:
    return PRESETS.values()
