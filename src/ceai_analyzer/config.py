from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field

from .errors import LLMConfigError

DEFAULT_MODEL = "gpt-4o-mini"


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


class Settings(BaseModel):
    """
    Model connection settings.

    api_key: OPENAI_API_KEY, falling back to AI_INTEGRATIONS_OPENAI_API_KEY
    base_url: OPENAI_BASE_URL, falling back to AI_INTEGRATIONS_OPENAI_BASE_URL
    model: CEAI_ANALYZER_LLM_MODEL
    temperature: CEAI_ANALYZER_TEMPERATURE
    """
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: str = DEFAULT_MODEL
    temperature: float = Field(default=0.2, ge=0.0, le=2.0)

    @classmethod
    def from_env(cls, **overrides) -> "Settings":
        values = {
            "api_key": _first_env("OPENAI_API_KEY", "AI_INTEGRATIONS_OPENAI_API_KEY"),
            "base_url": _first_env("OPENAI_BASE_URL", "AI_INTEGRATIONS_OPENAI_BASE_URL"),
            "model": os.environ.get("CEAI_ANALYZER_LLM_MODEL") or DEFAULT_MODEL,
        }
        raw_temperature = os.environ.get("CEAI_ANALYZER_TEMPERATURE")
        if raw_temperature:
            try:
                values["temperature"] = float(raw_temperature)
            except ValueError as exc:
                raise LLMConfigError(
                    f"CEAI_ANALYZER_TEMPERATURE must be a number, got {raw_temperature!r}."
                ) from exc
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def require_api_key(self) -> str:
        if not self.api_key:
            raise LLMConfigError("Missing OPENAI_API_KEY.")
        return self.api_key
