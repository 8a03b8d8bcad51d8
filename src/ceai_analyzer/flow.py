from __future__ import annotations

import json
import logging
import time
from typing import Any, Optional

from openai import OpenAI
from pydantic import ValidationError

from .config import Settings
from .errors import ModelResponseError
from .models import AnalyzeInput, AnalyzeOutput
from .prompt import SYSTEM_MESSAGE, render_prompt

logger = logging.getLogger("ceai_analyzer.flow")


def build_client(settings: Settings) -> OpenAI:
    """
    OpenAI client for the analysis flow.

    SDK-level retries are off: overload handling belongs to the orchestrator,
    which counts attempts itself.
    """
    return OpenAI(
        api_key=settings.require_api_key(),
        base_url=settings.base_url,
        max_retries=0,
    )


def _parse_output(text: str) -> AnalyzeOutput:
    if not text.strip():
        return AnalyzeOutput()
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ModelResponseError(f"Model returned invalid JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise ModelResponseError("Model returned JSON that is not an object.")
    try:
        return AnalyzeOutput.model_validate(obj)
    except ValidationError as exc:
        raise ModelResponseError(f"Model returned an unexpected shape: {exc}") from exc


def analyze_ceai_survey_data(
    data: AnalyzeInput,
    *,
    client: Optional[Any] = None,
    settings: Optional[Settings] = None,
) -> AnalyzeOutput:
    """
    Ask the model for a CEAI report on `data.csv_data`.

    A reply without a summary is returned as-is (summary None or ""); deciding
    what that means is up to the caller. SDK exceptions propagate unchanged.
    """
    settings = settings or Settings.from_env()
    if client is None:
        client = build_client(settings)

    start = time.perf_counter()
    resp = client.chat.completions.create(
        model=settings.model,
        messages=[
            {"role": "system", "content": SYSTEM_MESSAGE},
            {"role": "user", "content": render_prompt(data.csv_data)},
        ],
        temperature=settings.temperature,
        response_format={"type": "json_object"},
    )
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("Model call completed model=%s ms=%.1f", settings.model, elapsed_ms)

    text = resp.choices[0].message.content or ""
    return _parse_output(text)
