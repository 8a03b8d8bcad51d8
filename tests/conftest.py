from __future__ import annotations

from typing import Callable, Iterable, Union

import pytest

from ceai_analyzer.models import AnalyzeInput, AnalyzeOutput

Step = Union[AnalyzeOutput, BaseException]


class ScriptedModel:
    """Model call that replays one scripted outcome per attempt."""

    def __init__(self, steps: Iterable[Step]) -> None:
        self.steps = list(steps)
        self.calls: list[AnalyzeInput] = []

    def __call__(self, data: AnalyzeInput) -> AnalyzeOutput:
        self.calls.append(data)
        step = self.steps[len(self.calls) - 1]
        if isinstance(step, BaseException):
            raise step
        return step


class RecordingSleep:
    def __init__(self) -> None:
        self.waits: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.waits.append(seconds)


@pytest.fixture
def scripted() -> Callable[..., ScriptedModel]:
    return lambda *steps: ScriptedModel(steps)


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture(autouse=True)
def _clean_llm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "OPENAI_API_KEY",
        "AI_INTEGRATIONS_OPENAI_API_KEY",
        "OPENAI_BASE_URL",
        "AI_INTEGRATIONS_OPENAI_BASE_URL",
        "CEAI_ANALYZER_LLM_MODEL",
        "CEAI_ANALYZER_TEMPERATURE",
    ):
        monkeypatch.delenv(name, raising=False)
