from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

import openai

from .errors import (
    BUSY_MESSAGE,
    EMPTY_INPUT_MESSAGE,
    INVALID_API_KEY_MESSAGE,
    NO_SUMMARY_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    ErrorKind,
    retry_exhausted_message,
)
from .flow import analyze_ceai_survey_data
from .models import AnalysisResult, AnalyzeInput, AnalyzeOutput, RetryPolicy

logger = logging.getLogger("ceai_analyzer.orchestrator")

ModelCall = Callable[[AnalyzeInput], AnalyzeOutput]
Sleep = Callable[[float], None]

OVERLOAD_SIGNATURES = ("503 Service Unavailable", "model is overloaded")
INVALID_KEY_SIGNATURE = "API key not valid"


def _message(exc: BaseException) -> str:
    return str(getattr(exc, "message", None) or exc or "")


def classify_error(exc: BaseException) -> ErrorKind:
    """TRANSIENT_OVERLOAD for the overload signature, FATAL for everything else."""
    if isinstance(exc, openai.APIStatusError) and exc.status_code == 503:
        return ErrorKind.TRANSIENT_OVERLOAD
    msg = _message(exc)
    if any(sig in msg for sig in OVERLOAD_SIGNATURES):
        return ErrorKind.TRANSIENT_OVERLOAD
    return ErrorKind.FATAL


def fatal_error_message(exc: BaseException) -> str:
    msg = _message(exc)
    if isinstance(exc, openai.AuthenticationError) or INVALID_KEY_SIGNATURE in msg:
        return INVALID_API_KEY_MESSAGE
    if msg:
        return f"Analysis failed: {msg}"
    return UNEXPECTED_ERROR_MESSAGE


class AnalysisOrchestrator:
    """
    Runs one analysis request against the model with bounded overload retry.

    Per submission:
      idle -> requesting -> success | content error | fatal error
                         -> overload (attempt n) -> requesting again
                         -> overload on the last attempt -> exhausted error

    An instance admits one request at a time; a call that arrives while
    another is in flight gets a BUSY result without contacting the model.
    Nothing is raised: every outcome is an AnalysisResult.
    """

    def __init__(
        self,
        model_call: Optional[ModelCall] = None,
        *,
        policy: Optional[RetryPolicy] = None,
        sleep: Sleep = time.sleep,
    ) -> None:
        self.model_call = model_call or analyze_ceai_survey_data
        self.policy = policy or RetryPolicy()
        self.sleep = sleep
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def analyze(self, csv_text: str) -> AnalysisResult:
        if not csv_text:
            return AnalysisResult.failure(EMPTY_INPUT_MESSAGE, ErrorKind.EMPTY_INPUT)

        if not self._lock.acquire(blocking=False):
            logger.warning("Rejected analysis request: another request is in flight")
            return AnalysisResult.failure(BUSY_MESSAGE, ErrorKind.BUSY)
        try:
            return self._run(AnalyzeInput(csv_data=csv_text))
        finally:
            self._lock.release()

    def _run(self, data: AnalyzeInput) -> AnalysisResult:
        max_attempts = self.policy.max_attempts
        for attempt in range(1, max_attempts + 1):
            try:
                output = self.model_call(data)
            except Exception as exc:
                logger.error("Error analyzing data (attempt %d/%d): %s", attempt, max_attempts, exc)
                if classify_error(exc) is ErrorKind.FATAL:
                    return AnalysisResult.failure(fatal_error_message(exc), ErrorKind.FATAL, attempts=attempt)
                if attempt == max_attempts:
                    return AnalysisResult.failure(
                        retry_exhausted_message(max_attempts), ErrorKind.RETRY_EXHAUSTED, attempts=attempt
                    )
                logger.info(
                    "Model overloaded. Retrying in %.1f seconds... (Attempt %d/%d)",
                    self.policy.delay_seconds,
                    attempt,
                    max_attempts,
                )
                self.sleep(self.policy.delay_seconds)
                continue

            if output is None or not output.summary:
                return AnalysisResult.failure(NO_SUMMARY_MESSAGE, ErrorKind.CONTENT, attempts=attempt)
            return AnalysisResult.success(output.summary, attempts=attempt)

        # range() is never empty: RetryPolicy enforces max_attempts >= 1
        raise AssertionError("unreachable")


_default: Optional[AnalysisOrchestrator] = None
_default_lock = threading.Lock()


def default_orchestrator() -> AnalysisOrchestrator:
    """The process-wide orchestrator; built once even under concurrent first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = AnalysisOrchestrator()
        return _default


def handle_file_upload_and_analyze(csv_data: str) -> AnalysisResult:
    """Analyze with the process-wide orchestrator (default policy, env settings)."""
    return default_orchestrator().analyze(csv_data)
