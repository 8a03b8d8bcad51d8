"""Display state for the upload page.

The page shows exactly one of: no file, a file being read, a file ready to
submit, an analysis in flight, a report, or an error. Each is a frozen
dataclass and the session holds a single `UiState` value, so two of them can
never be active at once.

Transitions are plain functions so they can be tested without Streamlit.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union

from .errors import NO_FILE_MESSAGE, SINGLE_FILE_MESSAGE, InvalidTransition
from .models import AnalysisResult, UploadedFile


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Reading:
    file_name: str
    file_size: int
    progress: int = 0


@dataclass(frozen=True)
class Ready:
    file: UploadedFile


@dataclass(frozen=True)
class Analyzing:
    file: UploadedFile


@dataclass(frozen=True)
class Succeeded:
    file: UploadedFile
    summary: str


@dataclass(frozen=True)
class Failed:
    error: str
    file: Optional[UploadedFile] = None


UiState = Union[Empty, Reading, Ready, Analyzing, Succeeded, Failed]


def held_file(state: UiState) -> Optional[UploadedFile]:
    if isinstance(state, (Ready, Analyzing, Succeeded, Failed)):
        return state.file
    return None


def can_submit(state: UiState) -> bool:
    return isinstance(state, Ready) or (isinstance(state, Failed) and state.file is not None)


def progress_of(state: UiState) -> int:
    if isinstance(state, Reading):
        return state.progress
    return 100 if held_file(state) is not None else 0


def clear() -> UiState:
    return Empty()


def files_dropped(state: UiState, count: int) -> UiState:
    """
    Gate for a drop or selection event.

    No files: everything stays as is. One file: the caller goes on to read
    it. More than one is refused.
    """
    if count < 0:
        raise ValueError("count must be >= 0")
    if count > 1:
        raise InvalidTransition(SINGLE_FILE_MESSAGE)
    return state


def begin_reading(name: str, size: int) -> UiState:
    # Any earlier report or error belongs to the previous attempt.
    return Reading(file_name=name, file_size=size, progress=0)


def reading_progress(state: UiState, progress: int) -> UiState:
    if not isinstance(state, Reading):
        raise InvalidTransition(f"progress update while {type(state).__name__}")
    return replace(state, progress=max(0, min(100, int(progress))))


def file_ready(file: UploadedFile) -> UiState:
    return Ready(file=file)


def file_rejected(state: UiState, error: str) -> UiState:
    """Wrong file type: show the error, keep whatever file was already held."""
    return Failed(error=error, file=held_file(state))


def read_failed(error: str) -> UiState:
    return Failed(error=error, file=None)


def start_analysis(state: UiState) -> UiState:
    if isinstance(state, Analyzing):
        raise InvalidTransition("An analysis is already in progress.")
    if not can_submit(state):
        raise InvalidTransition(NO_FILE_MESSAGE)
    file = held_file(state)
    if file is None:
        raise InvalidTransition(NO_FILE_MESSAGE)
    return Analyzing(file=file)


def finish_analysis(state: UiState, result: AnalysisResult) -> UiState:
    if not isinstance(state, Analyzing):
        raise InvalidTransition(f"analysis finished while {type(state).__name__}")
    if result.summary is not None:
        return Succeeded(file=state.file, summary=result.summary)
    return Failed(error=result.error or "", file=state.file)
