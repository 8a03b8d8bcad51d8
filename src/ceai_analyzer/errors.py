from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """
    Failure categories surfaced to the user.

    TRANSIENT_OVERLOAD never reaches the user directly: it is retried and
    escalates to RETRY_EXHAUSTED once the attempts run out.
    """
    INVALID_FILE_TYPE = "invalid_file_type"
    UNREADABLE_FILE = "unreadable_file"
    EMPTY_INPUT = "empty_input"
    CONTENT = "content"
    TRANSIENT_OVERLOAD = "transient_overload"
    FATAL = "fatal"
    RETRY_EXHAUSTED = "retry_exhausted"
    BUSY = "busy"


INVALID_FILE_TYPE_MESSAGE = "Invalid file type. Please upload a CSV file."
EMPTY_FILE_MESSAGE = "Error reading file. Please ensure it's a valid text-based CSV."
UNREADABLE_FILE_MESSAGE = "Failed to read file. Please try again."
NO_FILE_MESSAGE = "No CSV data to analyze. Please upload a file first."
SINGLE_FILE_MESSAGE = "Please upload a single CSV file."

EMPTY_INPUT_MESSAGE = "CSV data is empty. Please upload a valid CSV file."
NO_SUMMARY_MESSAGE = "Analysis returned no summary. Please check the data or try again."
INVALID_API_KEY_MESSAGE = "Analysis failed: Invalid API key configuration."
UNEXPECTED_ERROR_MESSAGE = "Failed to analyze data due to an unexpected error."
BUSY_MESSAGE = "An analysis is already in progress. Please wait for it to finish."


def retry_exhausted_message(attempts: int) -> str:
    noun = "attempt" if attempts == 1 else "attempts"
    return (
        f"Analysis failed after {attempts} {noun}: "
        "The model is currently overloaded. Please try again later."
    )


class IntakeError(Exception):
    """Raised when an uploaded file cannot be accepted. `str(exc)` is user-facing."""

    kind: ErrorKind = ErrorKind.UNREADABLE_FILE


class InvalidFileTypeError(IntakeError):
    kind = ErrorKind.INVALID_FILE_TYPE

    def __init__(self, message: str = INVALID_FILE_TYPE_MESSAGE) -> None:
        super().__init__(message)


class EmptyFileError(IntakeError):
    def __init__(self, message: str = EMPTY_FILE_MESSAGE) -> None:
        super().__init__(message)


class UnreadableFileError(IntakeError):
    def __init__(self, message: str = UNREADABLE_FILE_MESSAGE) -> None:
        super().__init__(message)


class LLMConfigError(RuntimeError):
    """Raised when the model settings are missing or invalid."""


class ModelResponseError(RuntimeError):
    """Raised when the model reply is not the JSON object we asked for."""


class InvalidTransition(RuntimeError):
    """Raised when a UI event does not apply to the current display state."""
