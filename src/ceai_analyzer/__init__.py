"""Upload CEAI survey CSV data and get back a model-written plain text report."""

from .models import AnalysisResult, AnalyzeInput, AnalyzeOutput, RetryPolicy, UploadedFile
from .orchestrator import AnalysisOrchestrator, handle_file_upload_and_analyze

__all__ = [
    "AnalysisOrchestrator",
    "AnalysisResult",
    "AnalyzeInput",
    "AnalyzeOutput",
    "RetryPolicy",
    "UploadedFile",
    "handle_file_upload_and_analyze",
]
