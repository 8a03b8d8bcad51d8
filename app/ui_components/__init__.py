"""UI components for the CEAI Survey Analyzer."""
from .header import render_page_header
from .file_card import render_file_card
from .report import render_error, render_report

__all__ = [
    "render_page_header",
    "render_file_card",
    "render_error",
    "render_report",
]
