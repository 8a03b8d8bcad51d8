"""CEAI Survey Analyzer - Upload UI"""
import sys
from pathlib import Path

import streamlit as st

from ceai_analyzer.errors import INVALID_FILE_TYPE_MESSAGE, IntakeError, InvalidTransition
from ceai_analyzer.intake import accept_file, is_csv_file
from ceai_analyzer import state as ui

st.set_page_config(
    page_title="CEAI Survey Analyzer",
    page_icon="📊",
    layout="centered"
)

APP_DIR = Path(__file__).parent
if str(APP_DIR) not in sys.path:
    sys.path.insert(0, str(APP_DIR))

from llm_utils import get_orchestrator  # noqa: E402
from ui_components import render_error, render_file_card, render_page_header, render_report  # noqa: E402


def get_state() -> ui.UiState:
    if "ui_state" not in st.session_state:
        st.session_state["ui_state"] = ui.Empty()
    return st.session_state["ui_state"]


def set_state(new_state: ui.UiState) -> None:
    st.session_state["ui_state"] = new_state


def uploader_key() -> str:
    return f"csv_upload_{st.session_state.get('uploader_generation', 0)}"


def clear_file():
    """Remove button: drop the file, the report and any error."""
    set_state(ui.clear())
    st.session_state["seen_file_id"] = None
    # a fresh key empties the file_uploader widget as well
    st.session_state["uploader_generation"] = st.session_state.get("uploader_generation", 0) + 1


def submit_analysis():
    try:
        set_state(ui.start_analysis(get_state()))
    except InvalidTransition as e:
        set_state(ui.Failed(error=str(e), file=ui.held_file(get_state())))


def handle_upload(uploaded) -> None:
    """Process a newly selected file: validate, read with progress, hold it."""
    state = get_state()
    if not is_csv_file(uploaded.name, uploaded.type):
        set_state(ui.file_rejected(state, INVALID_FILE_TYPE_MESSAGE))
        return

    state = ui.begin_reading(uploaded.name, uploaded.size)
    set_state(state)
    progress_slot = st.empty()

    def on_progress(pct: int) -> None:
        set_state(ui.reading_progress(get_state(), pct))
        progress_slot.progress(pct, text=f"Reading {uploaded.name}... {pct}%")

    uploaded.seek(0)
    try:
        file = accept_file(uploaded.name, uploaded.type, uploaded, uploaded.size, on_progress=on_progress)
    except IntakeError as e:
        set_state(ui.read_failed(str(e)))
    else:
        set_state(ui.file_ready(file))
    finally:
        progress_slot.empty()


def sync_uploader(uploaded_files) -> None:
    """Map file_uploader changes onto display-state transitions."""
    uploaded_files = list(uploaded_files or [])
    seen = st.session_state.get("seen_file_id")
    if not uploaded_files:
        if seen is not None:
            # file removed with the uploader's own "x"
            clear_file()
        return
    selection_id = tuple(f.file_id for f in uploaded_files)
    if selection_id == seen:
        return
    st.session_state["seen_file_id"] = selection_id
    state = get_state()
    try:
        ui.files_dropped(state, len(uploaded_files))
    except InvalidTransition as e:
        set_state(ui.file_rejected(state, str(e)))
        return
    handle_upload(uploaded_files[0])


def main():
    render_page_header()

    analyzing = isinstance(get_state(), ui.Analyzing)
    uploaded_files = st.file_uploader(
        "Drag & drop a CSV file here, or click to select file",
        type=["csv"],
        accept_multiple_files=True,
        key=uploader_key(),
        help=".CSV files only",
        disabled=analyzing,
    )
    if not analyzing:
        sync_uploader(uploaded_files)

    state = get_state()
    render_file_card(
        state,
        on_remove=None if isinstance(state, ui.Analyzing) else clear_file,
        show_ready=isinstance(state, ui.Ready),
    )

    if ui.can_submit(state) or isinstance(state, ui.Analyzing):
        st.button(
            "Analyze Data",
            type="primary",
            use_container_width=True,
            disabled=isinstance(state, ui.Analyzing),
            on_click=submit_analysis,
        )

    if isinstance(state, ui.Analyzing):
        with st.spinner("Analyzing data... This may take a few moments."):
            result = get_orchestrator().analyze(state.file.content)
        set_state(ui.finish_analysis(state, result))
        st.rerun()
    elif isinstance(state, ui.Failed):
        render_error(state.error)
    elif isinstance(state, ui.Succeeded):
        render_report(state.summary)


if __name__ == "__main__":
    main()
