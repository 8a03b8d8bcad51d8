"""Card for the currently held CSV file."""
import streamlit as st

from ceai_analyzer.models import format_size_kb
from ceai_analyzer.state import Reading, UiState, held_file, progress_of


def render_file_card(state: UiState, on_remove=None, show_ready: bool = False) -> None:
    """
    Show name, size and read progress for the held file.

    Args:
        state: current display state
        on_remove: callback for the remove button; no button when None
        show_ready: show the "File ready for analysis." note
    """
    file = held_file(state)
    if isinstance(state, Reading):
        name, size = state.file_name, format_size_kb(state.file_size)
    elif file is not None:
        name, size = file.name, file.size_kb
    else:
        return

    with st.container(border=True):
        col1, col2 = st.columns([6, 1])
        with col1:
            st.markdown(f"**{name}**")
            st.caption(size)
        with col2:
            if on_remove is not None:
                st.button("✕", key="remove_file", help="Remove file", on_click=on_remove)

        progress = progress_of(state)
        if 0 < progress < 100:
            st.progress(progress, text=f"Reading file... {progress}%")
        if show_ready and progress == 100:
            st.success("File ready for analysis.")
