"""Page header shared by the upload page."""
import streamlit as st


def render_page_header():
    """Title and one-line explanation of what the page does."""
    st.title("CEAI Survey Analyzer")
    st.caption(
        "Upload your Corporate Entrepreneurship Assessment Instrument (CEAI) survey "
        "data in CSV format to receive an AI-powered analysis."
    )
    st.markdown("---")
