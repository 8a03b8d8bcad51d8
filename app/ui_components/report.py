"""Report and error display."""
import html

import streamlit as st


def render_error(message: str) -> None:
    with st.container(border=True):
        st.subheader("⚠️ Analysis Error")
        st.error(message)


def render_report(summary: str) -> None:
    """
    Render the model's plain text report.

    The report is shown as preformatted text, never as Markdown, so the
    uppercase headings and per-department lines keep their layout.
    """
    with st.container(border=True):
        st.subheader("✅ Analysis Report")
        st.caption("Below is the summary generated from your CEAI survey data.")
        st.markdown(
            f"""
<pre style="white-space: pre-wrap; font-size: 0.9em; line-height: 1.6; padding: 12px; border-radius: 6px; background: rgba(0,0,0,0.03);">{html.escape(summary)}</pre>
            """,
            unsafe_allow_html=True,
        )
        st.download_button(
            label="Download Report",
            data=summary,
            file_name="ceai_report.txt",
            mime="text/plain",
        )
        st.caption("This report was generated by an AI model. Please review carefully.")
