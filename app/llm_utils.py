"""Model settings for the Streamlit page.

API Key Priority:
1. User-provided OPENAI_API_KEY from st.secrets or os.environ (gives you control over costs)
2. Replit's AI_INTEGRATIONS_OPENAI_API_KEY (fallback)
"""
import streamlit as st
from functools import partial
from typing import Optional

from ceai_analyzer import AnalysisOrchestrator
from ceai_analyzer.config import Settings
from ceai_analyzer.flow import analyze_ceai_survey_data


def _secret(name: str) -> Optional[str]:
    try:
        if name in st.secrets:
            return st.secrets[name]
    except FileNotFoundError:
        # no secrets.toml configured
        return None
    return None


def get_openai_api_key() -> Optional[str]:
    """
    Get OpenAI API key with user-provided key taking priority.

    Priority order:
    1. st.secrets["OPENAI_API_KEY"] - user-configured secret
    2. os.environ["OPENAI_API_KEY"] - environment variable
    3. os.environ["AI_INTEGRATIONS_OPENAI_API_KEY"] - Replit integration (fallback)

    Only step 1 is resolved here; Settings.from_env covers the environment.
    """
    return _secret("OPENAI_API_KEY")


def get_openai_base_url() -> Optional[str]:
    """Get OpenAI base URL if configured in secrets; env is handled by Settings."""
    return _secret("OPENAI_BASE_URL")


def load_settings() -> Settings:
    return Settings.from_env(
        api_key=get_openai_api_key(),
        base_url=get_openai_base_url(),
        model=_secret("CEAI_ANALYZER_LLM_MODEL"),
    )


def get_orchestrator() -> AnalysisOrchestrator:
    """One orchestrator per browser session, so its submission lock is per user."""
    if "orchestrator" not in st.session_state:
        settings = load_settings()
        st.session_state["orchestrator"] = AnalysisOrchestrator(
            partial(analyze_ceai_survey_data, settings=settings)
        )
    return st.session_state["orchestrator"]
