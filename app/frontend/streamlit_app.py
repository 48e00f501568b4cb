"""
Main Streamlit application for the YouTube Tutorial Generator.
"""

import streamlit as st
from typing import Dict, Any, Optional
from dotenv import load_dotenv
from app.config import config
from app.frontend.api_client import ApiClient
from app.frontend.components import (
    header, sidebar, youtube_input, progress_display, update_progress,
    clear_progress, display_tutorial, display_error, display_success,
)


load_dotenv()


def init_session_state():
    """Initialize session state variables."""
    api_url = st.session_state.get("api_url", config.PUBLIC_URL)
    client = st.session_state.get("api_client")
    if client is None or client.base_url != api_url:
        st.session_state.api_client = ApiClient(api_url)

    if "tutorial" not in st.session_state:
        st.session_state.tutorial = None


def run_generation(url: str, model: Optional[str] = None) -> Dict[str, Any]:
    """
    Generate a tutorial while drawing streamed progress.

    Args:
        url: YouTube URL
        model: Optional Gemini model override

    Returns:
        Tutorial dictionary or a dictionary with an "error" key
    """
    client = st.session_state.api_client
    bar_slot, label_slot = progress_display()
    update_progress(bar_slot, label_slot, "Fetching video details...", 0)

    try:
        for event in client.stream_tutorial(url, model):
            if event["type"] == "progress":
                update_progress(bar_slot, label_slot, event["label"], event["percent"])
            elif event["type"] == "result":
                return event["tutorial"]
            elif event["type"] == "error":
                return {"error": event["message"]}
        return {"error": "The server closed the connection before the tutorial was complete"}
    except Exception as e:
        return {"error": f"Error generating tutorial: {str(e)}"}
    finally:
        clear_progress(bar_slot, label_slot)


def home_view():
    """Display the URL form and the current tutorial."""
    url = youtube_input()

    if url:
        st.session_state.tutorial = None
        result = run_generation(url, st.session_state.get("model") or None)

        if "error" in result:
            display_error(result["error"])
        else:
            display_success("Tutorial generated successfully!")
            st.session_state.tutorial = result

    if st.session_state.tutorial:
        display_tutorial(st.session_state.tutorial)


def main():
    """Main application entry point."""
    header()
    sidebar()
    init_session_state()
    home_view()


if __name__ == "__main__":
    main()
