"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Dict, Any, List, Optional, Tuple

from app.config import config


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="Video Tutorial Generator",
        page_icon="📚",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("📚 Video Tutorial Generator")
    st.markdown("""
    Transform any YouTube video into a comprehensive written tutorial.
    """)
    st.divider()


def sidebar():
    """Display the sidebar with app information and options."""
    with st.sidebar:
        st.title("Tutorial Generator")

        st.markdown("## About")
        st.info("""
        This app reads a video's title, description and transcript and writes:
        - An introduction and project overview
        - Setup and installation steps
        - A detailed implementation guide with code
        - Testing and troubleshooting tips
        """)

        st.markdown("## Settings")
        st.text_input("API URL", value=config.PUBLIC_URL, key="api_url")
        st.text_input("Gemini model (optional)", value="", key="model")


def youtube_input() -> Optional[str]:
    """
    Display a YouTube URL input field.

    Returns:
        The entered YouTube URL or None
    """
    with st.form(key="youtube_form"):
        url = st.text_input(
            "Enter YouTube URL",
            placeholder="https://www.youtube.com/watch?v=VIDEO_ID",
        )
        submit = st.form_submit_button("Generate Tutorial")

    if submit and url:
        return url
    return None


def progress_display() -> Tuple[Any, Any]:
    """Create the placeholders a progress bar and its label are drawn into."""
    return st.empty(), st.empty()


def update_progress(bar_slot, label_slot, label: str, percent: int):
    """Redraw the progress bar with the latest event."""
    bar_slot.progress(percent / 100)
    label_slot.caption(f"{label} ({percent}%)")


def clear_progress(bar_slot, label_slot):
    """Remove the progress bar and its label."""
    bar_slot.empty()
    label_slot.empty()


def display_tutorial(tutorial: Dict[str, Any]):
    """
    Display the generated tutorial.

    Args:
        tutorial: Dictionary containing tutorial data
    """
    youtube_embed(tutorial["video_id"])

    if not tutorial.get("transcript_available"):
        st.warning("No transcript was available; the tutorial is based on the title and description only.")

    display_repository_links(tutorial.get("repository_links", []))

    st.download_button(
        "Download Markdown",
        data=tutorial["markdown"],
        file_name=f"{tutorial['video_id']}_tutorial.md",
        mime="text/markdown",
    )
    st.markdown(tutorial["markdown"])


def display_repository_links(links: List[str]):
    """List the repositories referenced in the video description."""
    if not links:
        return
    with st.expander("Repositories"):
        for link in links:
            st.markdown(f"- [{link}]({link})")


def display_error(message: str):
    """
    Display an error message.

    Args:
        message: Error message to display
    """
    st.error(message)


def display_success(message: str):
    st.success(message)


def youtube_embed(video_id: str):
    """
    Embed a YouTube video.

    Args:
        video_id: YouTube video ID
    """
    st.markdown(f"""
    <iframe width="560" height="315" src="https://www.youtube.com/embed/{video_id}"
    frameborder="0" allow="accelerometer; autoplay; clipboard-write; encrypted-media;
    gyroscope; picture-in-picture" allowfullscreen></iframe>
    """, unsafe_allow_html=True)
