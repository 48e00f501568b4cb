"""
YouTube Tutorial Generator Application.

This application takes a YouTube video URL, fetches its metadata and
transcript, and generates a long-form Markdown tutorial with Gemini.
"""

from app.config import config

__version__ = config.APP_VERSION
