"""
Core functionality for the YouTube tutorial generator application.

This package contains modules for resolving video URLs, fetching metadata
and transcripts, composing prompts, and orchestrating tutorial generation.
"""
