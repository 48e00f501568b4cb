"""
FastAPI server entry point for the YouTube Tutorial Generator.
"""

import os
import argparse
import uvicorn

from app.config import config
from app.utils.logger import logging


def main():
    """Run the FastAPI server."""
    parser = argparse.ArgumentParser(description="YouTube Tutorial Generator API")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the server to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind the server to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    settings = config.tutorial_settings()
    missing = [name for name, value in (("YOUTUBE_API_KEY", settings.youtube_api_key),
                                        ("GEMINI_API_KEY", settings.gemini_api_key)) if not value]
    if missing:
        logging.warning(f"Missing credentials: {', '.join(missing)}. Set them in .env before generating tutorials.")

    logging.info(f"Starting {config.APP_NAME} API server v{config.APP_VERSION}")
    logging.info(f"Environment: {os.getenv('ENVIRONMENT', 'development')}, model: {settings.gemini_model}")

    uvicorn.run(
        "app.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
