"""
Main entry point for the YouTube Tutorial Generator application.
"""

import sys
import asyncio
import argparse
from typing import Optional

from app.config import config
from app.core.link_extractor import extract_github_links
from app.core.llm_client import GeminiClient
from app.core.metadata_fetcher import MetadataFetcher
from app.core.orchestrator import TutorialOrchestrator
from app.core.progress import ProgressCallback, ProgressChannel
from app.core.video_resolver import extract_video_id
from app.models.schemas import TutorialResult, TutorialSettings
from app.utils.errors import TutorialError
from app.utils.logger import log_to_stderr, logging


async def generate_tutorial(
    url: str,
    settings: Optional[TutorialSettings] = None,
    on_progress: Optional[ProgressCallback] = None,
    progress: Optional[ProgressChannel] = None,
    fetcher: Optional[MetadataFetcher] = None,
    llm: Optional[GeminiClient] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> TutorialResult:
    """
    Turn a YouTube video into a Markdown tutorial.

    Args:
        url: YouTube video URL
        settings: Pipeline settings (defaults to the environment configuration)
        on_progress: Observer subscribed for the duration of the call
        progress: Channel to publish to; a new one is created per call when omitted
        fetcher: Optional pre-built metadata fetcher
        llm: Optional pre-built Gemini client
        cancel_event: Stops generation before the next section call when set

    Returns:
        TutorialResult object
    """
    settings = settings or config.tutorial_settings()

    # Credentials are checked before any network call.
    if fetcher is None and llm is None:
        settings.validate_credentials()
    fetcher = fetcher or MetadataFetcher(settings)
    llm = llm or GeminiClient(settings)

    progress = progress or ProgressChannel()
    unsubscribe = progress.subscribe(on_progress) if on_progress else None

    try:
        video_id = extract_video_id(url)
        logging.info(f"Generating tutorial for video: {video_id}")

        metadata = await fetcher.fetch_async(video_id)
        links = extract_github_links(metadata.description)
        logging.info(f"Found {len(links)} repository links")

        orchestrator = TutorialOrchestrator(llm)
        outcome = await orchestrator.generate(metadata, links, progress=progress, cancel_event=cancel_event)
    finally:
        if unsubscribe:
            unsubscribe()

    logging.info(
        f"Tutorial for '{metadata.title}' complete: {len(outcome.markdown)} chars, "
        f"fallback={outcome.used_fallback}"
    )
    return TutorialResult(
        video_id=video_id,
        title=metadata.title,
        markdown=outcome.markdown,
        repository_links=links,
        transcript_available=metadata.transcript_available,
        sections_completed=outcome.completed_sections,
        used_fallback=outcome.used_fallback,
    )


def main():
    """Main function to run the application from command line."""
    log_to_stderr()

    parser = argparse.ArgumentParser(description="YouTube Tutorial Generator")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--model", default=None,
                        help="Gemini model used for generation")

    args = parser.parse_args()

    def log_progress(event):
        logging.info(f"[{event.percent:3d}%] {event.label}")

    try:
        result = asyncio.run(
            generate_tutorial(
                args.url,
                settings=config.tutorial_settings(gemini_model=args.model),
                on_progress=log_progress,
            )
        )
    except TutorialError as e:
        logging.error(e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    print(result.markdown)


if __name__ == "__main__":
    main()
