"""
API routes for the YouTube Tutorial Generator application.
"""

import asyncio
import traceback
from typing import AsyncIterator

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from app.api.schems import (
    TutorialRequest,
    TutorialResponse,
    ProgressEvent,
    ResultEvent,
    ErrorEvent,
)
from app.config import config
from app.core.progress import ProgressChannel
from app.main import generate_tutorial
from app.utils.errors import (
    TutorialError,
    InvalidInput,
    ConfigurationError,
    NotFound,
    UpstreamError,
    GenerationCancelled,
)
from app.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["tutorial"])

ERROR_STATUS_CODES = {
    InvalidInput: 400,
    NotFound: 404,
    GenerationCancelled: 499,
    ConfigurationError: 500,
    UpstreamError: 502,
}


def status_code_for(error: TutorialError) -> int:
    """Map a pipeline error to an HTTP status code."""
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return 500


@router.post("/tutorial", response_model=TutorialResponse)
async def create_tutorial(request: TutorialRequest):
    """
    Generate a tutorial for a YouTube video and return it once complete.
    """
    try:
        result = await generate_tutorial(
            request.url,
            settings=config.tutorial_settings(gemini_model=request.model),
        )
    except TutorialError as e:
        logging.error(f"Error generating tutorial: {e.message}")
        raise HTTPException(status_code=status_code_for(e), detail=e.message)

    return TutorialResponse(**result.model_dump())


@router.post("/tutorial/stream")
async def stream_tutorial(request: TutorialRequest):
    """
    Generate a tutorial and stream progress as newline-delimited JSON.

    The stream ends with exactly one ``result`` or ``error`` line.
    """
    return StreamingResponse(_tutorial_events(request), media_type="application/x-ndjson")


async def _tutorial_events(request: TutorialRequest) -> AsyncIterator[str]:
    queue: asyncio.Queue = asyncio.Queue()
    progress = ProgressChannel()
    progress.subscribe(queue.put_nowait)

    task = asyncio.create_task(
        generate_tutorial(
            request.url,
            settings=config.tutorial_settings(gemini_model=request.model),
            progress=progress,
        )
    )
    task.add_done_callback(lambda _: queue.put_nowait(None))

    try:
        while True:
            event = await queue.get()
            if event is None:
                break
            yield ProgressEvent(label=event.label, percent=event.percent).model_dump_json() + "\n"

        try:
            result = task.result()
        except TutorialError as e:
            logging.error(f"Error generating tutorial: {e.message}")
            yield ErrorEvent(error_type=type(e).__name__, message=e.message).model_dump_json() + "\n"
        except Exception as e:
            logging.error(f"Unexpected error generating tutorial: {str(e)}")
            logging.error(traceback.format_exc())
            yield ErrorEvent(error_type="InternalError", message=str(e)).model_dump_json() + "\n"
        else:
            tutorial = TutorialResponse(**result.model_dump())
            yield ResultEvent(tutorial=tutorial).model_dump_json() + "\n"
    finally:
        if not task.done():
            logging.info("Client disconnected, cancelling tutorial generation")
            task.cancel()
