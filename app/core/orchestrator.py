"""
Orchestration of the section-by-section tutorial generation.
"""

import asyncio
import math
from dataclasses import dataclass, field
from typing import List, Optional

from app.core.llm_client import GeminiClient
from app.core.progress import ProgressChannel
from app.core.prompts import build_fallback_prompt, build_section_prompt
from app.core.section_planner import is_implementation_section, plan_sections
from app.models.schemas import (
    FALLBACK_GENERATION_CONFIG,
    SECTION_GENERATION_CONFIG,
    TutorialSection,
    VideoMetadata,
)
from app.utils.errors import GenerationCancelled
from app.utils.logger import logging


# Shorter answers from optional sections are treated as the model declining.
MIN_ACCEPTED_SECTION_LENGTH = 100

# Section progress occupies 0-90; the rest is reserved for fallback and completion.
SECTION_PROGRESS_SPAN = 90


@dataclass
class TutorialOutcome:
    """Markdown produced by one orchestration run."""
    markdown: str
    completed_sections: List[str] = field(default_factory=list)
    used_fallback: bool = False


class TutorialOrchestrator:
    """Drive one LLM call per planned section and assemble the tutorial."""

    def __init__(
        self,
        llm: GeminiClient,
        min_section_length: int = MIN_ACCEPTED_SECTION_LENGTH,
    ):
        """
        Initialize the orchestrator.

        Args:
            llm: Client used for every generation call
            min_section_length: Stripped length an optional section must exceed
        """
        self.llm = llm
        self.min_section_length = min_section_length

    def is_accepted(self, section: TutorialSection, text: str) -> bool:
        """Decide whether a section's generated text is kept."""
        if is_implementation_section(section):
            return True
        return len(text.strip()) > self.min_section_length

    async def generate(
        self,
        metadata: VideoMetadata,
        links: List[str],
        progress: Optional[ProgressChannel] = None,
        sections: Optional[List[TutorialSection]] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> TutorialOutcome:
        """
        Generate the tutorial for a video.

        Args:
            metadata: Video title, description and transcript
            links: Repository links from the description
            progress: Channel for this request's events; a new one when omitted
            sections: Section plan; a fresh default plan when omitted
            cancel_event: When set, no further section call is issued

        Returns:
            TutorialOutcome with the final Markdown

        Raises:
            UpstreamError: If any LLM call fails
            GenerationCancelled: If cancel_event is set between sections
        """
        progress = progress or ProgressChannel()
        if sections is None:
            sections = plan_sections()

        document = ""
        completed: List[str] = []
        total = len(sections)

        for index, section in enumerate(sections):
            if cancel_event is not None and cancel_event.is_set():
                logging.info(f"Generation cancelled before '{section.title}'")
                raise GenerationCancelled("Tutorial generation was cancelled")

            progress.publish(
                f"Starting {section.title}...",
                _percent(index / total * SECTION_PROGRESS_SPAN),
            )

            prompt = build_section_prompt(metadata, links, section, document)
            text = await self.llm.generate(prompt, SECTION_GENERATION_CONFIG)

            if self.is_accepted(section, text):
                section.mark_completed()
                completed.append(section.title)
                content = text.strip()
                if document:
                    document += f"\n\n## {section.title}\n\n{content}"
                else:
                    document = f"# {section.title}\n\n{content}"
                logging.info(f"Accepted section '{section.title}' ({len(content)} chars)")
            else:
                logging.info(
                    f"Dropped section '{section.title}': {len(text.strip())} chars "
                    f"<= {self.min_section_length}"
                )

            progress.publish(
                f"Completed {section.title}",
                _percent((index + 0.9) / total * SECTION_PROGRESS_SPAN),
            )

        used_fallback = False
        if not completed:
            logging.info("No section accepted, falling back to a single tutorial request")
            progress.publish("Generating comprehensive tutorial...", SECTION_PROGRESS_SPAN)
            text = await self.llm.generate(
                build_fallback_prompt(metadata, links), FALLBACK_GENERATION_CONFIG
            )
            document = f"# {metadata.title}\n\n{text.strip()}"
            used_fallback = True
            progress.publish("Finalizing...", 95)

        progress.publish("Complete!", 100)
        return TutorialOutcome(markdown=document, completed_sections=completed, used_fallback=used_fallback)


def _percent(value: float) -> int:
    # halves round up so 22.5 publishes as 23
    return math.floor(value + 0.5)
