"""
Prompt templates and composition for tutorial generation.
"""

from typing import List

from app.core.section_planner import is_implementation_section
from app.models.schemas import TutorialSection, VideoMetadata


CONTEXT_EXCERPT_LENGTH = 500

video_details_template = """
    VIDEO DETAILS:
    Title: {title}
    Description: {description}
    Transcript: {transcript}
    {repositories}
    """

formatting_rules = """
    Markdown Formatting:
    1. Use proper heading hierarchy; {heading_rule}
    2. Format code blocks with language and file path, e.g. ```python:src/app.py
    3. Use blockquotes for warnings and important notes
    4. Use ```mermaid blocks for diagrams
    5. Use numbered lists for steps and tables for comparing options
    """

section_template = """
    You are a professional technical writer creating a high-quality, in-depth tutorial
    based on a YouTube video. You are writing ONE part of a longer tutorial.
    {video_details}
    {target}
    {continuity}
    {formatting}
    Write only the content of this part. Do not repeat the part title as a heading.
    """

implementation_target = """
    Write the "{title}" part of the tutorial. This is the most important part and
    must cover ALL of the following subsections exhaustively:
    {subsections}

    Provide complete, working code for every step, explain every code change, and
    reference the GitHub repositories when available.
    Never answer with SKIP or decline to write this part.
    """

section_target = """
    Write the "{title}" part of the tutorial.
    """

continuity_template = """
    The tutorial so far ends with the following text. Continue from it without
    repeating or contradicting it:
    ...{excerpt}
    """

fallback_template = """
    You are a professional technical writer creating a high-quality Medium blog post.
    Create a comprehensive, visually engaging tutorial that explains concepts thoroughly
    with diagrams, code examples, and clear explanations.
    {video_details}
    Create a tutorial covering:

    1. Title and Introduction: the real-world problem, what readers will build or learn,
       estimated reading time and difficulty level
    2. Prerequisites and Setup: required tools with versions, environment setup commands,
       directory structure
    3. Concept Visualization: Mermaid diagrams for the architecture, data flow and
       step-by-step process
    4. Step-by-Step Implementation: for each step a title, explanation, complete code
       snippet with filename, line-by-line explanation and expected output
    5. Best Practices and Tips: performance, security, common pitfalls
    6. Testing and Troubleshooting: how to verify the result and fix common errors
    7. Conclusion and Next Steps: key learnings, advanced topics, resources
    {formatting}
    Ensure all code snippets are complete and functional.
    """


def _video_details(metadata: VideoMetadata, links: List[str]) -> str:
    repositories = ""
    if links:
        repositories = "GitHub Repositories:\n" + "\n".join(links)
    return video_details_template.format(
        title=metadata.title,
        description=metadata.description,
        transcript=metadata.transcript,
        repositories=repositories,
    )


def build_section_prompt(
    metadata: VideoMetadata,
    links: List[str],
    section: TutorialSection,
    previous_content: str = "",
) -> str:
    """
    Build the prompt for one tutorial section.

    Args:
        metadata: Video title, description and transcript
        links: Repository links found in the description
        section: Section being generated
        previous_content: Tutorial text accumulated so far

    Returns:
        Prompt text sent verbatim to the model
    """
    if is_implementation_section(section):
        subsections = "\n".join(f"    - {name}" for name in section.subsections)
        target = implementation_target.format(title=section.title, subsections=subsections)
    else:
        target = section_target.format(title=section.title)

    continuity = ""
    excerpt = previous_content[-CONTEXT_EXCERPT_LENGTH:] if previous_content else ""
    if excerpt:
        continuity = continuity_template.format(excerpt=excerpt)

    return section_template.format(
        video_details=_video_details(metadata, links),
        target=target,
        continuity=continuity,
        formatting=formatting_rules.format(heading_rule="start headings inside this part at ###"),
    )


def build_fallback_prompt(metadata: VideoMetadata, links: List[str]) -> str:
    """Build the single whole-tutorial prompt."""
    return fallback_template.format(
        video_details=_video_details(metadata, links),
        formatting=formatting_rules.format(heading_rule="use ## for major sections"),
    )
