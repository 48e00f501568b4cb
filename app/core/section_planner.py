"""
The fixed section plan a tutorial is generated from.
"""

from typing import List

from app.models.schemas import TutorialSection


IMPLEMENTATION_SECTION_TITLE = "Implementation Guide"


def plan_sections() -> List[TutorialSection]:
    """Build a new section plan; callers own and mutate the returned objects."""
    return [
        TutorialSection(title="Introduction and Project Overview"),
        TutorialSection(title="Setup and Installation"),
        TutorialSection(
            title=IMPLEMENTATION_SECTION_TITLE,
            subsections=[
                "File Structure and Configuration",
                "Core Implementation Steps",
                "Code Changes and Explanations",
            ],
        ),
        TutorialSection(title="Testing and Troubleshooting"),
    ]


def is_implementation_section(section: TutorialSection) -> bool:
    return section.title == IMPLEMENTATION_SECTION_TITLE
