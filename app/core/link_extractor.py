"""
Extract GitHub repository links from a video description.
"""

import re
from typing import List, Optional

GITHUB_LINK_PATTERN = re.compile(r"https://github\.com/[a-zA-Z0-9-]+/[a-zA-Z0-9_.-]+")


def extract_github_links(description: Optional[str]) -> List[str]:
    """Return repository URLs in order of appearance, duplicates included."""
    if not description:
        return []
    return GITHUB_LINK_PATTERN.findall(description)
