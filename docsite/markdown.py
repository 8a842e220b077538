"""
docsite/markdown.py -- Heading slugs, table of contents, active heading.

Slugs must stay identical to the anchors the rendered pages use, so the
slug rule here is the single source of truth for both.
"""

import re
from dataclasses import dataclass
from typing import Optional, Sequence

_NON_WORD_RE = re.compile(r"[^\w\s-]", re.ASCII)
_SPACE_RE = re.compile(r"\s+")
_DASHES_RE = re.compile(r"-+")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")

# Distances in pixels, matching the site's table-of-contents behavior.
SCROLL_OFFSET = 150
TOP_THRESHOLD = 100
BOTTOM_THRESHOLD = 100


@dataclass
class Heading:
    id: str
    text: str
    level: int = 2

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "level": self.level}


def slugify(text: str) -> str:
    """Turn heading text into an anchor id.

    "Option: `minLength`" -> "option-minlength". Only ASCII word characters,
    whitespace and '-' survive; whitespace runs become a single '-'.
    """
    slug = _NON_WORD_RE.sub("", text.lower())
    slug = _SPACE_RE.sub("-", slug)
    slug = _DASHES_RE.sub("-", slug)
    return slug.strip()


def _scan(markdown: str, min_level: int, max_level: int) -> list[Heading]:
    """Collect headings between min_level and max_level, skipping fenced code."""
    pattern = re.compile(r"^(#{%d,%d})\s+(.+)$" % (min_level, max_level))
    headings: list[Heading] = []
    fence: Optional[str] = None  # opening marker of the current code block
    for line in markdown.splitlines():
        m = _FENCE_RE.match(line)
        if m:
            if fence is None:
                fence = m.group(1)
            elif m.group(1) == fence:
                fence = None
            continue
        if fence is not None:
            continue
        m = pattern.match(line)
        if m:
            text = m.group(2).strip()
            headings.append(Heading(id=slugify(text), text=text, level=len(m.group(1))))
    return headings


def extract_headings(markdown: str, level: int = 2) -> list[Heading]:
    """Return headings of exactly `level` in document order.

    Lines inside fenced code blocks are skipped, so a "## comment" in a
    shell example is not mistaken for a section.
    """
    if level < 1:
        raise ValueError(f"Heading level must be at least 1 (got {level})")
    return _scan(markdown, level, level)


def table_of_contents(markdown: str, max_level: int = 2) -> list[Heading]:
    """Headings from level 2 down to max_level, in document order."""
    if max_level < 2:
        raise ValueError(f"max_level must be at least 2 (got {max_level})")
    return _scan(markdown, 2, max_level)


def active_heading(
    positions: Sequence[tuple[str, float]],
    scroll_top: float,
    viewport_height: float,
    scroll_height: float,
    offset: float = SCROLL_OFFSET,
) -> Optional[str]:
    """Pick the heading id to highlight for a scroll position.

    positions holds (id, absolute top) pairs in document order. Rules, first
    match wins:
      1. the last heading whose top is at or above scroll_top + offset
      2. the first heading, when scrolled less than TOP_THRESHOLD from the top
      3. the last heading, when within BOTTOM_THRESHOLD of the page bottom
      4. the first heading whose top lies inside the viewport
    Returns None when there are no headings or none of the rules apply.
    """
    if not positions:
        return None

    for heading_id, top in reversed(positions):
        if top <= scroll_top + offset:
            return heading_id

    if scroll_top < TOP_THRESHOLD:
        return positions[0][0]

    if scroll_top + viewport_height >= scroll_height - BOTTOM_THRESHOLD:
        return positions[-1][0]

    for heading_id, top in positions:
        relative = top - scroll_top
        if 0 <= relative <= viewport_height:
            return heading_id
    return None
