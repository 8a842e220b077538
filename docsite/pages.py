"""
docsite/pages.py -- Load documentation pages from markdown files.

Pages live in docsite/content/<name>.md unless VALIDAUTH_DOCS_DIR points
elsewhere. The "%version%" placeholder is replaced with the release tag the
caller passes in (usually from core.fetcher.fetch_latest_version).
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from core.config import get_settings
from core.fetcher import FALLBACK_VERSION

from .markdown import Heading, table_of_contents
from .navigation import NavItem, next_document

logger = logging.getLogger("validauth.docs")

BUNDLED_DIR = Path(__file__).parent / "content"
VERSION_PLACEHOLDER = "%version%"

NOT_FOUND_PAGE = "# Documentation Not Found\n\nThe requested documentation page could not be found."

# Page names double as file names; anything else could escape the docs dir.
_NAME_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")


class DocumentNotFoundError(LookupError):
    """Raised when no markdown file exists for a requested page name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"File {name}.md not found")
        self.name = name


@dataclass
class Page:
    name: str
    content: str
    headings: list[Heading] = field(default_factory=list)
    next: Optional[NavItem] = None

    @property
    def title(self) -> str:
        """Text of the first level-1 heading, falling back to the page name."""
        for line in self.content.splitlines():
            if line.startswith("# "):
                return line[2:].strip()
        return self.name


def docs_dir() -> Path:
    return get_settings().docs_dir or BUNDLED_DIR


def list_pages(directory: Optional[Path] = None) -> list[str]:
    """Names of all available pages, sorted."""
    directory = directory or docs_dir()
    if not directory.is_dir():
        return []
    return sorted(p.stem for p in directory.glob("*.md") if _NAME_RE.match(p.stem))


def load_page(name: str, version: str = FALLBACK_VERSION, directory: Optional[Path] = None) -> Page:
    """Read page `name`, fill in the version and build its table of contents.

    Raises DocumentNotFoundError for unknown or malformed names.
    """
    name = name.strip().strip("/")
    if name.startswith("docs/"):
        name = name[len("docs/") :]
    if not _NAME_RE.match(name):
        raise DocumentNotFoundError(name)

    path = (directory or docs_dir()) / f"{name}.md"
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DocumentNotFoundError(name) from None

    logger.debug("Loaded page %s (%d chars) from %s", name, len(text), path)
    content = text.replace(VERSION_PLACEHOLDER, version)
    return Page(
        name=name,
        content=content,
        headings=table_of_contents(content),
        next=next_document(name),
    )
