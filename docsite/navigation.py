"""
docsite/navigation.py -- Sidebar structure and "next page" lookup.

NAVIGATION is the single ordered list used for both the sidebar and the
"Next" link at the bottom of each page, so the two cannot drift apart.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(frozen=True)
class NavItem:
    path: str  # "/password" -- served under /docs/<path>
    label: str

    @property
    def name(self) -> str:
        """Page name without the leading slash, as used by load_page()."""
        return self.path.lstrip("/")


@dataclass(frozen=True)
class NavSection:
    title: str
    items: tuple[NavItem, ...] = field(default_factory=tuple)


NAVIGATION: tuple[NavSection, ...] = (
    NavSection(
        "GETTING STARTED",
        (
            NavItem("/installation", "Installation"),
            NavItem("/quick-start", "Quick Start"),
        ),
    ),
    NavSection(
        "VALIDATORS (Functions)",
        (
            NavItem("/password", "Password Validation"),
            NavItem("/otp", "OTP Validation"),
        ),
    ),
)


def _normalize(path: str) -> str:
    path = path.strip()
    if path.startswith("/docs/"):
        path = path[len("/docs") :]
    return path if path.startswith("/") else f"/{path}"


def iter_items(sections: tuple[NavSection, ...] = NAVIGATION) -> Iterator[NavItem]:
    """Yield every item across all sections, in sidebar order."""
    for section in sections:
        yield from section.items


def find_item(path: str, sections: tuple[NavSection, ...] = NAVIGATION) -> Optional[NavItem]:
    """Return the item for path ("otp", "/otp" or "/docs/otp"), or None."""
    target = _normalize(path)
    return next((item for item in iter_items(sections) if item.path == target), None)


def next_document(path: str, sections: tuple[NavSection, ...] = NAVIGATION) -> Optional[NavItem]:
    """Return the item that follows path in sidebar order.

    None when path is the last item or is not in the navigation at all.
    """
    items = list(iter_items(sections))
    target = _normalize(path)
    for index, item in enumerate(items):
        if item.path == target:
            return items[index + 1] if index + 1 < len(items) else None
    return None
