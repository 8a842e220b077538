"""
fetcher.py -- Latest published release lookup.
Uses the public GitHub releases API; no token required.
"""

import logging
from typing import Optional

import requests

from .config import get_settings

logger = logging.getLogger("validauth.fetcher")

# Shown whenever the real version cannot be determined.
FALLBACK_VERSION = "Latest"

RELEASES_PATH = "/repos/{repo}/releases/latest"
GITHUB_ACCEPT = "application/vnd.github.v3+json"

# Module-level session shared across calls for connection pooling.
# max_redirects=3 replaces the requests default of 30 -- this is a known public API.
_session = requests.Session()
_session.max_redirects = 3


def normalize_tag(tag: str) -> str:
    """Return the tag with exactly one leading 'v' ("1.2.1" -> "v1.2.1")."""
    tag = tag.strip()
    return tag if tag.startswith("v") else f"v{tag}"


def fetch_latest_version(repo: Optional[str] = None) -> str:
    """Return the latest release tag of repo, e.g. "v1.2.1".

    Args:
        repo: "owner/name". Defaults to Settings.github_repo.

    Never raises for network or payload problems: returns FALLBACK_VERSION
    and logs a warning so page rendering always has something to show.
    """
    settings = get_settings()
    repo = repo or settings.github_repo
    url = settings.github_api_url + RELEASES_PATH.format(repo=repo)
    try:
        resp = _session.get(url, headers={"Accept": GITHUB_ACCEPT}, timeout=settings.request_timeout)
        resp.raise_for_status()
        data = resp.json()
    except requests.JSONDecodeError as e:
        # Subclass of RequestException, so it must be caught first.
        logger.warning("Release lookup for %s returned invalid JSON: %s", repo, e)
        return FALLBACK_VERSION
    except requests.RequestException as e:
        logger.warning("Release lookup failed for %s: %s", repo, e)
        return FALLBACK_VERSION

    tag = data.get("tag_name") if isinstance(data, dict) else None
    if not tag or not isinstance(tag, str):
        logger.debug("No tag_name in latest release payload for %s", repo)
        return FALLBACK_VERSION
    return normalize_tag(tag)
