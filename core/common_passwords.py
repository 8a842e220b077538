"""
common_passwords.py -- Denylist of common and leaked passwords.

The list ships as a plain text file next to this module (one entry per line,
# comments and blank lines ignored) and is read once per process. Lookups are
exact and case-sensitive.
"""

from functools import lru_cache
from pathlib import Path

_DEFAULT_LIST = Path(__file__).parent / "data" / "common_passwords.txt"


def _parse(text: str) -> frozenset[str]:
    return frozenset(
        line.strip() for line in text.splitlines() if line.strip() and not line.strip().startswith("#")
    )


@lru_cache
def load_common_passwords(path: Path = _DEFAULT_LIST) -> frozenset[str]:
    """Return the common-password set, reading the file on first call only.

    The returned frozenset is shared by every caller and never mutated, so
    concurrent readers need no locking.
    """
    return _parse(path.read_text(encoding="utf-8"))


def is_common_password(password: str) -> bool:
    """True if password exactly matches an entry in the bundled denylist."""
    return password in load_common_passwords()
