"""
formatter.py -- Renders validation results, tables of contents and navigation
to terminal output or JSON.
"""

import json
import os
import re
import sys
from typing import Any, Optional, Union

from .models import OTPValidationResult, PasswordValidationResult

W = 68  # output width

# ---------------------------------------------------------------------------
# ANSI color control
# ---------------------------------------------------------------------------

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from a string."""
    return _ANSI_RE.sub("", text)


def _use_color() -> bool:
    """Return True if stdout is a TTY and color has not been disabled.

    Respects NO_COLOR env var (https://no-color.org) and checks sys.stdout.isatty().
    Can be overridden by calling disable_color() / enable_color().
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


_color_enabled: Optional[bool] = None  # None = auto-detect


def disable_color() -> None:
    """Force-disable color output (called when --no-color flag is set)."""
    global _color_enabled
    _color_enabled = False


def enable_color() -> None:
    global _color_enabled
    _color_enabled = True


def reset_color() -> None:
    """Return to auto-detection."""
    global _color_enabled
    _color_enabled = None


def _color_active() -> bool:
    if _color_enabled is not None:
        return _color_enabled
    return _use_color()


def _reset() -> str:
    return "\033[0m" if _color_active() else ""


def _bold() -> str:
    return "\033[1m" if _color_active() else ""


def _dim() -> str:
    return "\033[2m" if _color_active() else ""


def _red() -> str:
    return "\033[91m" if _color_active() else ""


def _green() -> str:
    return "\033[92m" if _color_active() else ""


# ---------------------------------------------------------------------------
# Layout helpers
# ---------------------------------------------------------------------------


def _bar(char: str = "═") -> str:
    return char * W


def _section(title: str) -> str:
    return f"\n  {_bold()}{title}{_reset()}\n  {'─' * (W - 2)}"


def _verdict(valid: bool) -> str:
    if valid:
        return f"{_green()}{_bold()}VALID{_reset()}"
    return f"{_red()}{_bold()}INVALID{_reset()}"


def _errors_block(errors: Optional[list[str]]) -> list[str]:
    if not errors:
        return ["    No problems found."]
    return [f"    {_red()}✗{_reset()} {e}" for e in errors]


# ---------------------------------------------------------------------------
# Terminal renderers
# ---------------------------------------------------------------------------


def render_password(result: PasswordValidationResult) -> str:
    # Never echo the password itself to the terminal.
    lines = [
        f"\n{_bold()}{_bar()}{_reset()}",
        f"  Password check  │  {_verdict(result.valid)}",
        f"{_bold()}{_bar()}{_reset()}",
        _section("PROBLEMS"),
        *_errors_block(result.errors),
        "",
    ]
    return "\n".join(lines)


def render_otp(result: OTPValidationResult) -> str:
    attempts = "not tracked" if result.attempts is None else str(result.attempts)
    remaining = result.remaining_attempts
    remaining_str = f"{_red()}{remaining}{_reset()}" if remaining <= 0 else str(remaining)
    lines = [
        f"\n{_bold()}{_bar()}{_reset()}",
        f"  OTP check  │  {_verdict(result.valid)}",
        f"{_bold()}{_bar()}{_reset()}",
        _section("ATTEMPTS"),
        f"    {'Attempts used':<20}  {attempts}",
        f"    {'Maximum':<20}  {result.max_attempts}",
        f"    {'Remaining':<20}  {remaining_str}",
        _section("PROBLEMS"),
        *_errors_block(result.errors),
        "",
    ]
    return "\n".join(lines)


def render_toc(title: str, headings: list[Any]) -> str:
    """Render an "On this page" list. headings are docsite Heading objects."""
    lines = [_section(f"ON THIS PAGE -- {title}")]
    if not headings:
        lines.append(f"    {_dim()}(no sections){_reset()}")
    for h in headings:
        indent = "    " + "  " * max(h.level - 2, 0)
        lines.append(f"{indent}{h.text}  {_dim()}#{h.id}{_reset()}")
    lines.append("")
    return "\n".join(lines)


def render_navigation(sections: list[Any], version: str, current: Optional[str] = None) -> str:
    """Render the sidebar: header with version, then each section's items."""
    lines = [f"\n  {_bold()}validauth{_reset()}  {_dim()}{version}{_reset()}"]
    for section in sections:
        lines.append(_section(section.title))
        for item in section.items:
            marker = "›" if current and item.path == current else " "
            lines.append(f"   {marker} {item.label:<32} {_dim()}/docs{item.path}{_reset()}")
    lines.append("")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# JSON export
# ---------------------------------------------------------------------------


def to_json(result: Union[OTPValidationResult, PasswordValidationResult, list[Any]]) -> str:
    """Return JSON in the documented camelCase result shape."""
    if isinstance(result, list):
        return json.dumps([r.to_dict() for r in result], indent=2)
    return json.dumps(result.to_dict(), indent=2)
