#!/usr/bin/env python3
"""
validauth-docs -- Validators and documentation tooling for validauth.
No API keys required. The release lookup uses the public GitHub API.

Usage:
  python main.py password 'MyP@ssw0rd123'
  python main.py password 'Pass1!' --min-length 6 --json
  python main.py otp 1234 1234 --attempts 2 --max-attempts 3
  python main.py docs password
  python main.py toc otp
  python main.py toc README.md --json
  python main.py nav
  python main.py version

Environment variables:
  VALIDAUTH_GITHUB_REPO    Repository queried for the latest release (default: Adiksuu/validauth).
  VALIDAUTH_DOCS_DIR       Directory holding <page>.md files (default: bundled pages).
  VALIDAUTH_LOG_LEVEL      Logging level (default: WARNING).
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from core.config import get_settings
from core.fetcher import FALLBACK_VERSION, fetch_latest_version
from core.formatter import disable_color, render_navigation, render_otp, render_password, render_toc, to_json
from core.otp import validate_otp_detailed
from core.password import check_password
from docsite.markdown import table_of_contents
from docsite.navigation import NAVIGATION, find_item
from docsite.pages import NOT_FOUND_PAGE, DocumentNotFoundError, list_pages, load_page

logger = logging.getLogger("validauth.cli")


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _version(offline: bool) -> str:
    return FALLBACK_VERSION if offline else fetch_latest_version()


# ---------------------------------------------------------------------------
# Subcommands -- each returns the process exit status
# ---------------------------------------------------------------------------


def cmd_password(args: argparse.Namespace) -> int:
    result = check_password(
        args.password,
        min_length=args.min_length,
        max_length=args.max_length,
        require_uppercase=not args.no_uppercase,
        require_lowercase=not args.no_lowercase,
        require_numbers=not args.no_numbers,
        require_symbols=not args.no_symbols,
        forbid_common_passwords=not args.allow_common,
    )
    print(to_json(result) if args.json else render_password(result))
    return 0 if result.valid else 1


def cmd_otp(args: argparse.Namespace) -> int:
    result = validate_otp_detailed(args.otp, args.correct, attempts=args.attempts, max_attempts=args.max_attempts)
    print(to_json(result) if args.json else render_otp(result))
    return 0 if result.valid else 1


def cmd_docs(args: argparse.Namespace) -> int:
    try:
        page = load_page(args.name, version=_version(args.offline))
    except DocumentNotFoundError as e:
        logger.debug("%s", e)
        print(NOT_FOUND_PAGE)
        available = ", ".join(list_pages())
        print(f"\n  [!] No page named '{args.name}'. Available: {available or 'none'}")
        return 1

    print(page.content)
    if page.next is not None:
        print(f"\n  Next: {page.next.label}  (python main.py docs {page.next.name})")
    return 0


def _read_markdown(source: str) -> Optional[tuple[str, str]]:
    """Resolve source to (title, markdown): a file path first, then a page name."""
    file_path = Path(source)
    if file_path.suffix == ".md" and file_path.is_file():
        try:
            return file_path.name, file_path.read_text(encoding="utf-8")
        except OSError as e:
            print(f"  [!] Could not read file '{source}': {e}")
            return None
    try:
        page = load_page(source)
    except DocumentNotFoundError:
        print(f"  [!] '{source}' is neither a markdown file nor a documentation page.")
        return None
    return page.title, page.content


def cmd_toc(args: argparse.Namespace) -> int:
    resolved = _read_markdown(args.source)
    if resolved is None:
        return 1
    title, markdown = resolved
    headings = table_of_contents(markdown, max_level=args.depth)
    if args.json:
        print(json.dumps([h.to_dict() for h in headings], indent=2))
    else:
        print(render_toc(title, headings))
    return 0


def cmd_nav(args: argparse.Namespace) -> int:
    item = find_item(args.current) if args.current else None
    current = item.path if item else None
    print(render_navigation(list(NAVIGATION), _version(args.offline), current=current))
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    print(fetch_latest_version(args.repo))
    return 0


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="validauth-docs",
        description="Password and OTP validation plus validauth documentation tooling.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py password 'MyP@ssw0rd123'
  python main.py password 'simplepass' --min-length 6 --no-uppercase --no-numbers --no-symbols
  python main.py otp 482917 482917 --attempts 1 --json
  python main.py docs quick-start --offline
  python main.py toc password --depth 3
        """,
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI color codes in terminal output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    p = sub.add_parser("password", help="Check a password against the composition rules")
    p.add_argument("password", help="Password to check (quote it to protect shell symbols)")
    p.add_argument("--min-length", type=int, default=8, metavar="N", help="Minimum length (default: 8)")
    p.add_argument("--max-length", type=int, default=128, metavar="N", help="Maximum length (default: 128)")
    p.add_argument("--no-uppercase", action="store_true", help="Do not require an uppercase letter")
    p.add_argument("--no-lowercase", action="store_true", help="Do not require a lowercase letter")
    p.add_argument("--no-numbers", action="store_true", help="Do not require a number")
    p.add_argument("--no-symbols", action="store_true", help="Do not require a symbol")
    p.add_argument("--allow-common", action="store_true", help="Skip the common-password check")
    p.add_argument("--json", action="store_true", help="Output the detailed result as JSON")
    p.set_defaults(func=cmd_password)

    p = sub.add_parser("otp", help="Compare an OTP against the expected code")
    p.add_argument("otp", help="Code entered by the user")
    p.add_argument("correct", help="Expected code")
    p.add_argument("--attempts", type=int, default=None, metavar="N", help="Attempts made so far, this one included")
    p.add_argument("--max-attempts", type=int, default=3, metavar="N", help="Maximum attempts allowed (default: 3)")
    p.add_argument("--json", action="store_true", help="Output the detailed result as JSON")
    p.set_defaults(func=cmd_otp)

    p = sub.add_parser("docs", help="Print a documentation page")
    p.add_argument("name", help="Page name, e.g. password or quick-start")
    p.add_argument("--offline", action="store_true", help="Skip the release lookup")
    p.set_defaults(func=cmd_docs)

    p = sub.add_parser("toc", help="Print the table of contents of a page or markdown file")
    p.add_argument("source", metavar="NAME|PATH", help="Page name or path to a .md file")
    p.add_argument("--depth", type=int, choices=[2, 3, 4], default=2, help="Deepest heading level (default: 2)")
    p.add_argument("--json", action="store_true", help="Output headings as JSON")
    p.set_defaults(func=cmd_toc)

    p = sub.add_parser("nav", help="Print the sidebar navigation")
    p.add_argument("--current", metavar="PATH", default=None, help="Highlight this path, e.g. /otp")
    p.add_argument("--offline", action="store_true", help="Skip the release lookup")
    p.set_defaults(func=cmd_nav)

    p = sub.add_parser("version", help="Print the latest published release")
    p.add_argument("--repo", metavar="OWNER/NAME", default=None, help="Repository to query")
    p.set_defaults(func=cmd_version)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Apply color preference before any output
    if args.no_color:
        disable_color()
    try:
        _configure_logging(args.verbose)
    except ValueError as e:
        print(f"  [!] Invalid configuration: {e}")
        return 1

    if not getattr(args, "func", None):
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
