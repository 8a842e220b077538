"""
password.py -- Password composition and denylist validation.

All rules run on every call so the caller gets the complete list of
violations, in a fixed order, rather than only the first one.
"""

import dataclasses
import re
from typing import Any, Optional, Union

from .common_passwords import is_common_password
from .models import (
    PASSWORD_COMMON,
    PASSWORD_NO_LOWERCASE,
    PASSWORD_NO_NUMBER,
    PASSWORD_NO_SYMBOL,
    PASSWORD_NO_UPPERCASE,
    PASSWORD_NOT_STRING,
    PASSWORD_SYMBOLS,
    PASSWORD_TOO_LONG,
    PASSWORD_TOO_SHORT,
    PasswordOptions,
    PasswordValidationResult,
)

_UPPER_RE = re.compile(r"[A-Z]")
_LOWER_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile("[" + re.escape(PASSWORD_SYMBOLS) + "]")


def _resolve_options(options: Optional[PasswordOptions], overrides: dict[str, Any]) -> PasswordOptions:
    base = options if options is not None else PasswordOptions()
    return dataclasses.replace(base, **overrides) if overrides else base


def check_password(
    password: Any, options: Optional[PasswordOptions] = None, **overrides: Any
) -> PasswordValidationResult:
    """Validate a password and always return the structured result.

    A non-string value fails the first rule and is then measured as the
    empty string, so the remaining rules still report consistently.
    """
    opts = _resolve_options(options, overrides)
    errors: list[str] = []

    if isinstance(password, str) and password:
        text = password
    else:
        errors.append(PASSWORD_NOT_STRING)
        text = password if isinstance(password, str) else ""

    if len(text) < opts.min_length:
        errors.append(PASSWORD_TOO_SHORT.format(min_length=opts.min_length))
    if len(text) > opts.max_length:
        errors.append(PASSWORD_TOO_LONG.format(max_length=opts.max_length))

    if opts.require_uppercase and not _UPPER_RE.search(text):
        errors.append(PASSWORD_NO_UPPERCASE)
    if opts.require_lowercase and not _LOWER_RE.search(text):
        errors.append(PASSWORD_NO_LOWERCASE)
    if opts.require_numbers and not _DIGIT_RE.search(text):
        errors.append(PASSWORD_NO_NUMBER)
    if opts.require_symbols and not _SYMBOL_RE.search(text):
        errors.append(PASSWORD_NO_SYMBOL)

    # Case-sensitive on purpose: "Password1" is not the same entry as "password1".
    if opts.forbid_common_passwords and is_common_password(text):
        errors.append(PASSWORD_COMMON)

    return PasswordValidationResult(valid=not errors, errors=errors or None, password=password)


def is_password(
    password: Any, options: Optional[PasswordOptions] = None, **overrides: Any
) -> Union[bool, PasswordValidationResult]:
    """Validate a password. Returns a bool unless details=True is set.

        is_password("MyP@ssw0rd123")                    # True
        is_password("password123")                      # False (common)
        is_password("Pass1!", min_length=6)             # True
        is_password("short", details=True).errors[0]    # length message
    """
    opts = _resolve_options(options, overrides)
    result = check_password(password, opts)
    return result if opts.details else result.valid
