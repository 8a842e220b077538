"""
otp.py -- One-time password validation with attempt tracking.

Pure functions. The validator never stores or increments attempt counters;
callers persist the count between calls and pass the current value in.
"""

import dataclasses
import hmac
from typing import Any, Optional, Union

from .models import (
    OTP_INVALID,
    OTP_MAX_ATTEMPTS_EXCEEDED,
    OTP_MAX_ATTEMPTS_INVALID,
    OTPOptions,
    OTPValidationResult,
)


def _resolve_options(options: Optional[OTPOptions], overrides: dict[str, Any]) -> OTPOptions:
    """Merge keyword overrides onto options. Unknown names raise TypeError."""
    base = options if options is not None else OTPOptions()
    return dataclasses.replace(base, **overrides) if overrides else base


def _codes_match(otp: Any, correct_otp: Any) -> bool:
    """Exact, case-sensitive comparison; constant-time for string pairs."""
    if isinstance(otp, str) and isinstance(correct_otp, str):
        # surrogatepass keeps lone surrogates (e.g. from non-UTF-8 argv) comparable.
        return hmac.compare_digest(otp.encode("utf-8", "surrogatepass"), correct_otp.encode("utf-8", "surrogatepass"))
    return otp == correct_otp


def validate_otp_detailed(
    otp: Any, correct_otp: Any, options: Optional[OTPOptions] = None, **overrides: Any
) -> OTPValidationResult:
    """Validate an OTP and always return the structured result.

    Checks run in a fixed order and every failure is reported:
      1. max_attempts must be positive
      2. otp must equal correct_otp
      3. attempts (when given) must not exceed max_attempts
    """
    opts = _resolve_options(options, overrides)
    errors: list[str] = []

    if opts.max_attempts <= 0:
        errors.append(OTP_MAX_ATTEMPTS_INVALID)

    if not _codes_match(otp, correct_otp):
        errors.append(OTP_INVALID)

    if opts.attempts is not None and opts.attempts > opts.max_attempts:
        errors.append(OTP_MAX_ATTEMPTS_EXCEEDED)

    used = opts.attempts if opts.attempts is not None else 0
    return OTPValidationResult(
        valid=not errors,
        errors=errors or None,
        otp=otp,
        correct_otp=correct_otp,
        attempts=opts.attempts,
        remaining_attempts=opts.max_attempts - used,
        max_attempts=opts.max_attempts,
    )


def validate_otp(
    otp: Any, correct_otp: Any, options: Optional[OTPOptions] = None, **overrides: Any
) -> Union[bool, OTPValidationResult]:
    """Validate an OTP. Returns a bool unless details=True is set.

    Accepts either an OTPOptions instance, keyword overrides, or both
    (keywords win):

        validate_otp("1234", "1234")                               # True
        validate_otp("1234", "1234", attempts=4, max_attempts=3)   # False
        validate_otp("1234", "5678", details=True).errors          # ["Invalid OTP."]
    """
    opts = _resolve_options(options, overrides)
    result = validate_otp_detailed(otp, correct_otp, opts)
    return result if opts.details else result.valid
