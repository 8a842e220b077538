from dataclasses import dataclass
from typing import Any, Optional

# ---------------------------------------------------------------------------
# Domain constants
# ---------------------------------------------------------------------------

# Characters accepted by the "require_symbols" rule.
PASSWORD_SYMBOLS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_MIN_LENGTH = 8
DEFAULT_MAX_LENGTH = 128

# Error messages are part of the public contract. Callers match on them
# (e.g. `"Max attempts exceeded." in result.errors`), so do not reword.
OTP_MAX_ATTEMPTS_INVALID = "Max attempts must be greater than 0."
OTP_INVALID = "Invalid OTP."
OTP_MAX_ATTEMPTS_EXCEEDED = "Max attempts exceeded."

PASSWORD_NOT_STRING = "Password must be a non-empty string"
PASSWORD_TOO_SHORT = "Password must be at least {min_length} characters long"
PASSWORD_TOO_LONG = "Password must be at most {max_length} characters long"
PASSWORD_NO_UPPERCASE = "Password must contain at least one uppercase letter"
PASSWORD_NO_LOWERCASE = "Password must contain at least one lowercase letter"
PASSWORD_NO_NUMBER = "Password must contain at least one number"
PASSWORD_NO_SYMBOL = "Password must contain at least one symbol"
PASSWORD_COMMON = "Password cannot be a common password"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OTPOptions:
    attempts: Optional[int] = None  # None = caller is not tracking attempts
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    details: bool = False


@dataclass(frozen=True)
class PasswordOptions:
    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_symbols: bool = True
    forbid_common_passwords: bool = True
    details: bool = False


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass
class OTPValidationResult:
    valid: bool
    errors: Optional[list[str]]  # None exactly when valid
    otp: Any
    correct_otp: Any
    attempts: Optional[int]
    remaining_attempts: int  # negative once attempts exceed the maximum
    max_attempts: int

    def to_dict(self) -> dict[str, Any]:
        """Return the documented camelCase shape used by the JS package."""
        return {
            "valid": self.valid,
            "errors": self.errors,
            "otp": self.otp,
            "correctOTP": self.correct_otp,
            "attempts": self.attempts,
            "remainingAttempts": self.remaining_attempts,
            "maxAttempts": self.max_attempts,
        }


@dataclass
class PasswordValidationResult:
    valid: bool
    errors: Optional[list[str]]
    password: Any

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "errors": self.errors, "password": self.password}

