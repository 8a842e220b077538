"""Unit tests for core/password.py -- pure logic, no I/O.

Covers:
- Default rules on documented example passwords
- Each rule's message and the fixed check order
- Non-string and empty input
- Option relaxation (monotonicity) and idempotence
"""

import pytest

from core.models import (
    PASSWORD_COMMON,
    PASSWORD_NO_LOWERCASE,
    PASSWORD_NO_NUMBER,
    PASSWORD_NO_SYMBOL,
    PASSWORD_NO_UPPERCASE,
    PASSWORD_NOT_STRING,
    PASSWORD_SYMBOLS,
    PasswordOptions,
)
from core.password import check_password, is_password

_REQUIRE_FLAGS = ("require_uppercase", "require_lowercase", "require_numbers", "require_symbols")

# ---------------------------------------------------------------------------
# TestDefaults
# ---------------------------------------------------------------------------


class TestDefaults:
    @pytest.mark.parametrize(
        "password",
        ["MyP@ssw0rd123", "LongPass1!", "Password123!", "MyUn1qu3P@ssw0rd!", "Pass@word1", "Pass#word1", "Pass$word1"],
    )
    def test_strong_passwords_pass(self, password):
        assert is_password(password) is True

    @pytest.mark.parametrize(
        "password, expected_error",
        [
            ("Short1!", "Password must be at least 8 characters long"),
            ("password123!", PASSWORD_NO_UPPERCASE),
            ("PASSWORD123!", PASSWORD_NO_LOWERCASE),
            ("Password!", PASSWORD_NO_NUMBER),
            ("Password123", PASSWORD_NO_SYMBOL),
        ],
    )
    def test_single_rule_failures(self, password, expected_error):
        result = check_password(password)
        assert result.valid is False
        assert result.errors == [expected_error]

    def test_common_password_rejected(self):
        assert is_password("password123") is False
        result = is_password("password123", details=True)
        assert PASSWORD_COMMON in result.errors

    def test_short_password_includes_length_message(self):
        result = is_password("short", details=True)
        assert result.valid is False
        assert "Password must be at least 8 characters long" in result.errors
        assert result.password == "short"

    def test_too_long_password(self):
        result = is_password("Aa1!" * 40, details=True)
        assert result.errors == ["Password must be at most 128 characters long"]

    def test_valid_detailed_result_shape(self):
        result = is_password("MyP@ssw0rd123", details=True)
        assert result.to_dict() == {"valid": True, "errors": None, "password": "MyP@ssw0rd123"}


# ---------------------------------------------------------------------------
# TestCheckOrder
# ---------------------------------------------------------------------------


class TestCheckOrder:
    def test_empty_string_reports_every_composition_rule(self):
        result = check_password("")
        assert result.errors == [
            PASSWORD_NOT_STRING,
            "Password must be at least 8 characters long",
            PASSWORD_NO_UPPERCASE,
            PASSWORD_NO_LOWERCASE,
            PASSWORD_NO_NUMBER,
            PASSWORD_NO_SYMBOL,
        ]

    def test_common_check_comes_last(self):
        result = check_password("qwerty")
        assert result.errors[-1] == PASSWORD_COMMON
        assert result.errors[0] == "Password must be at least 8 characters long"

    @pytest.mark.parametrize("value", [None, 12345678, ["Aa1!aaaa"], b"MyP@ssw0rd123"])
    def test_non_string_fails_without_raising(self, value):
        result = check_password(value)
        assert result.valid is False
        assert result.errors[0] == PASSWORD_NOT_STRING
        assert result.password is value

    def test_non_string_checked_like_empty_string(self):
        assert check_password(None).errors == check_password("").errors


# ---------------------------------------------------------------------------
# TestOptions
# ---------------------------------------------------------------------------


class TestOptions:
    def test_custom_min_length(self):
        assert is_password("Pass1!", min_length=6) is True
        assert is_password("MyP@ssw0rd", min_length=12) is False
        assert is_password("MyP@ssw0rd123", min_length=12) is True

    def test_custom_max_length(self):
        result = is_password("ThisIsAVeryLongPassword123!@#", max_length=20, details=True)
        assert result.errors == ["Password must be at most 20 characters long"]
        assert is_password("Short123!", max_length=20) is True

    def test_disabled_requirements(self):
        assert is_password("password123!", require_uppercase=False) is True
        assert is_password("ALLUPPERCASE123!", require_uppercase=False, require_lowercase=False) is True
        assert is_password("PASSWORD123!", require_lowercase=False) is True
        assert is_password("Password!", require_numbers=False) is True
        assert is_password("OnlyLetters", require_numbers=False, require_symbols=False) is True
        assert is_password("Password123", require_symbols=False) is True

    def test_common_check_can_be_disabled(self):
        assert (
            is_password(
                "password123",
                forbid_common_passwords=False,
                require_uppercase=False,
                require_symbols=False,
            )
            is True
        )

    def test_lenient_settings(self):
        opts = PasswordOptions(
            min_length=6,
            require_uppercase=False,
            require_numbers=False,
            require_symbols=False,
            forbid_common_passwords=False,
        )
        assert is_password("simplepass", opts) is True

    def test_options_object_with_details(self):
        result = is_password("Weak1!", PasswordOptions(min_length=12, max_length=64, details=True))
        assert result.errors == ["Password must be at least 12 characters long"]

    def test_unknown_option_raises_type_error(self):
        with pytest.raises(TypeError):
            is_password("MyP@ssw0rd123", minLength=4)

    @pytest.mark.parametrize("symbol", list(PASSWORD_SYMBOLS))
    def test_every_accepted_symbol_counts(self, symbol):
        assert check_password(f"Abcdefg1{symbol}").valid is True

    @pytest.mark.parametrize("char", ["~", "`", " ", "€", "é"])
    def test_other_characters_are_not_symbols(self, char):
        assert check_password(f"Abcdefg1{char}").errors == [PASSWORD_NO_SYMBOL]


# ---------------------------------------------------------------------------
# TestProperties
# ---------------------------------------------------------------------------


class TestProperties:
    @pytest.mark.parametrize("password", ["", "short", "password", "qwerty", "ALLCAPS", "MyP@ssw0rd123", "1234"])
    @pytest.mark.parametrize("flag", _REQUIRE_FLAGS)
    def test_relaxing_a_flag_never_adds_errors(self, password, flag):
        strict = check_password(password).errors or []
        relaxed = check_password(password, **{flag: False}).errors or []
        assert set(relaxed) <= set(strict)
        assert len(relaxed) <= len(strict)

    @pytest.mark.parametrize("password", ["", "weak", "MyP@ssw0rd123", "password123"])
    def test_idempotent(self, password):
        assert check_password(password) == check_password(password)
        assert is_password(password) == is_password(password)

    def test_errors_none_exactly_when_valid(self):
        for password in ["MyP@ssw0rd123", "weak", None]:
            result = check_password(password)
            assert (result.errors is None) == result.valid
