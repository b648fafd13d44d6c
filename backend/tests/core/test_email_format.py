"""Email format tests — pure tests for is_valid_email.

Tests cover:
    - Ordinary addresses, subdomains and plus/percent local parts pass
    - Missing @, missing domain, missing or 1-letter TLD fail
    - Numeric TLD fails
    - Whole-string matching (no substring hits, no trailing newline)
    - Non-string input fails
"""

import pytest

from registration_api.core.email_format import is_valid_email


@pytest.mark.parametrize("email", [
    "melisacar@example.com",
    "first.last@example.co.uk",
    "user+tag@mail.example.org",
    "a_b%c-d@sub-domain.example.io",
    "UPPER@EXAMPLE.COM",
    "x@y.zz",
])
def test_accepts_well_formed_addresses(email):
    assert is_valid_email(email) is True


@pytest.mark.parametrize("email", [
    "",
    "not-an-email",
    "missing-at.example.com",
    "user@",
    "@example.com",
    "user@example",
    "user@example.c",
    "user@example.c0m",
    "user@example.123",
    "user name@example.com",
    "user@exa mple.com",
    "user@@example.com",
])
def test_rejects_malformed_addresses(email):
    assert is_valid_email(email) is False


def test_requires_whole_string_match():
    assert is_valid_email("contact: user@example.com") is False
    assert is_valid_email("user@example.com and more") is False


def test_rejects_trailing_newline():
    assert is_valid_email("user@example.com\n") is False


def test_no_internationalized_domains():
    assert is_valid_email("user@exämple.com") is False


def test_non_string_is_invalid():
    assert is_valid_email(None) is False
    assert is_valid_email(42) is False
