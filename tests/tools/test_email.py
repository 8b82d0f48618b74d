"""Tests for email tools."""

import hashlib

import pytest

from listsync.tools.email import get_subscriber_hash, normalize_email


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("user@example.com", "user@example.com"),
        ("User@Example.COM", "user@example.com"),
        ("  name+tag@gmail.com ", "name+tag@gmail.com"),
        ("test.user@sub.domain.co.uk", "test.user@sub.domain.co.uk"),
        ("user@localhost", "user@localhost"),
    ],
)
def test_normalize_email_valid(email, expected):
    """Test normalizing valid email addresses."""
    assert normalize_email(email) == expected


@pytest.mark.parametrize(
    "invalid_email",
    [
        None,
        "",
        "invalid-email",
        "user@",
        "@domain.com",
        "user@domain@com",
        "user@@domain.com",
        "user domain.com",
        "<script>alert('XSS')</script>@example.com",
        "user@example.com;drop table users",
    ],
)
def test_normalize_email_invalid(invalid_email):
    """Test handling of invalid email addresses."""
    assert normalize_email(invalid_email) is None


def test_normalize_email_length_limits():
    """Test handling of extremely long email addresses."""
    assert normalize_email("a" * 65 + "@example.com") is None


def test_get_subscriber_hash():
    """Test the hash is computed on the lower-cased address."""
    expected = hashlib.md5(b"user@example.com").hexdigest()  # noqa: S324
    assert get_subscriber_hash("User@Example.com") == expected
    assert get_subscriber_hash("user@example.com") == expected


@pytest.mark.parametrize("invalid_email", [None, "", "invalid-email"])
def test_get_subscriber_hash_invalid(invalid_email):
    """Test an invalid email cannot be hashed."""
    with pytest.raises(ValueError, match="Invalid email address"):
        get_subscriber_hash(invalid_email)
