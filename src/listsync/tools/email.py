"""Email related tools."""

import hashlib
from email.errors import HeaderParseError
from email.headerregistry import Address


def normalize_email(email: str | None) -> str | None:
    """Return the lower-cased address if it is a well-formed email, None otherwise."""
    try:
        address = Address(addr_spec=email.strip())
        if len(address.username) > 64 or len(address.domain) > 255:  # noqa: PLR2004
            # Simple length validation using the RFC 5321 limits
            return None
        if not address.username or not address.domain:
            return None
        return address.addr_spec.lower()
    except (ValueError, AttributeError, IndexError, HeaderParseError):
        return None


def get_subscriber_hash(email: str | None) -> str:
    """
    Compute the Mailchimp subscriber hash of an email address.

    Mailchimp addresses audience members by the MD5 hex digest of their
    lower-cased email address.

    Raises:
        ValueError: If the email is empty or malformed.

    """
    normalized = normalize_email(email)
    if normalized is None:
        raise ValueError(f"Invalid email address: {email!r}")
    return hashlib.md5(normalized.encode("utf-8")).hexdigest()  # noqa: S324
