"""Test the in-memory marketing backend."""

import pytest

from listsync.marketing.backends import MemberData
from listsync.marketing.backends.locmem import LocMemBackend
from listsync.marketing.exceptions import MemberCreationError, MemberDeletionError, MemberUpdateError
from listsync.tools.email import get_subscriber_hash


@pytest.fixture(name="member_data")
def fixture_member_data():
    """Return the data of a member."""
    return MemberData(email="Test@Example.com", first_name="Test", last_name="User", subscribed=True)


def test_locmem_create_member(member_data):
    """Members are stored under their subscriber hash."""
    backend = LocMemBackend()

    response = backend.create_member(member_data)

    subscriber_hash = get_subscriber_hash("test@example.com")
    assert response["id"] == subscriber_hash
    assert backend.get_member("test@example.com")["first_name"] == "Test"
    assert backend.calls == [("create", subscriber_hash)]


def test_locmem_create_existing_member(member_data):
    """A member cannot be created twice."""
    backend = LocMemBackend()
    backend.create_member(member_data)

    with pytest.raises(MemberCreationError):
        backend.create_member(member_data)


def test_locmem_create_member_invalid_email():
    """A member without a valid email cannot be created."""
    backend = LocMemBackend()

    with pytest.raises(MemberCreationError, match="Invalid email address"):
        backend.create_member(MemberData(email=""))


def test_locmem_update_unknown_member(member_data):
    """Updating an unknown member fails."""
    backend = LocMemBackend()

    with pytest.raises(MemberUpdateError):
        backend.update_member("test@example.com", member_data)


def test_locmem_create_or_update_member(member_data):
    """The upsert stores the member whether or not it exists."""
    backend = LocMemBackend()
    backend.create_or_update_member(member_data)
    member_data.first_name = "Changed"
    backend.create_or_update_member(member_data)

    assert backend.get_member("test@example.com")["first_name"] == "Changed"
    assert len(backend.members) == 1


def test_locmem_delete_member(member_data):
    """Deleting a member forgets it, deleting it again fails."""
    backend = LocMemBackend()
    backend.create_member(member_data)

    assert backend.delete_member("test@example.com") == {}
    assert backend.get_member("test@example.com") is None

    with pytest.raises(MemberDeletionError):
        backend.delete_member("test@example.com")
