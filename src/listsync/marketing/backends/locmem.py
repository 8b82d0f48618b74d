"""In-memory marketing backend."""

from dataclasses import asdict

from listsync.marketing.backends import MemberData
from listsync.marketing.exceptions import MemberCreationError, MemberDeletionError, MemberUpdateError
from listsync.tools.email import get_subscriber_hash

from .base import BaseBackend


class LocMemBackend(BaseBackend):
    """
    Marketing backend keeping members in memory.

    Every call is recorded in `calls` as an `(operation, subscriber_hash)` tuple,
    which makes it suitable for tests and local development.
    """

    def __init__(self):
        """Start with an empty audience."""
        self.members = {}
        self.calls = []

    def _hash(self, email, error_class):
        try:
            return get_subscriber_hash(email)
        except ValueError as err:
            raise error_class(str(err)) from err

    def create_member(self, member_data: MemberData, timeout: int = None) -> dict:
        """Create a member, failing if it already exists."""
        subscriber_hash = self._hash(member_data.email, MemberCreationError)
        self.calls.append(("create", subscriber_hash))
        if subscriber_hash in self.members:
            raise MemberCreationError(f"Member {member_data.email} already exists")
        self.members[subscriber_hash] = asdict(member_data)
        return {"id": subscriber_hash, **self.members[subscriber_hash]}

    def update_member(self, email: str, member_data: MemberData, timeout: int = None) -> dict:
        """Update an existing member, re-keying it when its email changes."""
        subscriber_hash = self._hash(email, MemberUpdateError)
        self.calls.append(("update", subscriber_hash))
        if subscriber_hash not in self.members:
            raise MemberUpdateError(f"Member {email} does not exist")
        del self.members[subscriber_hash]
        new_hash = self._hash(member_data.email, MemberUpdateError)
        self.members[new_hash] = asdict(member_data)
        return {"id": new_hash, **self.members[new_hash]}

    def create_or_update_member(self, member_data: MemberData, timeout: int = None) -> dict:
        """Store the member whether or not it exists."""
        subscriber_hash = self._hash(member_data.email, MemberUpdateError)
        self.calls.append(("upsert", subscriber_hash))
        self.members[subscriber_hash] = asdict(member_data)
        return {"id": subscriber_hash, **self.members[subscriber_hash]}

    def delete_member(self, email: str, timeout: int = None) -> dict:
        """Delete an existing member."""
        subscriber_hash = self._hash(email, MemberDeletionError)
        self.calls.append(("delete", subscriber_hash))
        if self.members.pop(subscriber_hash, None) is None:
            raise MemberDeletionError(f"Member {email} does not exist")
        return {}

    def get_member(self, email: str) -> dict | None:
        """Return the stored member fields, if any."""
        return self.members.get(get_subscriber_hash(email))
