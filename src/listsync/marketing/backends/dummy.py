"""Dummy marketing backend."""

from listsync.marketing.backends import MemberData

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """Dummy marketing backend doing nothing."""

    def create_member(self, member_data: MemberData, timeout: int = None) -> dict:
        """Create a member."""
        return {}

    def update_member(self, email: str, member_data: MemberData, timeout: int = None) -> dict:
        """Update a member."""
        return {}

    def create_or_update_member(self, member_data: MemberData, timeout: int = None) -> dict:
        """Create or update a member."""
        return {}

    def delete_member(self, email: str, timeout: int = None) -> dict:
        """Delete a member."""
        return {}
