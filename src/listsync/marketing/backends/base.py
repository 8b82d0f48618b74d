"""Marketing backend base module."""

from abc import ABC, abstractmethod

from listsync.marketing.backends import MemberData


class BaseBackend(ABC):
    """Base class for all marketing backends."""

    @abstractmethod
    def create_member(self, member_data: MemberData, timeout: int = None) -> dict:
        """
        Create a member in the remote list.

        Args:
            member_data: Member information
            timeout: API request timeout in seconds

        Returns:
            dict: Service response

        Raises:
            MemberCreationError: If member creation fails

        """

    @abstractmethod
    def update_member(self, email: str, member_data: MemberData, timeout: int = None) -> dict:
        """
        Update the member addressed by `email`.

        Raises:
            MemberUpdateError: If the member does not exist or the update fails

        """

    @abstractmethod
    def create_or_update_member(self, member_data: MemberData, timeout: int = None) -> dict:
        """
        Create the member, or update it when it already exists.

        Raises:
            MemberUpdateError: If the upsert fails

        """

    @abstractmethod
    def delete_member(self, email: str, timeout: int = None) -> dict:
        """
        Delete the member addressed by `email`.

        Raises:
            MemberDeletionError: If the member does not exist or the deletion fails

        """
