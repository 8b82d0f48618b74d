"""Mailchimp marketing automation integration."""

import logging

import requests
from django.core.exceptions import ImproperlyConfigured

from listsync.marketing.backends import MemberData
from listsync.marketing.exceptions import MemberCreationError, MemberDeletionError, MemberUpdateError
from listsync.tools.email import get_subscriber_hash

from .base import BaseBackend

logger = logging.getLogger(__name__)

DEFAULT_MERGE_FIELDS = {
    "first_name": "FNAME",
    "last_name": "LNAME",
    "contact": "PHONE",
}


class MailchimpBackend(BaseBackend):
    """
    Mailchimp Marketing API (v3) integration.

    Each mailing list is mirrored as a member of a single Mailchimp audience,
    addressed by its subscriber hash.
    """

    def __init__(
        self,
        api_key: str,
        list_id: str,
        server: str | None = None,
        merge_fields: dict[str, str] | None = None,
    ):
        """Configure the Mailchimp backend."""
        if not server:
            # API keys end with the datacenter they belong to, e.g. "xxxx-us6"
            _key, _sep, server = api_key.rpartition("-")
            if not _sep or not server:
                raise ImproperlyConfigured("Mailchimp API key has no datacenter suffix and no server was given.")
        self._api_key = api_key
        self.list_id = list_id
        self.api_root = f"https://{server}.api.mailchimp.com/3.0"
        self.merge_fields = merge_fields or DEFAULT_MERGE_FIELDS

    @property
    def members_url(self):
        """URL of the audience members collection."""
        return f"{self.api_root}/lists/{self.list_id}/members"

    def member_url(self, email):
        """URL of the member addressed by `email`."""
        return f"{self.members_url}/{get_subscriber_hash(email)}"

    def get_payload(self, member_data: MemberData) -> dict:
        """Convert member data to the Mailchimp member representation."""
        return {
            "email_address": member_data.email,
            "status": "subscribed" if member_data.subscribed else "unsubscribed",
            "merge_fields": {
                tag: getattr(member_data, attribute) or "" for attribute, tag in self.merge_fields.items()
            },
        }

    def _request(self, method, url, timeout=None, **kwargs):
        response = requests.request(
            method,
            url,
            auth=("listsync", self._api_key),
            timeout=timeout or 10,
            **kwargs,
        )
        logger.debug("Mailchimp %s %s answered %s", method, url, response.status_code)
        response.raise_for_status()
        if response.status_code == requests.codes.no_content or not response.content:
            return {}
        return response.json()

    def create_member(self, member_data: MemberData, timeout: int = None) -> dict:
        """
        Create a Mailchimp audience member.

        Raises:
            MemberCreationError: If the member creation fails

        """
        try:
            return self._request("POST", self.members_url, json=self.get_payload(member_data), timeout=timeout)
        except (requests.RequestException, ValueError) as err:
            raise MemberCreationError("Failed to create member in Mailchimp") from err

    def update_member(self, email: str, member_data: MemberData, timeout: int = None) -> dict:
        """
        Update the Mailchimp audience member addressed by `email`.

        Raises:
            MemberUpdateError: If the member update fails

        """
        try:
            return self._request("PATCH", self.member_url(email), json=self.get_payload(member_data), timeout=timeout)
        except (requests.RequestException, ValueError) as err:
            raise MemberUpdateError("Failed to update member in Mailchimp") from err

    def create_or_update_member(self, member_data: MemberData, timeout: int = None) -> dict:
        """
        Create or update a Mailchimp audience member.

        Raises:
            MemberUpdateError: If the upsert fails

        """
        payload = self.get_payload(member_data)
        payload["status_if_new"] = payload["status"]
        try:
            return self._request("PUT", self.member_url(member_data.email), json=payload, timeout=timeout)
        except (requests.RequestException, ValueError) as err:
            raise MemberUpdateError("Failed to create or update member in Mailchimp") from err

    def delete_member(self, email: str, timeout: int = None) -> dict:
        """
        Archive the Mailchimp audience member addressed by `email`.

        Raises:
            MemberDeletionError: If the member deletion fails

        """
        try:
            return self._request("DELETE", self.member_url(email), timeout=timeout)
        except (requests.RequestException, ValueError) as err:
            raise MemberDeletionError("Failed to delete member in Mailchimp") from err
