"""Marketing backends module."""

from dataclasses import dataclass


@dataclass
class MemberData:
    """Member data for marketing service integration."""

    email: str
    first_name: str = ""
    last_name: str = ""
    contact: str = ""
    subscribed: bool = False

    @classmethod
    def from_mailing_list(cls, mailing_list):
        """Build the member data mirroring a stored mailing list."""
        return cls(
            email=mailing_list.email,
            first_name=mailing_list.first_name,
            last_name=mailing_list.last_name,
            contact=mailing_list.contact,
            subscribed=mailing_list.subscribed,
        )
