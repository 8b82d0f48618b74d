"""Factories for creating test data."""

import factory.django

from listsync.models import MailingList


class MailingListFactory(factory.django.DjangoModelFactory):
    """A factory to create random mailing lists for testing purposes."""

    first_name = factory.Faker("first_name")
    last_name = factory.Faker("last_name")
    contact = factory.Faker("numerify", text="+33 6 ## ## ## ##")
    email = factory.Sequence(lambda n: f"subscriber{n!s}@example.com")
    subscribed = False

    class Meta:  # noqa: D106
        model = MailingList
