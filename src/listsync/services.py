"""Mailing list synchronization service."""

import logging
from contextlib import contextmanager

from django.conf import settings
from django.db import DatabaseError, transaction

from listsync.exceptions import (
    MailingListNotFoundError,
    MailingListValidationError,
    RemoteSyncError,
    StorageError,
)
from listsync.marketing import marketing_handler
from listsync.marketing.backends import MemberData
from listsync.marketing.exceptions import MarketingError
from listsync.models import MailingList
from listsync.serializers import MailingListSerializer, MemberEmailSerializer
from listsync.tools.email import normalize_email

logger = logging.getLogger(__name__)


class ListSyncService:
    """
    Apply mailing list changes to the database and mirror them to the marketing service.

    Every write stores the row first, then calls the marketing backend, both inside
    a single database transaction: when the backend fails, the local write is
    rolled back so both sides never diverge.

    The marketing backend and the model used as storage are given by the caller.
    """

    serializer_class = MailingListSerializer

    def __init__(self, backend, model=MailingList, timeout: int | None = None):
        """Keep the collaborators of the service."""
        self.backend = backend
        self.model = model
        self.timeout = timeout

    def get_serializer(self, *args, **kwargs):
        """Return the serializer validating mailing list data."""
        return self.serializer_class(*args, **kwargs)

    @contextmanager
    def synchronized_write(self, operation, target):
        """Run a local write and its remote counterpart as one unit, `target` naming the list in logs."""
        try:
            with transaction.atomic():
                yield
        except MarketingError as err:
            logger.exception("Marketing service failed, %s of mailing list %s rolled back", operation, target)
            raise RemoteSyncError() from err
        except DatabaseError as err:
            logger.exception("Database failed during %s of mailing list %s", operation, target)
            raise StorageError() from err

    def validate_member_email(self, email):
        """Return the email addressing a remote member, or raise if it is malformed."""
        serializer = MemberEmailSerializer(data={"email": email})
        if not serializer.is_valid():
            raise MailingListValidationError(serializer.errors)
        return serializer.validated_data["email"]

    def get_member_email(self, mailing_list, email):
        """
        Return the email addressing the remote member of `mailing_list`.

        A supplied email must be the one stored for the list, so a write never
        reaches the remote member of another list.
        """
        if email is None:
            return mailing_list.email
        email = self.validate_member_email(email)
        if normalize_email(email) != normalize_email(mailing_list.email):
            raise MailingListValidationError({"email": ["This email does not belong to the mailing list."]})
        return mailing_list.email

    def create(self, data):
        """Create a mailing list and its remote member."""
        serializer = self.get_serializer(data=data)
        if not serializer.is_valid():
            raise MailingListValidationError(serializer.errors)

        with self.synchronized_write("create", serializer.validated_data["email"]):
            mailing_list = serializer.save()
            self.backend.create_member(MemberData.from_mailing_list(mailing_list), timeout=self.timeout)

        logger.info("Mailing list %s created", mailing_list.pk)
        return mailing_list

    def show(self, list_id):
        """Return the stored mailing list, without calling the marketing service."""
        try:
            return self.model.objects.get(pk=list_id)
        except (self.model.DoesNotExist, ValueError, TypeError, OverflowError) as err:
            raise MailingListNotFoundError(list_id) from err
        except DatabaseError as err:
            logger.exception("Database failed while reading mailing list %s", list_id)
            raise StorageError() from err

    def update(self, list_id, data, email=None):
        """
        Update the supplied fields of a mailing list and its remote member.

        The remote member is addressed by the email stored before the update;
        a supplied `email` must match it.
        """
        mailing_list = self.show(list_id)
        member_email = self.get_member_email(mailing_list, email)

        serializer = self.get_serializer(mailing_list, data=data, partial=True)
        if not serializer.is_valid():
            raise MailingListValidationError(serializer.errors)

        with self.synchronized_write("update", list_id):
            mailing_list = serializer.save()
            self.backend.update_member(
                member_email, MemberData.from_mailing_list(mailing_list), timeout=self.timeout
            )

        logger.info("Mailing list %s updated", list_id)
        return mailing_list

    def remove(self, list_id, email):
        """Delete a mailing list and its remote member, addressed by the email the caller must supply."""
        self.validate_member_email(email)
        mailing_list = self.show(list_id)
        member_email = self.get_member_email(mailing_list, email)

        with self.synchronized_write("remove", list_id):
            mailing_list.delete()
            self.backend.delete_member(member_email, timeout=self.timeout)

        logger.info("Mailing list %s removed", list_id)

    def resync(self, list_id):
        """Push the stored values of a mailing list to its remote member."""
        mailing_list = self.show(list_id)
        try:
            response = self.backend.create_or_update_member(
                MemberData.from_mailing_list(mailing_list), timeout=self.timeout
            )
        except MarketingError as err:
            logger.exception("Marketing service failed to resynchronize mailing list %s", list_id)
            raise RemoteSyncError() from err

        logger.info("Mailing list %s resynchronized", list_id)
        return response


def get_list_sync_service(**kwargs):
    """Build the service with the configured marketing backend."""
    kwargs.setdefault("timeout", getattr(settings, "LISTSYNC_MARKETING_TIMEOUT", None))
    return ListSyncService(marketing_handler(), **kwargs)
