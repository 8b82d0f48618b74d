"""Marketing tasks module."""

from celery import shared_task

from listsync.services import get_list_sync_service


@shared_task
def synchronize_mailing_list(list_id: int, timeout: int = None):
    """Push the stored values of a mailing list to the marketing service."""
    kwargs = {} if timeout is None else {"timeout": timeout}
    return get_list_sync_service(**kwargs).resync(list_id)
