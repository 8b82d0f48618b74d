"""Mailing list synchronization application."""

from django.apps import AppConfig
from django.core.signals import setting_changed


def reset_marketing_backend(*, setting, **kwargs):
    """Drop the cached marketing backend when its settings change."""
    if setting == "LISTSYNC_MARKETING":
        from listsync.marketing import marketing_handler  # noqa: PLC0415

        marketing_handler.reset()


class ListSyncConfig(AppConfig):
    """Configuration class for the listsync app."""

    name = "listsync"
    verbose_name = "Mailing list synchronization"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self):
        """Listen to settings changes."""
        setting_changed.connect(reset_marketing_backend, dispatch_uid="listsync_reset_marketing_backend")
