"""Marketing backend handler."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from listsync.marketing.exceptions import MarketingInvalidBackendError


class MarketingHandler:
    """Marketing handler managing the backend instantiation."""

    def __init__(self, backend=None):
        """Initialize the marketing handler."""
        # backend is an optional dict of marketing backend definitions
        # (structured like settings.LISTSYNC_MARKETING).
        self._backend = backend
        self._marketing = None

    @cached_property
    def backend(self):
        """Put in cache the backend properties from the settings."""
        if self._backend is not None:
            return self._backend
        try:
            return settings.LISTSYNC_MARKETING.copy()
        except AttributeError as e:
            raise ImproperlyConfigured("settings.LISTSYNC_MARKETING is not configured") from e

    def __call__(self):
        """Create if not existing the backend and then return it."""
        if self._marketing is None:
            self._marketing = self.create_marketing(self.backend)
        return self._marketing

    def reset(self):
        """Forget the backend instance and definitions so the settings are read again."""
        self.__dict__.pop("backend", None)
        self._marketing = None

    def create_marketing(self, params):
        """Instantiate and configure the marketing backend."""
        params = params.copy()
        try:
            backend = params.pop("BACKEND")
        except KeyError as e:
            raise ImproperlyConfigured("settings.LISTSYNC_MARKETING has no BACKEND") from e
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise MarketingInvalidBackendError(f"Could not find backend {backend!r}: {e}") from e
        return klass(**parameters)
