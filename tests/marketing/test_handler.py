"""Test the marketing handler."""

import pytest
from django.core.exceptions import ImproperlyConfigured

from listsync.marketing import marketing_handler
from listsync.marketing.backends.dummy import DummyBackend
from listsync.marketing.backends.locmem import LocMemBackend
from listsync.marketing.backends.mailchimp import MailchimpBackend
from listsync.marketing.exceptions import MarketingInvalidBackendError
from listsync.marketing.handler import MarketingHandler


def test_marketing_handler_from_settings(settings):
    """Test the marketing handler from the settings."""
    settings.LISTSYNC_MARKETING = {
        "BACKEND": "listsync.marketing.backends.dummy.DummyBackend",
    }
    handler = MarketingHandler()
    assert isinstance(handler(), DummyBackend)


def test_marketing_handler_from_backend():
    """Test the marketing handler from the backend."""
    handler = MarketingHandler(
        backend={
            "BACKEND": "listsync.marketing.backends.dummy.DummyBackend",
        }
    )
    assert isinstance(handler(), DummyBackend)


def test_marketing_handler_with_parameters():
    """Test the parameters are given to the backend."""
    handler = MarketingHandler(
        backend={
            "BACKEND": "listsync.marketing.backends.mailchimp.MailchimpBackend",
            "PARAMETERS": {"api_key": "test-api-key-us6", "list_id": "abc123"},
        }
    )
    backend = handler()
    assert isinstance(backend, MailchimpBackend)
    assert backend.list_id == "abc123"
    assert handler() is backend


def test_marketing_backend_no_config(settings):
    """Test the marketing handler when no config set should raise an error."""
    settings.LISTSYNC_MARKETING = None
    handler = MarketingHandler()
    with pytest.raises(ImproperlyConfigured):
        handler()


def test_marketing_backend_no_backend_key():
    """Test the marketing handler when the backend path is missing."""
    handler = MarketingHandler(backend={"PARAMETERS": {}})
    with pytest.raises(ImproperlyConfigured):
        handler()


def test_marketing_backend_invalid_path():
    """Test the marketing handler with a backend that cannot be imported."""
    handler = MarketingHandler(backend={"BACKEND": "listsync.marketing.backends.unknown.UnknownBackend"})
    with pytest.raises(MarketingInvalidBackendError, match="Could not find backend"):
        handler()


def test_marketing_handler_reset_on_setting_change(settings):
    """The module handler follows changes of the settings."""
    assert isinstance(marketing_handler(), LocMemBackend)

    settings.LISTSYNC_MARKETING = {
        "BACKEND": "listsync.marketing.backends.dummy.DummyBackend",
    }

    assert isinstance(marketing_handler(), DummyBackend)
