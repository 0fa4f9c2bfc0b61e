"""Test the backend handler."""

import pytest
from django.core.exceptions import ImproperlyConfigured

from marketpay.exceptions import MarketpayInvalidBackendError
from marketpay.handler import BackendHandler, LazyBackend
from marketpay.operator.backends.dummy import DummyBackend as DummyOperatorBackend
from marketpay.payments.backends.dummy import DummyBackend as DummyPaymentsBackend


def test_backend_handler_from_settings(settings):
    """Test the backend handler from the settings."""
    settings.MARKETPAY_PAYMENTS = {
        "BACKEND": "marketpay.payments.backends.dummy.DummyBackend",
    }
    handler = BackendHandler("MARKETPAY_PAYMENTS")
    assert isinstance(handler(), DummyPaymentsBackend)


def test_backend_handler_from_backend():
    """Test the backend handler with parameters given to the backend."""
    handler = BackendHandler(
        "MARKETPAY_OPERATOR",
        backend={
            "BACKEND": "marketpay.operator.backends.dummy.DummyBackend",
            "PARAMETERS": {"shops": [{"shop_id": "1"}], "page_size": 10},
        },
    )
    backend = handler()
    assert isinstance(backend, DummyOperatorBackend)
    assert backend.page_size == 10
    assert [shop.id for shop in backend.shops] == ["1"]


def test_backend_handler_returns_same_instance():
    """The backend is instantiated only once."""
    handler = BackendHandler(
        "MARKETPAY_PAYMENTS", backend={"BACKEND": "marketpay.payments.backends.dummy.DummyBackend"}
    )
    assert handler() is handler()


def test_backend_handler_no_config(settings):
    """Test the backend handler when no config set should raise an error."""
    settings.MARKETPAY_PAYMENTS = None
    handler = BackendHandler("MARKETPAY_PAYMENTS")
    with pytest.raises(ImproperlyConfigured, match="settings.MARKETPAY_PAYMENTS is not configured"):
        handler()


def test_backend_handler_invalid_backend():
    """An unknown backend path raises a marketpay error."""
    handler = BackendHandler("MARKETPAY_PAYMENTS", backend={"BACKEND": "marketpay.payments.backends.nope.Backend"})
    with pytest.raises(MarketpayInvalidBackendError, match="Could not find backend"):
        handler()


def test_lazy_backend(settings):
    """The lazy backend resolves the handler on first access only."""
    settings.MARKETPAY_PAYMENTS = {
        "BACKEND": "marketpay.payments.backends.dummy.DummyBackend",
    }
    handler = BackendHandler("MARKETPAY_PAYMENTS")
    lazy = LazyBackend(handler)
    assert handler._instance is None  # noqa: SLF001
    assert lazy.account_holder_requests == []
    assert isinstance(handler._instance, DummyPaymentsBackend)  # noqa: SLF001
