"""Payments platform module."""

from marketpay.handler import BackendHandler, LazyBackend

payments_handler = BackendHandler("MARKETPAY_PAYMENTS")
payments_api = LazyBackend(payments_handler)
