"""Marketplace operator module."""

from marketpay.handler import BackendHandler, LazyBackend

operator_handler = BackendHandler("MARKETPAY_OPERATOR")
operator_api = LazyBackend(operator_handler)
