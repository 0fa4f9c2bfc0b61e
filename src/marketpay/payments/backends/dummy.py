"""Dummy payments backend."""

from marketpay.payments.backends import CreateAccountHolderRequest

from .base import BasePaymentsBackend


class DummyBackend(BasePaymentsBackend):
    """Payments backend recording the requests it receives."""

    def __init__(self):
        """Start with no recorded request."""
        self.account_holder_requests = []

    def create_account_holder(self, request: CreateAccountHolderRequest) -> dict:
        """Record the request."""
        self.account_holder_requests.append(request)
        return {"accountHolderCode": request.account_holder_code, "accountHolderStatus": {"status": "Active"}}
