"""Payments platform backend base module."""

from abc import ABC, abstractmethod

from marketpay.payments.backends import CreateAccountHolderRequest


class BasePaymentsBackend(ABC):
    """Base class for all payments platform backends."""

    @abstractmethod
    def create_account_holder(self, request: CreateAccountHolderRequest) -> dict:
        """
        Create an account holder.

        Args:
            request: the account holder to create

        Returns:
            dict: Service response

        Raises:
            PaymentsApiError: If the payments platform rejects the request

        """
