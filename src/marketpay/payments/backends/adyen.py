"""Adyen MarketPay integration."""

import logging

import requests

from marketpay.exceptions import PaymentsApiError
from marketpay.payments.backends import CreateAccountHolderRequest

from .base import BasePaymentsBackend

logger = logging.getLogger(__name__)


class AdyenBackend(BasePaymentsBackend):
    """
    Adyen MarketPay account API integration.

    Handles:
    - Account holder creation
    """

    def __init__(self, url: str, api_key: str, api_version: int = 6, timeout: int = 30):
        """Configure the Adyen backend."""
        self.url = url.rstrip("/")
        self._api_key = api_key
        self.api_version = api_version
        self._timeout = timeout

    @property
    def account_url(self):
        """Base URL of the account service."""
        return f"{self.url}/Account/v{self.api_version}"

    def create_account_holder(self, request: CreateAccountHolderRequest) -> dict:
        """
        Create an Adyen account holder.

        Args:
            request: the account holder to create

        Returns:
            dict: Adyen API response

        Raises:
            PaymentsApiError: If Adyen cannot be reached or answers with an error.
                The Adyen error body is available as `error`.

        """
        try:
            response = requests.post(
                f"{self.account_url}/createAccountHolder",
                json=request.to_payload(),
                headers={"x-api-key": self._api_key},
                timeout=self._timeout,
            )
        except requests.RequestException as err:
            raise PaymentsApiError("Failed to reach Adyen", error={"message": str(err)}) from err

        if not response.ok:
            try:
                error = response.json()
            except ValueError:
                error = response.text
            raise PaymentsApiError(
                f"Adyen rejected account holder {request.account_holder_code!r}",
                error=error,
                status_code=response.status_code,
            )

        return response.json()
