"""Mirakl marketplace operator integration."""

import logging

import requests

from marketpay.exceptions import ShopRetrievalError
from marketpay.operator.backends import GetShopsRequest, ShopRecord, ShopsPage

from .base import BaseOperatorBackend

logger = logging.getLogger(__name__)


class MiraklBackend(BaseOperatorBackend):
    """
    Mirakl Marketplace Platform operator API integration.

    Only the shop listing endpoint is used, authenticated with the operator
    API key.
    """

    def __init__(self, url: str, api_key: str, timeout: int = 10):
        """Configure the Mirakl backend."""
        self.url = url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout

    def get_shops(self, request: GetShopsRequest) -> ShopsPage:
        """List shops from Mirakl."""
        try:
            response = requests.get(
                f"{self.url}/api/shops",
                params=request.to_params(),
                headers={"Authorization": self._api_key, "Accept": "application/json"},
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as err:
            raise ShopRetrievalError(f"Failed to retrieve shops from Mirakl at offset {request.offset}") from err

        try:
            shops = [ShopRecord.from_dict(shop) for shop in payload.get("shops", [])]
        except KeyError as err:
            raise ShopRetrievalError(f"Mirakl returned a shop without identifier at offset {request.offset}") from err
        total_count = payload.get("total_count", len(shops))
        logger.debug("Mirakl returned %d shops at offset %d (total %d)", len(shops), request.offset, total_count)
        return ShopsPage(shops=shops, total_count=total_count)
