"""Marketplace operator backend base module."""

from abc import ABC, abstractmethod

from marketpay.operator.backends import GetShopsRequest, ShopsPage


class BaseOperatorBackend(ABC):
    """Base class for all marketplace operator backends."""

    @abstractmethod
    def get_shops(self, request: GetShopsRequest) -> ShopsPage:
        """
        List the shops matching the request.

        Args:
            request: pagination and filtering parameters

        Returns:
            ShopsPage: the shops of the page and the total count

        Raises:
            ShopRetrievalError: If the shops cannot be retrieved

        """
