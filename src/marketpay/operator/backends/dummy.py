"""Dummy marketplace operator backend."""

from marketpay.operator.backends import GetShopsRequest, ShopRecord, ShopsPage

from .base import BaseOperatorBackend


class DummyBackend(BaseOperatorBackend):
    """In-memory operator backend serving a fixed list of shops."""

    def __init__(self, shops: list[dict] | None = None, page_size: int = 100):
        """Store the shops to serve."""
        self.shops = [ShopRecord.from_dict(shop) for shop in shops or []]
        self.page_size = page_size
        self.requests = []

    def get_shops(self, request: GetShopsRequest) -> ShopsPage:
        """Return the page of shops starting at the request offset."""
        self.requests.append(request)
        page = self.shops[request.offset : request.offset + self.page_size]
        return ShopsPage(shops=page, total_count=len(self.shops))
