"""Test the Mirakl operator backend."""

from datetime import UTC, datetime

import pytest
import responses
from responses import matchers

from marketpay.exceptions import ShopRetrievalError
from marketpay.operator.backends import AdditionalFieldType, GetShopsRequest
from marketpay.operator.backends.mirakl import MiraklBackend


@pytest.fixture(name="mirakl_backend")
def fixture_mirakl_backend():
    """Generate a Mirakl backend."""
    return MiraklBackend(url="https://mirakl.example.com/", api_key="test-api-key")


@responses.activate
def test_get_shops_success(mirakl_backend):
    """Shops are parsed from the Mirakl payload."""
    responses.add(
        responses.GET,
        "https://mirakl.example.com/api/shops",
        match=[
            matchers.query_param_matcher({"paginate": "false", "offset": "0"}),
            matchers.header_matcher({"Authorization": "test-api-key"}),
        ],
        json={
            "shops": [
                {
                    "shop_id": 2001,
                    "shop_name": "My shop",
                    "contact_informations": {
                        "civility": "Mrs",
                        "firstname": "Jane",
                        "lastname": "Doe",
                        "email": "jane@example.com",
                    },
                    "shop_additional_fields": [
                        {"code": "adyen-legal-entity-type", "type": "LIST", "value": "INDIVIDUAL"},
                        {"code": "vat", "type": "STRING", "value": "FR123"},
                    ],
                }
            ],
            "total_count": 3,
        },
    )

    page = mirakl_backend.get_shops(GetShopsRequest())

    assert page.total_count == 3
    assert len(page.shops) == 1
    shop = page.shops[0]
    assert shop.id == "2001"
    assert shop.name == "My shop"
    assert shop.contact_information.email == "jane@example.com"
    assert shop.contact_information.civility == "Mrs"
    assert shop.additional_field_values[0].type == AdditionalFieldType.LIST
    assert shop.additional_field_values[1].value == "FR123"


@responses.activate
def test_get_shops_with_offset_and_updated_since(mirakl_backend):
    """The offset and the change cursor are sent as query parameters."""
    responses.add(
        responses.GET,
        "https://mirakl.example.com/api/shops",
        match=[
            matchers.query_param_matcher(
                {"paginate": "false", "offset": "10", "updated_since": "2024-01-02T03:04:05+00:00"}
            ),
        ],
        json={"shops": [], "total_count": 10},
    )

    page = mirakl_backend.get_shops(
        GetShopsRequest(offset=10, updated_since=datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC))
    )

    assert page.shops == []
    assert page.total_count == 10


@responses.activate
def test_get_shops_error(mirakl_backend):
    """HTTP errors are raised as retrieval errors."""
    responses.add(responses.GET, "https://mirakl.example.com/api/shops", status=500)

    with pytest.raises(ShopRetrievalError, match="Failed to retrieve shops from Mirakl at offset 0"):
        mirakl_backend.get_shops(GetShopsRequest())


@responses.activate
def test_get_shops_without_identifier(mirakl_backend):
    """A shop without identifier makes the page unusable."""
    responses.add(
        responses.GET,
        "https://mirakl.example.com/api/shops",
        json={"shops": [{"shop_name": "Nameless"}], "total_count": 1},
    )

    with pytest.raises(ShopRetrievalError, match="Mirakl returned a shop without identifier at offset 0"):
        mirakl_backend.get_shops(GetShopsRequest())
