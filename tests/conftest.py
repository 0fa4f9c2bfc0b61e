"""Fixtures for the test suite."""

import pytest
from test_project.celery import app as celery_app

from marketpay.operator.backends import ShopRecord


@pytest.fixture(autouse=True)
def _celery_app():
    """Make the test project celery application (eager mode) the current one."""
    celery_app.set_current()


@pytest.fixture(name="shop_data_factory")
def fixture_shop_data_factory():
    """Return a callable building shops as returned by the operator API."""

    def factory(
        shop_id="S123",
        legal_entity="Individual",
        civility="Mr",
        email="seller@example.com",
        with_contact=True,
        extra_fields=None,
    ):
        fields = list(extra_fields or [])
        if legal_entity is not None:
            fields.append({"code": "adyen-legal-entity-type", "type": "LIST", "value": legal_entity})
        data = {
            "shop_id": shop_id,
            "shop_name": f"Shop {shop_id}",
            "shop_additional_fields": fields,
        }
        if with_contact:
            data["contact_informations"] = {
                "civility": civility,
                "firstname": "Jane",
                "lastname": "Doe",
                "email": email,
            }
        return data

    return factory


@pytest.fixture(name="shop_factory")
def fixture_shop_factory(shop_data_factory):
    """Return a callable building shop records."""

    def factory(**kwargs):
        return ShopRecord.from_dict(shop_data_factory(**kwargs))

    return factory
