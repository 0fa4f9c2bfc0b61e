"""Shop synchronization tasks module."""

from celery import shared_task
from django.utils.dateparse import parse_datetime

from marketpay.shops.services import ShopService


@shared_task
def retrieve_updated_shops(updated_since: str | None = None):
    """
    Create the account holders of the shops updated on the operator platform.

    `updated_since` is an optional ISO 8601 datetime restricting the shops
    to those updated after it.
    """
    report = ShopService().retrieve_updated_shops(parse_datetime(updated_since) if updated_since else None)
    return {"submitted": report.submitted, "failed": report.failed}
