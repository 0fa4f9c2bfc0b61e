"""Celery beat schedule for the shop synchronization."""

from celery.schedules import crontab
from django.conf import settings

DEFAULT_SHOP_SYNC_CRON = "*/5 * * * *"
SHOP_SYNC_TASK = "marketpay.shops.tasks.retrieve_updated_shops"


def parse_crontab(expression: str) -> crontab:
    """Build a celery crontab from a five fields cron expression."""
    fields = expression.split()
    if len(fields) != 5:  # noqa: PLR2004
        raise ValueError(f"Cron expression {expression!r} must have 5 fields, got {len(fields)}")
    minute, hour, day_of_month, month_of_year, day_of_week = fields
    return crontab(
        minute=minute,
        hour=hour,
        day_of_month=day_of_month,
        month_of_year=month_of_year,
        day_of_week=day_of_week,
    )


def get_beat_schedule() -> dict:
    """
    Return the celery beat entry running the shop synchronization.

    Merge it in the project `CELERY_BEAT_SCHEDULE`.
    """
    schedule = getattr(settings, "MARKETPAY_SHOP_SYNC_CRON", None) or DEFAULT_SHOP_SYNC_CRON
    if isinstance(schedule, str):
        schedule = parse_crontab(schedule)
    return {
        "marketpay-retrieve-updated-shops": {
            "task": SHOP_SYNC_TASK,
            "schedule": schedule,
        },
    }
