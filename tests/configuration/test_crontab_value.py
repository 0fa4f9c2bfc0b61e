"""Tests for CrontabValue."""

import pytest
from celery.schedules import crontab

from marketpay.configuration.values import CrontabValue


@pytest.fixture(autouse=True)
def _mock_clear_env(monkeypatch):
    """Reset environment variables."""
    monkeypatch.delenv("DJANGO_TEST_SHOP_SYNC_CRON", raising=False)


def test_crontab_default():
    """Test call with no environment variable."""
    value = CrontabValue("*/5 * * * *")
    assert value.setup("TEST_SHOP_SYNC_CRON") == crontab(minute="*/5")


def test_crontab_in_env(monkeypatch):
    """Test call with cron environment variable."""
    monkeypatch.setenv("DJANGO_TEST_SHOP_SYNC_CRON", "30 2 * * *")
    value = CrontabValue("*/5 * * * *")
    assert value.setup("TEST_SHOP_SYNC_CRON") == crontab(minute="30", hour="2")


def test_crontab_invalid_in_env(monkeypatch):
    """Test call with a malformed cron environment variable."""
    monkeypatch.setenv("DJANGO_TEST_SHOP_SYNC_CRON", "every minute")
    value = CrontabValue("*/5 * * * *")
    with pytest.raises(ValueError, match="Cannot interpret cron expression 'every minute'"):
        value.setup("TEST_SHOP_SYNC_CRON")
