"""Marketpay application."""

from django.apps import AppConfig


class MarketpayConfig(AppConfig):
    """Configuration class for the marketpay app."""

    name = "marketpay"
    verbose_name = "Marketplace payments connector"
