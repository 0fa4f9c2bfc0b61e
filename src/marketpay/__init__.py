"""Marketplace operator to payments platform connector."""
