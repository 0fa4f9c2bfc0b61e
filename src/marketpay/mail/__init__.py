"""Mail module."""
