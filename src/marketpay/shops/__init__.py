"""Shop synchronization module."""
