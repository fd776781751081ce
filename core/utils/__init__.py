"""Init module."""
