"""Utilities: logging setup and the lottery event feed."""
