"""Filtered form responses API."""
