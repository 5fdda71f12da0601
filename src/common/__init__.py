"""Shared helpers: URL-safe codec, sequence helpers and logging utilities."""
