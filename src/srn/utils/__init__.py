"""Shared helpers: config loading and config-root detection."""
