"""Core models and logging helpers for version-checker."""
