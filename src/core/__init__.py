"""Shared core models, configuration and errors."""
