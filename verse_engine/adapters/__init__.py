"""Adapters that load external data into core models."""
