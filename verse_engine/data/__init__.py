"""Bundled canonical book dataset."""
