"""Detect spoken Bible verse references in transcript text."""
