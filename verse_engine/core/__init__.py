"""Core configuration, models, and ports shared across layers."""
