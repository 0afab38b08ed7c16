"""Detection and slide-mapping services built on the core models."""
