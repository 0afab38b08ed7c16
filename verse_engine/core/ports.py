"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol

from verse_engine.core.models import PresentationItem, PresentationLibrary


class PresentationLibraryPort(Protocol):
    """Port exposing the libraries and presentations of the presentation software."""

    def list_libraries(self) -> list[PresentationLibrary]:
        """Return every library known to the presentation software."""
        ...

    def list_items(self, library_id: str) -> list[PresentationItem]:
        """Return the presentations stored in ``library_id``."""
        ...


__all__ = ["PresentationLibraryPort"]
