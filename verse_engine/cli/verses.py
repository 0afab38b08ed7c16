"""CLI commands for detecting references and mapping them to slides."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from verse_engine.adapters.book_dataset import load_book_table
from verse_engine.core.config import config
from verse_engine.core.logging import correlation_id_context
from verse_engine.core.models import DetectedVerse, Reference
from verse_engine.services.book_matcher import BookNameMatcher
from verse_engine.services.book_table import BookTable
from verse_engine.services.slide_map import SlideMap
from verse_engine.services.spoken_forms import normalize
from verse_engine.services.transcript_session import TranscriptSession
from verse_engine.services.verse_detector import VerseDetector

console = Console()


@lru_cache(maxsize=1)
def _get_table() -> BookTable:
    """Load the book table once per process."""
    return load_book_table()


def _get_detector() -> VerseDetector:
    return VerseDetector(_get_table())


def _verses_table(title: str, verses: list[DetectedVerse]) -> Table:
    table = Table(title=title)
    table.add_column("Reference", style="cyan")
    table.add_column("Code")
    table.add_column("Confidence")
    table.add_column("File Stem", style="dim")
    for verse in verses:
        reference = verse.reference
        table.add_row(
            reference.display_string,
            reference.book_code,
            verse.confidence.label,
            reference.filename_stem,
        )
    return table


def detect(text: str = typer.Argument(..., help="Transcript text to scan")) -> None:
    """Detect verse references in TEXT."""
    with correlation_id_context("cli-detect"):
        verses = _get_detector().detect(text)

    if not verses:
        console.print("[dim]No references found.[/dim]")
        return
    console.print(_verses_table("Detected References", verses))


def normalize_text(text: str = typer.Argument(..., help="Spoken text to normalize")) -> None:
    """Show TEXT after spoken-form normalization."""
    console.print(normalize(text), markup=False)


def match(name: str = typer.Argument(..., help="Book name, alias, or misspelling")) -> None:
    """Resolve NAME to a canonical book."""
    book = BookNameMatcher(_get_table()).match(name)
    if book is None:
        console.print(f"[red]Error:[/red] no book matches '{name}'")
        raise typer.Exit(1)

    console.print(f"[bold]Code:[/bold] {book.code}")
    console.print(f"[bold]Name:[/bold] {book.name}")
    console.print(f"[bold]Chapters:[/bold] {book.chapter_count}")
    console.print(f"[bold]Verses:[/bold] {book.total_verses}")


def transcript(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Text file, one segment per line"
    ),
    window: int = typer.Option(
        config.CROSS_SEGMENT_WINDOW, "--window", "-w", help="Confirmed segments to look back over"
    ),
) -> None:
    """Detect references across the segments of a transcript FILE."""
    session = TranscriptSession(_get_detector(), window=window)
    with correlation_id_context(f"cli-transcript:{path.name}"):
        for number, line in enumerate(path.read_text(encoding="utf-8").splitlines()):
            if line.strip():
                session.add_segment(line.strip(), start_time=float(number))

    verses = session.detected_verses
    if not verses:
        console.print("[dim]No references found.[/dim]")
        return

    table = Table(title="Transcript References")
    table.add_column("Time")
    table.add_column("Reference", style="cyan")
    table.add_column("Confidence")
    for segment in session.segments:
        for verse in segment.detected_references:
            table.add_row(
                segment.formatted_time,
                verse.reference.display_string,
                verse.confidence.label,
            )
    console.print(table)


def slide(
    book_name: str = typer.Argument(..., metavar="BOOK", help="Book name or code"),
    chapter: int = typer.Argument(..., help="Chapter number"),
    verse: int = typer.Argument(..., help="Verse number"),
    presentation_id: str = typer.Option(
        ..., "--presentation-id", "-p", help="Presentation id holding the book"
    ),
) -> None:
    """Show the slide index for BOOK CHAPTER:VERSE in a one-slide-per-verse presentation."""
    table = _get_table()
    book = BookNameMatcher(table).match(book_name)
    if book is None:
        console.print(f"[red]Error:[/red] no book matches '{book_name}'")
        raise typer.Exit(1)

    slide_map = SlideMap(table)
    slide_map.register(book.code, presentation_id, book.chapters)
    reference = Reference(book.code, book.name, chapter, verse)
    location = slide_map.lookup(reference)
    if location is None:
        console.print(f"[red]Error:[/red] {reference.display_string} is not in {book.name}")
        raise typer.Exit(1)

    console.print(f"[bold]Presentation:[/bold] {location.presentation_id}")
    console.print(f"[bold]Slide Index:[/bold] {location.slide_index}")
    console.print(
        f"[bold]Label:[/bold] {slide_map.label_for(location.presentation_id, location.slide_index)}"
    )


__all__ = ["detect", "match", "normalize_text", "slide", "transcript"]
