"""CLI commands for verse-engine."""

import typer

from verse_engine.cli.verses import detect, match, normalize_text, slide, transcript

main_app = typer.Typer(
    name="verse-engine",
    help="Detect spoken Bible verse references",
    no_args_is_help=True,
)
main_app.command("detect")(detect)
main_app.command("normalize")(normalize_text)
main_app.command("match")(match)
main_app.command("transcript")(transcript)
main_app.command("slide")(slide)


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
