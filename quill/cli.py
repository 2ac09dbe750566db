#!/usr/bin/env python3
"""Command-line interface for the Quill Lorcana toolbox."""

from pathlib import Path
from typing import List

import typer

from .deck_io import DeckLoadError, DeckReadError, load_deck
from .decks import Deck
from .formats import UnknownFormatError, get_format
from .game import Game
from .models import format_inks
from .utils import get_logger, set_verbosity

LOGGER = get_logger(__name__)

app = typer.Typer(help="A Lorcana toolbox for crafting experiences for Illumineers.")


def deck_report(deck: Deck) -> List[str]:
    """Lines summarizing a deck: size, inks and copies per card."""
    lines = [
        "",
        "📊 Deck Information:",
        f"Total cards: {deck.card_count()}",
        f"Inks: {format_inks(deck.inks())}",
        "",
        "📋 Card breakdown:",
    ]
    for card, count in deck.card_breakdown().items():
        lines.append(f"  {count}x {card}")
    return lines


def game_report(game: Game) -> List[str]:
    rule = "=" * 50
    return [
        "",
        rule,
        f"Turn: {game.current_turn}",
        rule,
        "",
        f"👤 {game.player1.name}",
        "",
        f"👤 {game.player2.name}",
    ]


def _echo_lines(lines: List[str]) -> None:
    for line in lines:
        typer.echo(line)


@app.command()
def validate(
    file: Path = typer.Argument(..., metavar="FILE", help="Deck JSON file."),
    format_name: str = typer.Option(
        "standard",
        "--format",
        envvar="QUILL_FORMAT",
        help="Deck format to validate against (testing or standard).",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging.", show_default=False),
) -> None:
    """Validate a deck from a JSON file."""

    set_verbosity(verbose)
    typer.echo(f"Validating deck from: {file}")

    try:
        deck = load_deck(file)
    except DeckLoadError as exc:
        if isinstance(exc, DeckReadError):
            typer.echo(f"Error reading file: {exc}", err=True)
        else:
            typer.echo(f"Error parsing JSON: {exc}", err=True)
        raise typer.Exit(code=1)

    try:
        deck_format = get_format(format_name)
    except UnknownFormatError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    error = deck_format.validate(deck)
    if error is None:
        typer.echo(f"✅ Deck is valid for {format_name} format!")
        _echo_lines(deck_report(deck))
        return

    typer.echo(f"❌ Deck validation failed: {error}")
    _echo_lines(deck_report(deck))
    raise typer.Exit(code=1)


@app.command()
def game(
    player1: str = typer.Option("Player 1", "--player1", help="Name of the first player."),
    player2: str = typer.Option("Player 2", "--player2", help="Name of the second player."),
) -> None:
    """Start a game between two players and show its state."""

    typer.echo("Welcome to Quill!")
    typer.echo("🪶" * 12)
    typer.echo()

    current = Game.start(player1, player2)
    LOGGER.debug("Started game between %s and %s", player1, player2)
    _echo_lines(game_report(current))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
