"""Quill: Lorcana card, deck and format tooling."""

from .models import (
    Card,
    CardIdentity,
    CardType,
    Classification,
    InkType,
    Rarity,
    INK_SYMBOLS,
    format_inks,
)
from .decks import Deck
from .formats import (
    FORMATS,
    DeckFormat,
    DeckValidationError,
    InsufficientCards,
    StandardDeckFormat,
    TestingDeckFormat,
    TooManyCopies,
    TooManyInks,
    UnknownFormatError,
    get_format,
)
from .deck_io import DeckLoadError, DeckReadError, dump_deck, load_deck, parse_deck, write_deck
from .game import Game, Player
from .utils import QuillError, get_logger

__all__ = [
    "Card",
    "CardIdentity",
    "CardType",
    "Classification",
    "InkType",
    "Rarity",
    "INK_SYMBOLS",
    "format_inks",
    "Deck",
    "FORMATS",
    "DeckFormat",
    "DeckValidationError",
    "InsufficientCards",
    "StandardDeckFormat",
    "TestingDeckFormat",
    "TooManyCopies",
    "TooManyInks",
    "UnknownFormatError",
    "get_format",
    "DeckLoadError",
    "DeckReadError",
    "dump_deck",
    "load_deck",
    "parse_deck",
    "write_deck",
    "Game",
    "Player",
    "QuillError",
    "get_logger",
]
