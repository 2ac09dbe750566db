"""Read and write decks in their JSON form."""
from __future__ import annotations

import json
import os
import pathlib

from pydantic import ValidationError

from .decks import Deck
from .utils import QuillError, ensure_directory, get_logger

LOGGER = get_logger(__name__)


class DeckLoadError(QuillError):
    """Raised when a deck file cannot be read or does not match the schema."""


class DeckReadError(DeckLoadError):
    """Raised when a deck file is missing, unreadable or not UTF-8 text."""


def parse_deck(text: str | bytes) -> Deck:
    """Validate a JSON document of the form ``{"cards": [...]}``."""
    try:
        deck = Deck.model_validate_json(text)
    except ValidationError as exc:
        raise DeckLoadError(str(exc)) from exc
    LOGGER.debug("Parsed deck with %d cards", deck.card_count())
    return deck


def load_deck(path: str | os.PathLike[str]) -> Deck:
    file_path = pathlib.Path(path)
    try:
        text = file_path.read_text(encoding="utf8")
    except OSError as exc:
        raise DeckReadError(f"{file_path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise DeckReadError(f"{file_path}: not UTF-8 text ({exc.reason})") from exc
    LOGGER.debug("Loaded %s", file_path)
    return parse_deck(text)


def dump_deck(deck: Deck) -> str:
    payload = deck.model_dump(mode="json")
    return json.dumps(payload, indent=2, ensure_ascii=False)


def write_deck(deck: Deck, path: str | os.PathLike[str]) -> pathlib.Path:
    output_path = pathlib.Path(path)
    ensure_directory(output_path.parent)
    with output_path.open("w", encoding="utf8") as handle:
        handle.write(dump_deck(deck))
        handle.write("\n")
    LOGGER.info("Wrote %s", output_path)
    return output_path
