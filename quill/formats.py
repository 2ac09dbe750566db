"""Deck formats and the violations they report.

A format inspects a :class:`~quill.decks.Deck` and returns either ``None``
(the deck is legal) or the first rule it breaks as a
:class:`DeckValidationError` value. Violations are returned, not raised, so
callers decide how to present them.

New formats subclass :class:`DeckFormat` and are added to :data:`FORMATS`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .decks import Deck
from .models import Card, InkType, format_inks
from .utils import QuillError, get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class DeckValidationError(ABC):
    """Base for rule violations."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Human readable description of the violation."""

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class InsufficientCards(DeckValidationError):
    required: int
    actual: int

    @property
    def message(self) -> str:
        return f"Deck needs at least {self.required} cards, but has {self.actual}"


@dataclass(frozen=True)
class TooManyInks(DeckValidationError):
    max: int
    actual: Tuple[InkType, ...]

    @property
    def message(self) -> str:
        return f"Deck needs at most {self.max} inks, but has {format_inks(self.actual)}"


@dataclass(frozen=True)
class TooManyCopies(DeckValidationError):
    card: Card
    count: int

    @property
    def message(self) -> str:
        return f"Too many copies of {self.card}: {self.count}"


class UnknownFormatError(QuillError):
    """Raised when a format name does not match any registered format."""

    def __init__(self, name: str, supported: List[str]) -> None:
        self.name = name
        self.supported = supported
        super().__init__(
            f"Unknown format: {name}. Supported formats: {', '.join(supported)}"
        )


class DeckFormat(ABC):
    """A named set of deck legality rules."""

    name: str

    @abstractmethod
    def validate(self, deck: Deck) -> Optional[DeckValidationError]:
        """Return the first broken rule, or ``None`` if *deck* is legal."""

    def is_legal(self, deck: Deck) -> bool:
        return self.validate(deck) is None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class TestingDeckFormat(DeckFormat):
    """Small decks for trying things out. Only the deck size is checked."""

    name = "testing"
    min_cards = 10

    def validate(self, deck: Deck) -> Optional[DeckValidationError]:
        if deck.card_count() < self.min_cards:
            LOGGER.debug("%s: %d cards is below the minimum", self.name, deck.card_count())
            return InsufficientCards(required=self.min_cards, actual=deck.card_count())
        return None


class StandardDeckFormat(DeckFormat):
    """Tournament rules: 60+ cards, at most two inks, four copies per card."""

    name = "standard"
    min_cards = 60
    max_inks = 2
    max_copies = 4

    def validate(self, deck: Deck) -> Optional[DeckValidationError]:
        if deck.card_count() < self.min_cards:
            LOGGER.debug("%s: %d cards is below the minimum", self.name, deck.card_count())
            return InsufficientCards(required=self.min_cards, actual=deck.card_count())

        inks = deck.inks()
        if len(inks) > self.max_inks:
            LOGGER.debug("%s: deck uses %d inks", self.name, len(inks))
            return TooManyInks(max=self.max_inks, actual=tuple(inks))

        # Breakdown order is first appearance, so the earliest offender wins.
        for card, count in deck.card_breakdown().items():
            if count > self.max_copies:
                LOGGER.debug("%s: %d copies of %s-%s", self.name, count, card.name, card.version_name)
                return TooManyCopies(card=card, count=count)

        return None


FORMATS: Dict[str, DeckFormat] = {
    fmt.name: fmt for fmt in (TestingDeckFormat(), StandardDeckFormat())
}


def get_format(name: str) -> DeckFormat:
    """Look up a registered format by name, ignoring case."""
    key = name.strip().lower()
    try:
        return FORMATS[key]
    except KeyError:
        LOGGER.warning("Unknown deck format requested: %s", name)
        raise UnknownFormatError(name, list(FORMATS)) from None
