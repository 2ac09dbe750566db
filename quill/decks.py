from collections import Counter
from typing import Dict, Iterable, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .models import Card, CardIdentity, InkType


class Deck(BaseModel):
    """An ordered collection of cards; duplicates are separate entries."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    cards: Tuple[Card, ...] = Field(default_factory=tuple)

    @classmethod
    def with_cards(cls, cards: Iterable[Card]) -> "Deck":
        return cls(cards=tuple(cards))

    def card_count(self) -> int:
        return len(self.cards)

    def inks(self) -> List[InkType]:
        """Distinct inks in the deck, in ink order."""
        return sorted({card.ink_type for card in self.cards})

    def card_breakdown(self) -> Dict[Card, int]:
        """Count copies per card identity.

        Printings that share a name and version fold into one entry keyed by
        the first of them in deck order. Entries follow the order in which
        each identity first appears.
        """
        first_seen: Dict[CardIdentity, Card] = {}
        counts: Counter[CardIdentity] = Counter()
        for card in self.cards:
            first_seen.setdefault(card.identity, card)
            counts[card.identity] += 1
        return {first_seen[identity]: count for identity, count in counts.items()}
