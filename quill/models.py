from enum import Enum
from typing import Dict, Iterable, NamedTuple, Tuple

from pydantic import BaseModel, ConfigDict, Field


class InkType(Enum):
    """Ink colors. Declaration order is the sort order."""

    AMBER = "Amber"
    AMETHYST = "Amethyst"
    EMERALD = "Emerald"
    RUBY = "Ruby"
    SAPPHIRE = "Sapphire"
    STEEL = "Steel"

    @property
    def symbol(self) -> str:
        return INK_SYMBOLS[self]

    @property
    def order(self) -> int:
        return list(InkType).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, InkType):
            return NotImplemented
        return self.order < other.order

    def __str__(self) -> str:
        return self.symbol


class CardType(Enum):
    CHARACTER = "Character"
    ITEM = "Item"
    LOCATION = "Location"
    ACTION = "Action"
    SONG = "Song"

    def __str__(self) -> str:
        return CARD_TYPE_LABELS[self]


class Classification(Enum):
    STORYBORN = "Storyborn"
    HERO = "Hero"
    PRINCESS = "Princess"
    ALLY = "Ally"

    def __str__(self) -> str:
        return CLASSIFICATION_LABELS[self]


class Rarity(Enum):
    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    SUPER_RARE = "SuperRare"
    LEGENDARY = "Legendary"
    ENCHANTED = "Enchanted"

    def __str__(self) -> str:
        return RARITY_LABELS[self]


INK_SYMBOLS: Dict[InkType, str] = {
    InkType.AMBER: "🟡",
    InkType.AMETHYST: "🟣",
    InkType.EMERALD: "🟢",
    InkType.RUBY: "🔴",
    InkType.SAPPHIRE: "🔵",
    InkType.STEEL: "⚪",
}

CARD_TYPE_LABELS: Dict[CardType, str] = {
    CardType.CHARACTER: "Character",
    CardType.ITEM: "Item",
    CardType.LOCATION: "Location",
    CardType.ACTION: "Action",
    CardType.SONG: "Song",
}

CLASSIFICATION_LABELS: Dict[Classification, str] = {
    Classification.STORYBORN: "Storyborn",
    Classification.HERO: "Hero",
    Classification.PRINCESS: "Princess",
    Classification.ALLY: "Ally",
}

RARITY_LABELS: Dict[Rarity, str] = {
    Rarity.COMMON: "Common",
    Rarity.UNCOMMON: "Uncommon",
    Rarity.RARE: "Rare",
    Rarity.SUPER_RARE: "Super Rare",
    Rarity.LEGENDARY: "Legendary",
    Rarity.ENCHANTED: "Enchanted",
}


def format_inks(inks: Iterable[InkType]) -> str:
    """Render inks by name, e.g. ``[Amber, Sapphire]``."""
    return "[" + ", ".join(ink.value for ink in inks) + "]"


class CardIdentity(NamedTuple):
    """Key that decides whether two deck entries are the same card."""

    name: str
    version_name: str


class Card(BaseModel):
    """A single Lorcana card printing.

    Equality and hashing only look at ``(name, version_name)``: two printings
    of "Kida - Atlantean" with different stats are the same card as far as
    decks and formats are concerned.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    inkable: bool
    ink_type: InkType
    cost: int = Field(..., ge=0)
    card_type: CardType

    # Character name plus the subtitle that tells printings apart.
    name: str
    version_name: str

    classifications: Tuple[Classification, ...]

    strength: int = Field(..., ge=0)
    willpower: int = Field(..., ge=0)
    lore_value: int = Field(..., ge=0)

    rarity: Rarity

    @property
    def identity(self) -> CardIdentity:
        return CardIdentity(self.name, self.version_name)

    @property
    def display_cost(self) -> int:
        """Cost as printed in listings; uninkable cards show one more."""
        return self.cost if self.inkable else self.cost + 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def __str__(self) -> str:
        return (
            f"{self.ink_type} ({self.display_cost}) {self.name}-{self.version_name} "
            f"{self.strength}⚔️ | {self.willpower}🛡️ | {self.lore_value}✨"
        )
