import pytest

from quill.models import Card, CardType, Classification, InkType, Rarity


@pytest.fixture
def kida() -> Card:
    return Card(
        inkable=True,
        ink_type=InkType.AMBER,
        cost=1,
        card_type=CardType.CHARACTER,
        name="Kida",
        version_name="Atlantean",
        classifications=(Classification.STORYBORN, Classification.HERO, Classification.PRINCESS),
        strength=2,
        willpower=2,
        lore_value=1,
        rarity=Rarity.COMMON,
    )


@pytest.fixture
def flounder() -> Card:
    return Card(
        inkable=True,
        ink_type=InkType.SAPPHIRE,
        cost=1,
        card_type=CardType.CHARACTER,
        name="Flounder",
        version_name="Voice of Reason",
        classifications=(Classification.STORYBORN, Classification.ALLY),
        strength=2,
        willpower=2,
        lore_value=1,
        rarity=Rarity.COMMON,
    )


@pytest.fixture
def goons() -> Card:
    return Card(
        inkable=True,
        ink_type=InkType.STEEL,
        cost=1,
        card_type=CardType.CHARACTER,
        name="Goons",
        version_name="Maleficent's Underlings",
        classifications=(Classification.STORYBORN, Classification.ALLY),
        strength=2,
        willpower=2,
        lore_value=1,
        rarity=Rarity.COMMON,
    )


@pytest.fixture
def kida_payload() -> dict:
    """Kida - Atlantean as it appears in a deck file."""
    return {
        "inkable": True,
        "ink_type": "Amber",
        "cost": 1,
        "card_type": "Character",
        "name": "Kida",
        "version_name": "Atlantean",
        "classifications": ["Storyborn", "Hero", "Princess"],
        "strength": 2,
        "willpower": 2,
        "lore_value": 1,
        "rarity": "Common",
    }
