import pytest
from pydantic import ValidationError

from quill.models import (
    CARD_TYPE_LABELS,
    CLASSIFICATION_LABELS,
    INK_SYMBOLS,
    RARITY_LABELS,
    Card,
    CardIdentity,
    CardType,
    Classification,
    InkType,
    Rarity,
    format_inks,
)


def test_ink_type_display():
    assert str(InkType.AMBER) == "🟡"
    assert str(InkType.AMETHYST) == "🟣"
    assert str(InkType.EMERALD) == "🟢"
    assert str(InkType.RUBY) == "🔴"
    assert str(InkType.SAPPHIRE) == "🔵"
    assert str(InkType.STEEL) == "⚪"
    assert f"{InkType.AMBER}" == "🟡"


@pytest.mark.parametrize(
    "table, vocabulary",
    [
        (INK_SYMBOLS, InkType),
        (CARD_TYPE_LABELS, CardType),
        (CLASSIFICATION_LABELS, Classification),
        (RARITY_LABELS, Rarity),
    ],
)
def test_display_tables_cover_every_member(table, vocabulary):
    assert set(table) == set(vocabulary)


def test_ink_types_sort_in_declaration_order():
    shuffled = [InkType.STEEL, InkType.AMBER, InkType.RUBY, InkType.SAPPHIRE, InkType.EMERALD, InkType.AMETHYST]

    assert sorted(shuffled) == list(InkType)
    assert InkType.AMBER < InkType.AMETHYST < InkType.EMERALD < InkType.RUBY < InkType.SAPPHIRE < InkType.STEEL


def test_vocabulary_labels():
    assert str(Rarity.SUPER_RARE) == "Super Rare"
    assert str(CardType.SONG) == "Song"
    assert str(Classification.PRINCESS) == "Princess"
    assert format_inks([InkType.AMBER, InkType.STEEL]) == "[Amber, Steel]"
    assert format_inks([]) == "[]"


def test_card_creation(kida):
    assert kida.name == "Kida"
    assert kida.version_name == "Atlantean"
    assert kida.inkable is True
    assert kida.ink_type == InkType.AMBER
    assert kida.cost == 1
    assert kida.card_type == CardType.CHARACTER
    assert kida.classifications == (Classification.STORYBORN, Classification.HERO, Classification.PRINCESS)
    assert kida.strength == 2
    assert kida.willpower == 2
    assert kida.lore_value == 1
    assert kida.rarity == Rarity.COMMON


def test_card_requires_every_field():
    with pytest.raises(ValidationError):
        Card(
            inkable=True,
            ink_type=InkType.AMBER,
            cost=1,
            card_type=CardType.CHARACTER,
            name="Kida",
            version_name="Atlantean",
            strength=2,
            willpower=2,
            lore_value=1,
            rarity=Rarity.COMMON,
        )


def test_card_is_frozen(kida):
    with pytest.raises(ValidationError):
        kida.cost = 5


def test_card_display(kida):
    assert str(kida) == "🟡 (1) Kida-Atlantean 2⚔️ | 2🛡️ | 1✨"


def test_uninkable_card_displays_surcharge(kida):
    uninkable = kida.model_copy(update={"inkable": False})

    assert uninkable.display_cost == 2
    assert str(uninkable) == "🟡 (2) Kida-Atlantean 2⚔️ | 2🛡️ | 1✨"


def test_card_identity_ignores_stats(kida):
    variant = kida.model_copy(
        update={
            "strength": 99,
            "willpower": 99,
            "lore_value": 99,
            "cost": 99,
            "ink_type": InkType.RUBY,
            "rarity": Rarity.ENCHANTED,
            "inkable": False,
        }
    )

    assert variant.identity == CardIdentity("Kida", "Atlantean")
    assert variant == kida
    assert hash(variant) == hash(kida)


def test_cards_with_different_identity_are_different(kida, flounder):
    assert kida != flounder
    assert kida.identity != flounder.identity
    assert kida != kida.model_copy(update={"version_name": "Warrior of Atlantis"})


def test_card_set_deduplicates_by_identity(kida, flounder):
    twin = kida.model_copy()
    variant = kida.model_copy(update={"strength": 99, "ink_type": InkType.RUBY})

    card_set = {kida, twin, variant, flounder}

    assert len(card_set) == 2


def test_card_is_not_equal_to_other_types(kida):
    assert kida != ("Kida", "Atlantean")
    assert (kida == object()) is False
