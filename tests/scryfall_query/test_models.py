"""Tests for Scryfall record models."""

import pydantic
import pytest

from scryfall_query.models import ScryfallCard, ScryfallPage, ScryfallSet


def test_card_keeps_every_key(fixture_loader):
    data = fixture_loader("card_black_lotus")

    card = ScryfallCard.from_json(data)

    assert card.to_dict() == data
    assert card.set_code == "lea"
    assert card["set"] == "lea"
    assert card["type_line"] == "Artifact"
    assert "rarity" in card
    assert len(card) == len(data)
    assert list(card) == list(data)


def test_card_mapping_get_default(card_factory):
    card = ScryfallCard.from_json(card_factory("Island"))

    assert card.get("oracle_text") is None
    assert card.get("oracle_text", "") == ""
    with pytest.raises(KeyError):
        _ = card["oracle_text"]


def test_records_are_immutable(card_factory):
    card = ScryfallCard.from_json(card_factory("Island"))

    with pytest.raises(pydantic.ValidationError):
        card.name = "Forest"


def test_record_str(fixture_loader):
    card = ScryfallCard.from_json(fixture_loader("card_black_lotus"))
    set_obj = ScryfallSet.from_json(fixture_loader("sets_page")["data"][0])

    assert str(card) == "Black Lotus (lea 232)"
    assert str(set_obj) == "Limited Edition Alpha (lea)"


def test_page_defaults_when_has_more_is_absent(card_factory):
    page = ScryfallPage.model_validate({"data": [card_factory("Island")]})

    assert page.has_more is False
    assert page.next_page is None
    assert len(page.data) == 1


def test_off_type_values_are_kept_as_is(card_factory):
    data = card_factory("Island")
    data["collector_number"] = 288
    data["name"] = ["Island", "Isla"]

    card = ScryfallCard.from_json(data)

    assert card.collector_number == 288
    assert card.name == ["Island", "Isla"]
    assert card.to_dict() == data


def test_page_treats_null_has_more_as_false(card_factory):
    page = ScryfallPage.model_validate(
        {"has_more": None, "warnings": None, "data": [card_factory("Island")]}
    )

    assert not page.has_more
    assert len(page.data) == 1
