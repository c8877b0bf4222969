import math

import pytest
from dash import html

from country_cards import (
    country_card,
    country_cards,
    format_area,
    format_currencies,
    format_languages,
    format_number,
)
from country_data import build_dataset, normalize_record
from tests.conftest import make_country


def card_text(component):
    """All strings inside a component tree, in order."""
    if isinstance(component, str):
        return [component]
    children = getattr(component, "children", None)
    if children is None:
        return []
    if not isinstance(children, (list, tuple)):
        children = [children]
    out = []
    for child in children:
        out.extend(card_text(child))
    return out


def find(component, kind):
    found = [component] if isinstance(component, kind) else []
    children = getattr(component, "children", None)
    if isinstance(children, (list, tuple)):
        for child in children:
            found.extend(find(child, kind))
    elif children is not None and not isinstance(children, str):
        found.extend(find(children, kind))
    return found


@pytest.mark.parametrize("value, expected", [
    (1380004385, "1,380,004,385"),
    (0, "0"),
    (9706961.0, "9,706,961"),
    (1234.5, "1,234.5"),
    (0.44, "0.44"),
    (2.123456, "2.123"),
    (None, "N/A"),
    (math.nan, "N/A"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_area_zero_and_missing():
    assert format_area(0) == "N/A"
    assert format_area(math.nan) == "N/A"
    assert format_area(505992.0) == "505,992"


def test_format_languages():
    assert format_languages({"spa": "Spanish", "cat": "Catalan"}) == "Spanish, Catalan"
    assert format_languages(None) == "N/A"
    assert format_languages({}) == "N/A"


def test_format_currencies():
    currencies = {"USD": {"name": "United States dollar", "symbol": "$"},
                  "EUR": {"name": "Euro", "symbol": "€"}}
    assert format_currencies(currencies) == "United States dollar ($), Euro (€)"
    assert format_currencies(None) == "N/A"


def test_country_card_fields():
    row = normalize_record(make_country("Spain", 47_351_567, "Europe", "Southern Europe", 505_992.0))
    card = country_card(row)
    text = "".join(card_text(card))
    assert "Spain" in text
    assert "Republic of Spain" in text
    assert "Spain City" in text
    assert "47,351,567" in text
    assert "English" in text
    assert "Euro (€)" in text
    assert "505,992" in text
    assert "Southern Europe" in text
    assert "Europe" in text

    img = find(card, html.Img)[0]
    assert img.src == "https://flags.example/Spain.png"
    assert img.alt == "Spain flag"

    link = find(card, html.A)[0]
    assert link.href == "https://maps.example/Spain"
    assert link.target == "_blank"
    assert link.rel == "noopener noreferrer"


def test_country_card_missing_fields_fall_back():
    card = country_card(normalize_record({"name": {"common": "Nowhere"}, "population": 12}))
    text = "".join(card_text(card))
    assert text.count("N/A") == 7
    assert "12" in text
    assert find(card, html.Img) == []
    assert find(card, html.A) == []


def test_country_cards_in_view_order(raw_countries):
    view = build_dataset(raw_countries).iloc[::-1]
    cards = country_cards(view)
    assert len(cards) == len(raw_countries)
    assert "Brazil" in card_text(cards[0])[0]
