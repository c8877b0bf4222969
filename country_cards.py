# country_cards.py
# Turn FilteredView rows into Dash card components

import numpy as np
from dash import html

from country_settings import NOT_AVAILABLE


def _missing(value):
    if value is None:
        return True
    try:
        return bool(np.isnan(value))
    except TypeError:
        return False


def format_number(value):
    """Thousands-grouped, up to 3 decimals, like a browser's toLocaleString."""
    if _missing(value):
        return NOT_AVAILABLE
    value = float(value)
    if value.is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def format_area(area):
    # zero area reads as unknown
    if _missing(area) or area == 0:
        return NOT_AVAILABLE
    return format_number(area)


def format_languages(languages):
    if not languages:
        return NOT_AVAILABLE
    return ", ".join(str(v) for v in languages.values())


def format_currencies(currencies):
    if not currencies:
        return NOT_AVAILABLE
    parts = []
    for cur in currencies.values():
        cur = cur if isinstance(cur, dict) else {}
        parts.append(f"{cur.get('name', NOT_AVAILABLE)} ({cur.get('symbol', NOT_AVAILABLE)})")
    return ", ".join(parts)


def _or_na(value):
    return NOT_AVAILABLE if _missing(value) or value == "" else value


def _detail(label, value):
    return html.P([html.Strong(f"{label}:"), f" {value}"])


def country_card(row):
    """One card for a dataset row (a dict or a pandas Series)."""
    name = row["name_common"]
    header = [html.H3(name)]
    if not _missing(row["flag_url"]):
        header.insert(0, html.Img(src=row["flag_url"], alt=f"{name} flag",
                                  className="country-flag",
                                  style={"height": "40px", "marginRight": "10px"}))

    children = [
        html.Div(header, className="country-header",
                 style={"display": "flex", "alignItems": "center"}),
        html.Div([
            _detail("Official name", _or_na(row["name_official"])),
            _detail("Capital", _or_na(row["capital"])),
            _detail("Population", format_number(row["population"])),
            _detail("Languages", format_languages(row["languages"])),
            _detail("Currency", format_currencies(row["currencies"])),
            _detail("Area (km²)", format_area(row["area"])),
            _detail("Subregion", _or_na(row["subregion"])),
            _detail("Continents", _or_na(row["continent"])),
        ], className="country-details"),
    ]
    if not _missing(row["map_url"]):
        children.append(html.A("Show on Google Maps", href=row["map_url"],
                               target="_blank", rel="noopener noreferrer"))

    return html.Div(
        children,
        className="country-card",
        key=row["cca3"] or name,
        style={"border": "1px solid #ddd", "borderRadius": "6px", "padding": "10px 12px"},
    )


def country_cards(view):
    """Cards for every row of a FilteredView frame, in order."""
    return [country_card(row) for _, row in view.iterrows()]
