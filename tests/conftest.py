import pytest

from country_data import build_dataset


def make_country(common, population, continent="Europe", subregion=None, area=None, **extra):
    record = {
        "name": {"common": common, "official": f"Republic of {common}"},
        "capital": [f"{common} City"],
        "population": population,
        "continents": [continent],
        "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
        "languages": {"eng": "English"},
        "flags": {"png": f"https://flags.example/{common}.png"},
        "maps": {"googleMaps": f"https://maps.example/{common}"},
    }
    if subregion is not None:
        record["subregion"] = subregion
    if area is not None:
        record["area"] = area
    record.update(extra)
    return record


class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


@pytest.fixture
def raw_countries():
    return [
        make_country("Spain", 47_000_000, "Europe", "Southern Europe", 505_992.0),
        make_country("Japan", 125_000_000, "Asia", "Eastern Asia", 377_930.0),
        make_country("Italy", 59_000_000, "Europe", "Southern Europe", 301_336.0),
        make_country("Åland Islands", 29_458, "Europe", "Northern Europe", 1_580.0),
        make_country("India", 1_380_000_000, "Asia", "Southern Asia", 3_287_590.0),
        make_country("Antarctica", 1_000, "Antarctica"),
        make_country("Brazil", 212_000_000, "South America", "South America", 8_515_767.0),
    ]


@pytest.fixture
def dataset(raw_countries):
    return build_dataset(raw_countries)
