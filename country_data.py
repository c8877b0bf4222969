# country_data.py
# Fetch the REST Countries list once and normalize it into a DataFrame

import logging

import numpy as np
import pandas as pd
import requests

from country_settings import COUNTRIES_API, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

DATASET_COLUMNS = [
    "cca3", "name_common", "name_official", "capital", "population", "area",
    "continent", "subregion", "currencies", "languages", "flag_url", "map_url",
]


class CountryLoadError(RuntimeError):
    """The country list could not be fetched or decoded."""


# -----------------------------
# Fetch
# -----------------------------

def fetch_countries(url=COUNTRIES_API, timeout=REQUEST_TIMEOUT):
    """
    One GET against the countries endpoint. Returns the decoded list of
    records; raises CountryLoadError on a non-2xx status, a transport
    failure or a body that is not a JSON list of objects. Never retries.
    """
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise CountryLoadError(str(e) or "Network error") from e

    if not resp.ok:
        logger.warning("Countries API returned HTTP %s", resp.status_code)
        raise CountryLoadError("Failed to fetch countries data")

    try:
        data = resp.json()
    except ValueError as e:
        raise CountryLoadError("Countries data is not valid JSON") from e

    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise CountryLoadError("Countries data is not a list of countries")
    return data


# -----------------------------
# Normalize
# -----------------------------

def _first(values):
    if isinstance(values, (list, tuple)) and values:
        return values[0]
    return None


def _text(value):
    return value if isinstance(value, str) and value else None


def _mapping(value):
    return value if isinstance(value, dict) and value else None


def _number(value):
    try:
        value = float(value)
    except (TypeError, ValueError):
        return np.nan
    return value if np.isfinite(value) else np.nan


def normalize_record(record):
    """Flatten one raw country object into a row of DATASET_COLUMNS."""
    name = record.get("name") or {}
    if isinstance(name, str):
        name = {"common": name}
    flags = record.get("flags") or {}
    maps = record.get("maps") or {}
    population = _number(record.get("population"))

    return {
        "cca3": _text(record.get("cca3")),
        "name_common": _text(name.get("common")) or "",
        "name_official": _text(name.get("official")),
        "capital": _text(_first(record.get("capital"))),
        "population": 0 if np.isnan(population) else int(population),
        "area": _number(record.get("area")),
        "continent": _text(_first(record.get("continents"))),
        "subregion": _text(record.get("subregion")),
        "currencies": _mapping(record.get("currencies")),
        "languages": _mapping(record.get("languages")),
        "flag_url": _text(flags.get("png")) if isinstance(flags, dict) else None,
        "map_url": _text(maps.get("googleMaps")) if isinstance(maps, dict) else None,
    }


def build_dataset(records):
    """
    Build the Dataset frame from raw records. Source order is kept as a
    0..N-1 index so stable sorts can break ties by it.
    """
    rows = [normalize_record(r) for r in (records or [])]
    df = pd.DataFrame(rows, columns=DATASET_COLUMNS)
    df["population"] = df["population"].astype("int64")
    df["area"] = df["area"].astype(float)
    return df.reset_index(drop=True)


def subregion_index(dataset):
    """Distinct non-empty subregions, sorted."""
    if dataset.empty:
        return []
    return sorted(s for s in dataset["subregion"].dropna().unique() if s)


# -----------------------------
# Load (fetch + validate once)
# -----------------------------

def load_countries(url=COUNTRIES_API, timeout=REQUEST_TIMEOUT):
    """Fetch and validate the full list; returns (records, subregions)."""
    logger.info("Fetching countries from %s", url)
    try:
        records = fetch_countries(url, timeout)
        dataset = build_dataset(records)
    except CountryLoadError as e:
        logger.error("Loading countries failed: %s", e)
        raise
    except (AttributeError, TypeError, ValueError) as e:
        logger.error("Countries data could not be normalized: %s", e)
        raise CountryLoadError(f"Countries data could not be read: {e}") from e

    subregions = subregion_index(dataset)
    logger.info("Loaded %d countries, %d subregions", len(dataset), len(subregions))
    return records, subregions
