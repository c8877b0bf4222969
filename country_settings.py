
import os

# Page title shown in the browser tab and as the main heading
APP_TITLE = "Countries of the World"

# REST Countries rejects a bare /all, so ask only for the fields the cards use
COUNTRIES_API = os.environ.get(
    "COUNTRIES_API",
    "https://restcountries.com/v3.1/all"
    "?fields=name,capital,population,area,continents,subregion,"
    "currencies,languages,flags,maps",
)
REQUEST_TIMEOUT = float(os.environ.get("COUNTRIES_API_TIMEOUT", "15"))

# Dash dev server
DEBUG = os.environ.get("COUNTRIES_DEBUG", "1") not in ("0", "false", "False")

# ----- Controls -----
# The first entry is a sentinel that clears the continent filter
ALL_CONTINENTS = "All"
CONTINENTS = [
    ALL_CONTINENTS,
    "Africa",
    "Asia",
    "Europe",
    "Oceania",
    "North America",
    "South America",
]

# Placeholder shown in the subregion dropdown; selecting it clears the filter
SUBREGION_PLACEHOLDER = "Choose region"

# "Top N" checkboxes: metric name -> label
TOP_N = 10
TOP_METRICS = ("population", "area")
LABELS = {
    "name": " Alpha",
    "population": f" Top {TOP_N} by population",
    "area": f" Top {TOP_N} by area",
}

# Shown on a card wherever the source record has no value
NOT_AVAILABLE = "N/A"
