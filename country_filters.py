# country_filters.py
# View-state for the country list and the operations that change it.
#
# A view filter is a plain dict so it can live in a dcc.Store:
#   {"continent": str|None, "subregion": str|None,
#    "top_n": "population"|"area"|None, "sort_key": "name"|None}
# Every operation returns (new_filter, filtered_view) and never mutates
# the dataset frame it is given.

import unicodedata

from country_settings import ALL_CONTINENTS, SUBREGION_PLACEHOLDER, TOP_METRICS, TOP_N


def empty_filter():
    return {"continent": None, "subregion": None, "top_n": None, "sort_key": None}


def _clean(value, sentinel):
    """Treat the dropdown sentinel (or nothing) as 'no filter'."""
    if value is None or value == "" or value == sentinel:
        return None
    return value


def name_sort_key(name):
    """Accent- and case-folded key so 'Åland Islands' sorts among the A's."""
    if not isinstance(name, str):
        return ""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


# -----------------------------
# Pure selections over a frame
# -----------------------------

def select_continent(df, continent):
    return df[df["continent"] == continent]


def select_subregion(df, subregion):
    return df[df["subregion"] == subregion]


def select_top(df, metric, n=TOP_N):
    """Largest n by metric, descending; ties keep dataset order."""
    if metric not in TOP_METRICS:
        raise ValueError(f"Unknown top-N metric: {metric!r}")
    ranked = df.dropna(subset=[metric])
    ranked = ranked.sort_values(metric, ascending=False, kind="stable")
    return ranked.head(n)


def sort_by_name(df):
    return df.sort_values("name_common", key=lambda s: s.map(name_sort_key), kind="stable")


def derive_view(dataset, view_filter):
    """
    FilteredView for a given filter. The primary filter is top_n, else
    continent, else subregion, else the full dataset; sort_key is applied
    on top of whichever one is active.
    """
    vf = {**empty_filter(), **(view_filter or {})}

    if vf["top_n"]:
        view = select_top(dataset, vf["top_n"])
    elif vf["continent"]:
        view = select_continent(dataset, vf["continent"])
    elif vf["subregion"]:
        view = select_subregion(dataset, vf["subregion"])
    else:
        view = dataset

    if vf["sort_key"] == "name":
        view = sort_by_name(view)
    return view


# -----------------------------
# Operations driven by the controls
# -----------------------------

def filter_by_continent(dataset, view_filter, continent):
    vf = {**empty_filter(), **(view_filter or {})}
    vf.update(continent=_clean(continent, ALL_CONTINENTS), subregion=None, top_n=None)
    return vf, derive_view(dataset, vf)


def filter_by_subregion(dataset, view_filter, subregion):
    vf = {**empty_filter(), **(view_filter or {})}
    vf.update(subregion=_clean(subregion, SUBREGION_PLACEHOLDER), continent=None, top_n=None)
    return vf, derive_view(dataset, vf)


def filter_top10(dataset, view_filter, metric):
    """
    Top N of the full dataset by metric. Continent/subregion stay in the
    filter but are superseded; any alphabetical sort is dropped so the
    result reads largest first.
    """
    if metric not in TOP_METRICS:
        raise ValueError(f"Unknown top-N metric: {metric!r}")
    vf = {**empty_filter(), **(view_filter or {})}
    vf.update(top_n=metric, sort_key=None)
    return vf, derive_view(dataset, vf)


def reset_top10(dataset, view_filter):
    # Back to the full list, not to an earlier continent/subregion filter
    return reset_filters(dataset, view_filter)


def sort_alphabetically(dataset, view_filter):
    vf = {**empty_filter(), **(view_filter or {})}
    vf["sort_key"] = "name"
    return vf, derive_view(dataset, vf)


def clear_sort(dataset, view_filter):
    vf = {**empty_filter(), **(view_filter or {})}
    vf["sort_key"] = None
    return vf, derive_view(dataset, vf)


def reset_filters(dataset, view_filter=None):
    vf = empty_filter()
    return vf, derive_view(dataset, vf)
