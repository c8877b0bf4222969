# countries_app.py
# Countries of the World dashboard: load once, filter and sort in the browser session

import logging

from dash import Dash, dcc, html, Input, Output, State, ctx, exceptions

import country_settings as CS
from country_cards import country_cards
from country_data import CountryLoadError, build_dataset, load_countries
from country_filters import (
    clear_sort,
    derive_view,
    empty_filter,
    filter_by_continent,
    filter_by_subregion,
    filter_top10,
    reset_filters,
    reset_top10,
    sort_alphabetically,
)

LOADING_TEXT = "Loading..."
HIDDEN = {"display": "none"}
CONTROLS_STYLE = {"display": "grid", "gridTemplateColumns": "1fr 2fr 1fr 1fr auto",
                  "gap": "12px", "alignItems": "center", "margin": "12px 0 20px 0"}


# -----------------------------
# Helpers
# -----------------------------

def subregion_options(subregions):
    return [{"label": CS.SUBREGION_PLACEHOLDER, "value": CS.SUBREGION_PLACEHOLDER}] + [
        {"label": s, "value": s} for s in subregions
    ]


def load_page():
    """
    Run the loader once for a page. Returns the values for the dataset
    store, the status line, the subregion options and the controls style.
    """
    try:
        records, subregions = load_countries(CS.COUNTRIES_API, CS.REQUEST_TIMEOUT)
    except CountryLoadError as e:
        return None, f"Error: {e}", subregion_options([]), HIDDEN
    return records, "", subregion_options(subregions), CONTROLS_STYLE


def apply_control(control_id, value, dataset, view_filter):
    """
    Map one control event onto a filter/sort operation.
    Returns (new_filter, filtered_view).
    """
    if control_id == "alpha":
        if value and "name" in value:
            return sort_alphabetically(dataset, view_filter)
        return clear_sort(dataset, view_filter)

    if control_id in ("top-population", "top-area"):
        metric = control_id.split("-", 1)[1]
        if value and metric in value:
            return filter_top10(dataset, view_filter, metric)
        return reset_top10(dataset, view_filter)

    if control_id == "continent":
        return filter_by_continent(dataset, view_filter, value)

    if control_id == "subregion":
        return filter_by_subregion(dataset, view_filter, value)

    if control_id == "reset":
        return reset_filters(dataset, view_filter)

    # first render after the load, or anything unrecognised
    vf = view_filter or empty_filter()
    return vf, derive_view(dataset, vf)


def control_values(view_filter):
    """Checked/selected state of every control, read back from the filter."""
    vf = {**empty_filter(), **(view_filter or {})}
    return (
        ["name"] if vf["sort_key"] == "name" else [],
        ["population"] if vf["top_n"] == "population" else [],
        ["area"] if vf["top_n"] == "area" else [],
        vf["continent"] or CS.ALL_CONTINENTS,
        vf["subregion"] or CS.SUBREGION_PLACEHOLDER,
    )


def count_text(shown, total):
    return f"Showing {shown:,} of {total:,} countries"


def render_view(records, control_id, value, view_filter):
    """Everything the filter/sort callback writes, for one control event."""
    # nothing to show until the loader has succeeded
    if records is None:
        raise exceptions.PreventUpdate

    dataset = build_dataset(records)
    view_filter, view = apply_control(control_id, value, dataset, view_filter)
    return (view_filter, country_cards(view), count_text(len(view), len(dataset)),
            *control_values(view_filter))


# -----------------------------
# App layout
# -----------------------------
app = Dash(__name__, title=CS.APP_TITLE)

app.layout = html.Div(
    style={"fontFamily": "system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial",
           "padding": "16px", "maxWidth": "1200px", "margin": "0 auto"},
    className="app-container",
    children=[
        dcc.Location(id="url"),

        html.H1(CS.APP_TITLE, className="app-header", style={"marginBottom": "8px"}),
        html.Div(LOADING_TEXT, id="status"),

        # Controls (hidden until the data is in)
        html.Div(id="controls-panel", style=HIDDEN, children=[
            html.H3("Filter & Sort", style={"gridColumn": "1 / -1", "margin": "0"}),
            html.Div([
                dcc.Checklist(
                    id="alpha",
                    options=[{"label": CS.LABELS["name"], "value": "name"}],
                    value=[],
                ),
            ], className="filter-group"),
            html.Div([
                dcc.Checklist(
                    id="top-population",
                    options=[{"label": CS.LABELS["population"], "value": "population"}],
                    value=[],
                ),
                dcc.Checklist(
                    id="top-area",
                    options=[{"label": CS.LABELS["area"], "value": "area"}],
                    value=[],
                ),
            ], className="filter-group"),
            html.Div([
                html.Label("By continent:"),
                dcc.Dropdown(
                    id="continent",
                    options=[{"label": c, "value": c} for c in CS.CONTINENTS],
                    value=CS.ALL_CONTINENTS,
                    clearable=False,
                ),
            ], className="filter-group"),
            html.Div([
                html.Label("By subregion:"),
                dcc.Dropdown(
                    id="subregion",
                    options=subregion_options([]),
                    value=CS.SUBREGION_PLACEHOLDER,
                    clearable=False,
                ),
            ], className="filter-group"),
            html.Button("Reset filters", id="reset", n_clicks=0),
        ]),

        html.Div(id="country-count", style={"fontSize": "12px", "color": "#555", "margin": "6px 0"}),
        html.Div(id="countries", className="countries-container",
                 style={"display": "grid", "gap": "12px",
                        "gridTemplateColumns": "repeat(auto-fill, minmax(260px, 1fr))"}),

        dcc.Store(id="dataset-store"),
        dcc.Store(id="filter-store", data=empty_filter()),
    ],
)


# -----------------------------
# Load callback (one request per page load)
# -----------------------------
@app.callback(
    Output("dataset-store", "data"),
    Output("status", "children"),
    Output("subregion", "options"),
    Output("controls-panel", "style"),
    Input("url", "href"),
    prevent_initial_call=False,
)
def load_dataset(_href):
    return load_page()


# -----------------------------
# Filter/sort callback
# -----------------------------
@app.callback(
    Output("filter-store", "data"),
    Output("countries", "children"),
    Output("country-count", "children"),
    Output("alpha", "value"),
    Output("top-population", "value"),
    Output("top-area", "value"),
    Output("continent", "value"),
    Output("subregion", "value"),
    Input("dataset-store", "data"),
    Input("alpha", "value"),
    Input("top-population", "value"),
    Input("top-area", "value"),
    Input("continent", "value"),
    Input("subregion", "value"),
    Input("reset", "n_clicks"),
    State("filter-store", "data"),
    prevent_initial_call=True,
)
def update_view(records, alpha, top_population, top_area, continent, subregion, _reset, view_filter):
    values = {
        "alpha": alpha,
        "top-population": top_population,
        "top-area": top_area,
        "continent": continent,
        "subregion": subregion,
        "reset": None,
    }
    control_id = ctx.triggered_id
    return render_view(records, control_id, values.get(control_id), view_filter)


# -----------------------------
# Run
# -----------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print(f"{CS.APP_TITLE}: countries from {CS.COUNTRIES_API}")
    app.run(debug=CS.DEBUG, dev_tools_hot_reload=False)  # Dash 3.x
