"""Tests for the map payload built from search results."""

from amenity_map.config import TestConfig
from amenity_map.models.feature import Feature
from amenity_map.search import run_search
from amenity_map.view import (
    NO_RESULTS_NOTICE,
    build_view,
    compute_bounds,
    marker_style,
    popup_html,
)

CONFIG = {
    "DEFAULT_CENTER": TestConfig.DEFAULT_CENTER,
    "DEFAULT_ZOOM": TestConfig.DEFAULT_ZOOM,
    "FIT_PADDING": TestConfig.FIT_PADDING,
}


class TestMarkerStyle:
    def test_park_is_green(self):
        assert marker_style("park")["fillColor"] == "green"

    def test_other_types_are_red(self):
        assert marker_style("hospital")["fillColor"] == "red"
        assert marker_style("school")["fillColor"] == "red"

    def test_base_style(self):
        style = marker_style("park")
        assert style["radius"] == 8
        assert style["color"] == "#000"
        assert style["fillOpacity"] == 0.8


def test_popup_escapes_name():
    f = Feature(lat=0, lon=0, name="<script>", amenity_type="park")
    assert popup_html(f) == "<b>&lt;script&gt;</b><br>park"


def test_compute_bounds():
    features = [
        Feature(lat=24.5, lon=54.3, name="a", amenity_type="park"),
        Feature(lat=24.4, lon=54.4, name="b", amenity_type="park"),
    ]
    assert compute_bounds(features) == [[24.4, 54.3], [24.5, 54.4]]
    assert compute_bounds([]) is None


class TestBuildView:
    def test_empty_query_fits_all(self, store):
        payload = build_view(run_search(store, ""), CONFIG)
        assert len(payload["features"]) == 6
        assert payload["notice"] is None
        assert payload["view"]["mode"] == "fit_bounds"
        assert payload["view"]["padding"] == [50, 50]

    def test_features_carry_style_and_popup(self, store):
        payload = build_view(run_search(store, "Show parks"), CONFIG)
        props = payload["features"][0]["properties"]
        assert props["name"] == "Corniche Beach Park"
        assert props["style"]["fillColor"] == "green"
        assert props["popup"] == "<b>Corniche Beach Park</b><br>park"
        assert payload["features"][0]["geometry"]["coordinates"] == [54.323, 24.476]

    def test_no_results_resets_view(self, inland_store):
        payload = build_view(run_search(inland_store, "parks near corniche"), CONFIG)
        assert payload["features"] == []
        assert payload["notice"] == NO_RESULTS_NOTICE
        assert payload["view"] == {"mode": "default", "center": [24.47, 54.37], "zoom": 12}

    def test_unknown_locality_still_fits_parks(self, store):
        payload = build_view(run_search(store, "parks in Downtown"), CONFIG)
        assert len(payload["features"]) == 3
        assert payload["notice"] is None
        assert payload["view"]["mode"] == "fit_bounds"

    def test_empty_collection_with_empty_query_has_no_notice(self, empty_store):
        payload = build_view(run_search(empty_store, ""), CONFIG)
        assert payload["notice"] is None
        assert payload["view"]["mode"] == "default"

    def test_echoes_query_and_filter(self, store):
        payload = build_view(run_search(store, "hospitals near Corniche"), CONFIG)
        assert payload["query"] == "hospitals near Corniche"
        assert payload["filter"] == {"amenity": "hospital", "location": "corniche"}
