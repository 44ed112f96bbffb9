"""Shared fixtures: a Flask app built from TestConfig over the fixture GeoJSON."""

import os

import pytest

from amenity_map import create_app
from amenity_map.config import TestConfig
from amenity_map.store import FeatureStore

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")
FIXTURE_GEOJSON = os.path.join(FIXTURES_DIR, "amenities.geojson")


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture()
def broken_client(tmp_path):
    """App whose data source is unparseable, so the store is FAILED."""
    bad = tmp_path / "broken.geojson"
    bad.write_text("{not json", encoding="utf-8")

    class BrokenConfig(TestConfig):
        FEATURE_SOURCE = str(bad)

    with create_app(BrokenConfig).test_client() as c:
        yield c


@pytest.fixture()
def store():
    s = FeatureStore()
    s.load(FIXTURE_GEOJSON)
    return s


def _load_fixture(filename):
    s = FeatureStore()
    s.load(os.path.join(FIXTURES_DIR, filename))
    return s


@pytest.fixture()
def empty_store():
    """READY store over an empty FeatureCollection."""
    return _load_fixture("empty.geojson")


@pytest.fixture()
def inland_store():
    """READY store with one park and one hospital, neither on the Corniche."""
    return _load_fixture("inland.geojson")


@pytest.fixture()
def inland_client():
    class InlandConfig(TestConfig):
        FEATURE_SOURCE = os.path.join(FIXTURES_DIR, "inland.geojson")

    with create_app(InlandConfig).test_client() as c:
        yield c
