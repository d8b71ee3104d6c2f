"""Shared fixtures: small GeoJSON documents and input files built in code."""

import json

import matplotlib
import pytest

matplotlib.use("Agg")


def square(min_lon, min_lat, max_lon, max_lat):
    """Closed ring for an axis-aligned box in (lon, lat) order."""
    return [
        [min_lon, min_lat],
        [max_lon, min_lat],
        [max_lon, max_lat],
        [min_lon, max_lat],
        [min_lon, min_lat],
    ]


def feature(name, geometry, name_property="NAME_EN"):
    return {
        "type": "Feature",
        "properties": {name_property: name},
        "geometry": geometry,
    }


# Roughly continental Europe
EUROPE = {"type": "Polygon", "coordinates": [square(-10.0, 35.0, 40.0, 70.0)]}

# 10x10 degree box with a 2x2 hole in the middle
HOLED = {
    "type": "Polygon",
    "coordinates": [square(0.0, 0.0, 10.0, 10.0), square(4.0, 4.0, 6.0, 6.0)],
}

# Two separate boxes
ARCHIPELAGO = {
    "type": "MultiPolygon",
    "coordinates": [
        [square(20.0, 20.0, 22.0, 22.0)],
        [square(30.0, 30.0, 32.0, 32.0)],
    ],
}


@pytest.fixture
def europe_geojson():
    return dict(EUROPE)


@pytest.fixture
def holed_geojson():
    return dict(HOLED)


@pytest.fixture
def archipelago_geojson():
    return dict(ARCHIPELAGO)


@pytest.fixture
def countries_collection():
    """FeatureCollection keyed by NAME_EN."""
    return {
        "type": "FeatureCollection",
        "features": [
            feature("France", EUROPE),
            feature("Holeland", HOLED),
            feature("Archipelago", ARCHIPELAGO),
        ],
    }


@pytest.fixture
def land_collection():
    """Unnamed GeometryCollection, as in a plain land dataset."""
    return {"type": "GeometryCollection", "geometries": [EUROPE, ARCHIPELAGO]}


@pytest.fixture
def records_csv():
    return "\n".join([
        'B1,FR,France,"2.3 48.8:2.4 48.8:2.4 48.9:2.3 48.9"',
        'B2,FR,France,"-61.5 16.2:-61.4 16.2:-61.4 16.3"',
        'B3,AT,Atlantis,"2.3 48.8:2.4 48.8"',
        'B4,AR,Archipelago,"25.0 25.0:31.0 31.0"',
        'B5,FR,France,"abc 48.8"',
    ]) + "\n"


@pytest.fixture
def input_files(tmp_path, records_csv, countries_collection):
    """Write the records CSV and named reference GeoJSON to disk."""
    records_path = tmp_path / "borders.csv"
    records_path.write_text(records_csv, encoding="utf-8")

    geometry_path = tmp_path / "countries.geojson"
    geometry_path.write_text(json.dumps(countries_collection), encoding="utf-8")

    return records_path, geometry_path
