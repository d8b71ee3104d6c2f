"""
Reference geometry index.

Builds the landmass lookup used by the classifier from a GeoJSON document.
Two modes are supported:

* ``named``: a FeatureCollection keyed by a country name property; a boundary
  is only tested against the geometry of its own country.
* ``flat``: an unnamed collection; every boundary is tested against every
  geometry.

Both index types answer ``resolve_candidates(country_name)`` so the
classifier does not need to know which mode is active.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from shapely.errors import ShapelyError
from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry

from .errors import GeometryLoadError
from .schemas import GeometryMode

logger = logging.getLogger(__name__)

POLYGON_TYPES = ("Polygon", "MultiPolygon")


class FlatGeometryIndex(BaseModel):
    """Unordered candidate list with no join key."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    mode: Literal["flat"] = Field("flat", description="Index mode tag")
    geometries: List[BaseGeometry] = Field(default_factory=list, description="Candidate geometries")

    def resolve_candidates(self, country_name: str) -> List[BaseGeometry]:
        """Every geometry is a candidate, whatever the country."""
        return self.geometries

    def __len__(self) -> int:
        return len(self.geometries)


class NamedGeometryIndex(BaseModel):
    """Country name to geometry mapping."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    mode: Literal["named"] = Field("named", description="Index mode tag")
    geometries: Dict[str, BaseGeometry] = Field(default_factory=dict, description="Geometry per country name")

    def resolve_candidates(self, country_name: str) -> List[BaseGeometry]:
        """Return the country's geometry, or nothing if the name is unknown."""
        geometry = self.geometries.get(country_name)
        return [geometry] if geometry is not None else []

    def __len__(self) -> int:
        return len(self.geometries)


GeometryIndex = Union[FlatGeometryIndex, NamedGeometryIndex]


def to_geometry(geojson: Any) -> Optional[BaseGeometry]:
    """Convert a GeoJSON geometry mapping to a shapely polygon, or None if unusable."""
    if not isinstance(geojson, dict):
        return None

    geom_type = geojson.get("type")
    if geom_type not in POLYGON_TYPES:
        logger.warning("Skipping unsupported geometry type %r", geom_type)
        return None

    try:
        geometry = shape(geojson)
    except (ShapelyError, ValueError, TypeError, KeyError, IndexError) as e:
        logger.warning("Skipping malformed %s geometry: %s", geom_type, e)
        return None

    if geometry.is_empty:
        logger.warning("Skipping empty %s geometry", geom_type)
        return None

    return geometry


def _features(document: Dict[str, Any]) -> List[Any]:
    features = document.get("features")
    if not isinstance(features, list):
        raise GeometryLoadError("FeatureCollection has no 'features' list")
    return features


def _build_named(document: Dict[str, Any], name_property: str) -> NamedGeometryIndex:
    if document.get("type") != "FeatureCollection":
        raise GeometryLoadError(
            f"Named mode needs a FeatureCollection, got {document.get('type')!r}"
        )

    features = _features(document)
    geometries: Dict[str, BaseGeometry] = {}

    for i, feature in enumerate(features):
        if not isinstance(feature, dict):
            logger.warning("Skipping feature %d: not an object", i)
            continue

        properties = feature.get("properties") or {}
        name = properties.get(name_property) if isinstance(properties, dict) else None
        if not isinstance(name, str) or not name.strip():
            logger.warning("Skipping feature %d: no usable %r property", i, name_property)
            continue

        geometry = to_geometry(feature.get("geometry"))
        if geometry is None:
            continue

        name = name.strip()
        if name in geometries:
            # Last write wins
            logger.warning("Duplicate reference geometry for %r, keeping the later one", name)
        geometries[name] = geometry

    if features and not geometries:
        raise GeometryLoadError("No usable named geometries in reference input")

    return NamedGeometryIndex(geometries=geometries)


def _build_flat(document: Dict[str, Any]) -> FlatGeometryIndex:
    doc_type = document.get("type")

    if doc_type == "GeometryCollection":
        raw = document.get("geometries")
        if not isinstance(raw, list):
            raise GeometryLoadError("GeometryCollection has no 'geometries' list")
    elif doc_type == "FeatureCollection":
        raw = [f.get("geometry") if isinstance(f, dict) else None for f in _features(document)]
    elif doc_type in POLYGON_TYPES:
        raw = [document]
    else:
        raise GeometryLoadError(f"Unsupported reference document type {doc_type!r}")

    geometries = [g for g in (to_geometry(item) for item in raw) if g is not None]

    if raw and not geometries:
        raise GeometryLoadError("No usable geometries in reference input")

    return FlatGeometryIndex(geometries=geometries)


def build_index(
    document: Any,
    mode: GeometryMode = "named",
    name_property: str = "NAME_EN",
) -> GeometryIndex:
    """
    Build a geometry index from a parsed GeoJSON document.

    Args:
        document: Parsed GeoJSON (dict)
        mode: "named" for a FeatureCollection keyed by country name,
            "flat" for an unnamed collection
        name_property: Feature property holding the country name (named mode)

    Returns:
        FlatGeometryIndex or NamedGeometryIndex

    Raises:
        GeometryLoadError: If the document is unusable as a whole
    """
    if not isinstance(document, dict):
        raise GeometryLoadError("Reference geometry must be a GeoJSON object")

    if mode == "named":
        index = _build_named(document, name_property)
    elif mode == "flat":
        index = _build_flat(document)
    else:
        raise GeometryLoadError(f"Unknown geometry mode {mode!r}")

    if not len(index):
        logger.warning("Reference geometry index is empty")
    logger.info("Indexed %d reference geometries (%s mode)", len(index), index.mode)
    return index


def read_index(
    path: Union[str, Path],
    mode: GeometryMode = "named",
    name_property: str = "NAME_EN",
) -> GeometryIndex:
    """Load a GeoJSON file and build its index. Raises GeometryLoadError on failure."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            document = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise GeometryLoadError(f"Cannot read reference geometry from {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise GeometryLoadError(f"Invalid GeoJSON in {path}: {e}") from e

    return build_index(document, mode, name_property)
