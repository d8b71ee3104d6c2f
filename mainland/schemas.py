"""
Mainland classifier data models using Pydantic.

These models define the structure for boundary records, classification
results, export rows and the run configuration.
"""

from typing import List, Literal, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError


# (latitude, longitude); either component may be NaN for an unparseable token
Point = Tuple[float, float]

GeometryMode = Literal["named", "flat"]

DEFAULT_EXPORT_NAME = "mainlandPolygonIds.csv"


class BoundaryRecord(BaseModel):
    """One row of boundary input data."""

    model_config = ConfigDict(frozen=True)

    boundary_id: str = Field(..., description="Boundary identifier")
    country_code: str = Field(..., description="Country code")
    country_name: str = Field(..., description="Country name, join key into the reference index")
    raw_coordinates: str = Field(
        "", description="'lon lat' pairs separated by ':'"
    )


class ClassificationResult(BaseModel):
    """Classification outcome for a single boundary."""

    boundary_id: str = Field(..., description="Boundary identifier")
    country_name: str = Field(..., description="Country name")
    is_mainland: bool = Field(..., description="True if any point lies on the reference landmass")
    points: List[Point] = Field(
        default_factory=list, description="Boundary points as (latitude, longitude) pairs"
    )
    invalid_points: int = Field(0, description="Number of points with unparseable coordinates")


class ExportRow(BaseModel):
    """A mainland boundary as written to the export artifact."""

    model_config = ConfigDict(populate_by_name=True)

    boundary_id: str = Field(..., alias="boundaryId", description="Boundary identifier")
    country_name: str = Field(..., alias="countryName", description="Country name")


class InputConfig(BaseModel):
    """Where the two inputs come from and how to read them."""

    records: Optional[str] = Field(None, description="Path to the headerless boundary CSV")
    geometry: Optional[str] = Field(None, description="Path to the reference GeoJSON")
    delimiter: str = Field(
        ",", min_length=1, max_length=1, description="Single-character field delimiter of the boundary CSV"
    )
    mode: GeometryMode = Field("named", description="Reference geometry mode")
    name_property: str = Field("NAME_EN", description="Feature property holding the country name")


class OutputConfig(BaseModel):
    """Export and rendering configuration."""

    export: Optional[str] = Field(DEFAULT_EXPORT_NAME, description="Export CSV path")
    plot: Optional[str] = Field(None, description="PNG path for the mainland overlay")
    color: str = Field("red", description="Overlay outline color")
    line_width: float = Field(2.0, description="Overlay outline width")


class ClassifierConfig(BaseModel):
    """Complete classifier configuration."""

    inputs: InputConfig = Field(default_factory=InputConfig, description="Input configuration")
    output: OutputConfig = Field(default_factory=OutputConfig, description="Output configuration")
    workers: int = Field(1, ge=1, description="Worker threads used for classification")

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "ClassifierConfig":
        """Load configuration from YAML file."""
        try:
            with open(yaml_path, 'r') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Configuration file not found: {yaml_path}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {yaml_path}: {e}") from e

        try:
            return cls(**(data or {}))
        except (TypeError, ValidationError) as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


class RunSummary(BaseModel):
    """Counters describing one classification run."""

    records: int = Field(0, description="Boundary records loaded")
    skipped_rows: int = Field(0, description="Malformed rows skipped")
    geometries: int = Field(0, description="Reference geometries indexed")
    invalid_points: int = Field(0, description="Points with unparseable coordinates")
    mainland: int = Field(0, description="Boundaries classified as mainland")


class RunOutcome(BaseModel):
    """Result of a full pipeline run."""

    status: Literal["ok", "mapping_failed"] = Field(..., description="Run status")
    message: str = Field("", description="Diagnostic for a failed run")
    results: List[ClassificationResult] = Field(default_factory=list, description="Per-boundary results")
    export_rows: List[ExportRow] = Field(default_factory=list, description="Mainland rows to export")
    drawables: List[List[Point]] = Field(default_factory=list, description="Mainland point sequences")
    summary: RunSummary = Field(default_factory=RunSummary, description="Run counters")

    @property
    def ok(self) -> bool:
        return self.status == "ok"
