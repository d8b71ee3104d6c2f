#!/usr/bin/env python3
"""
Classify country boundary segments as mainland or island/exclave.

Reads a headerless boundary CSV and a reference landmass GeoJSON, keeps the
boundaries with at least one point on the reference landmass, and writes
their ids to a CSV (optionally also drawing them to a PNG).
"""

import argparse
import logging
import sys
from pathlib import Path

from mainland.errors import ConfigError
from mainland.export import write_export
from mainland.pipeline import check_inputs, run_from_config
from mainland.schemas import ClassifierConfig
from mainland.visualizer import plot_drawables

DEFAULT_CONFIG = "config/mainland_config.yaml"


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Classify mainland boundary segments")
    parser.add_argument(
        "--config",
        help=f"Path to YAML configuration file (default: {DEFAULT_CONFIG} if present)"
    )
    parser.add_argument("--records", help="Headerless boundary CSV")
    parser.add_argument("--geometry", help="Reference landmass GeoJSON")
    parser.add_argument(
        "--mode",
        choices=["named", "flat"],
        help="Reference geometry mode"
    )
    parser.add_argument("--name-property", help="Feature property holding the country name")
    parser.add_argument("--output", help="Export CSV path")
    parser.add_argument("--plot", help="Also draw mainland boundaries to this PNG")
    parser.add_argument("--workers", type=int, help="Worker threads for classification")
    parser.add_argument("--verbose", action="store_true", help="Log progress")
    return parser.parse_args(argv)


def build_config(args) -> ClassifierConfig:
    """Load the configuration file and apply command line overrides."""
    config_path = args.config
    if config_path is None and Path(DEFAULT_CONFIG).exists():
        config_path = DEFAULT_CONFIG

    config = ClassifierConfig.from_yaml(config_path) if config_path else ClassifierConfig()
    data = config.model_dump()

    overrides = {
        ("inputs", "records"): args.records,
        ("inputs", "geometry"): args.geometry,
        ("inputs", "mode"): args.mode,
        ("inputs", "name_property"): args.name_property,
        ("output", "export"): args.output,
        ("output", "plot"): args.plot,
    }
    for (section, key), value in overrides.items():
        if value is not None:
            data[section][key] = value
    if args.workers is not None:
        data["workers"] = args.workers

    try:
        return ClassifierConfig(**data)
    except ValueError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def main(argv=None):
    """Run the mainland classification."""
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        check_inputs(config)
        print(f"Classifying {config.inputs.records} against {config.inputs.geometry} "
              f"({config.inputs.mode} mode)...")
        outcome = run_from_config(config)
    except ConfigError as e:
        print(f"✗ {e}")
        return 1

    if not outcome.ok:
        print(f"✗ Mapping failed: {outcome.message}")
        return 1

    summary = outcome.summary
    print(f"✓ Classified {summary.records} boundaries")

    if config.output.export:
        written = write_export(outcome.export_rows, config.output.export)
        if written:
            print(f"✓ Export saved to {written}")
        else:
            print("No mainland boundaries found, nothing exported")

    if config.output.plot:
        plot_path = plot_drawables(
            outcome.drawables,
            config.output.plot,
            color=config.output.color,
            line_width=config.output.line_width,
        )
        print(f"✓ Plot saved to {plot_path}")

    print("\nClassification Summary:")
    print(f"  Boundaries: {summary.records}")
    print(f"  Mainland: {summary.mainland}")
    print(f"  Skipped rows: {summary.skipped_rows}")
    print(f"  Invalid points: {summary.invalid_points}")
    print(f"  Reference geometries: {summary.geometries}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
