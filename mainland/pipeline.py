"""
End-to-end classification run.

Loads the boundary records and the reference geometry concurrently, waits
for both, then classifies and aggregates. A failed load phase turns the run
into a ``mapping_failed`` outcome; nothing is classified in that case.
"""

import concurrent.futures
import logging
from pathlib import Path
from typing import Optional, Union

from .classifier import aggregate, classify
from .errors import ConfigError, LoadError
from .records import read_records
from .reference import read_index
from .schemas import ClassifierConfig, RunOutcome, RunSummary

logger = logging.getLogger(__name__)


def run(
    records_path: Union[str, Path],
    geometry_path: Union[str, Path],
    config: Optional[ClassifierConfig] = None,
) -> RunOutcome:
    """
    Classify every boundary in a records file against a reference geometry file.

    Args:
        records_path: Headerless boundary CSV
        geometry_path: Reference GeoJSON
        config: Classifier configuration (defaults if omitted)

    Returns:
        RunOutcome with status "ok", or "mapping_failed" and a diagnostic
    """
    config = config or ClassifierConfig()
    inputs = config.inputs

    with concurrent.futures.ThreadPoolExecutor(max_workers=2) as executor:
        records_future = executor.submit(read_records, records_path, inputs.delimiter)
        index_future = executor.submit(
            read_index, geometry_path, inputs.mode, inputs.name_property
        )
        concurrent.futures.wait([records_future, index_future])

    failures = []
    for future in (records_future, index_future):
        error = future.exception()
        if error is None:
            continue
        if not isinstance(error, LoadError):
            raise error
        logger.error("Loading %s failed: %s", error.phase, error)
        failures.append(str(error))

    if failures:
        return RunOutcome(status="mapping_failed", message="; ".join(failures))

    loaded = records_future.result()
    index = index_future.result()

    results = classify(loaded.records, index, workers=config.workers)
    export_rows, drawables = aggregate(results)

    summary = RunSummary(
        records=len(loaded.records),
        skipped_rows=loaded.skipped,
        geometries=len(index),
        invalid_points=sum(r.invalid_points for r in results),
        mainland=len(export_rows),
    )
    if summary.invalid_points:
        logger.warning("%d points had unparseable coordinates", summary.invalid_points)
    logger.info("Classified %d boundaries, %d mainland", summary.records, summary.mainland)

    return RunOutcome(
        status="ok",
        results=results,
        export_rows=export_rows,
        drawables=drawables,
        summary=summary,
    )


def check_inputs(config: ClassifierConfig) -> None:
    """Raise ConfigError unless both input paths are set."""
    inputs = config.inputs
    if not inputs.records or not inputs.geometry:
        raise ConfigError("Both inputs.records and inputs.geometry must be set")


def run_from_config(config: ClassifierConfig) -> RunOutcome:
    """Run with the input paths taken from the configuration."""
    check_inputs(config)
    return run(config.inputs.records, config.inputs.geometry, config)
