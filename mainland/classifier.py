"""
Boundary classification and result aggregation.

A boundary is mainland if any one of its points lies inside any candidate
geometry resolved for its country. The search stops at the first hit.
"""

import concurrent.futures
import logging
from typing import List, Optional, Sequence, Tuple

from .coordinates import is_valid_point, parse_coordinates
from .geometry import Predicate, contains
from .reference import GeometryIndex
from .schemas import BoundaryRecord, ClassificationResult, ExportRow, Point

logger = logging.getLogger(__name__)


def classify_record(
    record: BoundaryRecord,
    index: GeometryIndex,
    predicate: Predicate = contains,
) -> ClassificationResult:
    """
    Classify a single boundary record.

    Args:
        record: Boundary record
        index: Reference geometry index
        predicate: Containment test, contains(point, geometry) -> bool

    Returns:
        ClassificationResult for the record
    """
    points = parse_coordinates(record.raw_coordinates)
    valid = [p for p in points if is_valid_point(p)]
    candidates = index.resolve_candidates(record.country_name)

    is_mainland = False
    if not candidates:
        logger.debug("No reference geometry for %r (boundary %s)", record.country_name, record.boundary_id)
    else:
        is_mainland = any(
            predicate(point, geometry)
            for point in valid
            for geometry in candidates
        )

    return ClassificationResult(
        boundary_id=record.boundary_id,
        country_name=record.country_name,
        is_mainland=is_mainland,
        points=points,
        invalid_points=len(points) - len(valid),
    )


def classify(
    records: Sequence[BoundaryRecord],
    index: GeometryIndex,
    predicate: Predicate = contains,
    workers: Optional[int] = None,
) -> List[ClassificationResult]:
    """
    Classify boundary records against a reference index.

    Records are independent of each other. With more than one worker they are
    spread over a thread pool; the output order always matches the input.

    Args:
        records: Boundary records
        index: Reference geometry index, read-only while classifying
        predicate: Containment test
        workers: Number of worker threads (None or 1 runs serially)

    Returns:
        One ClassificationResult per record, in input order
    """
    if not workers or workers <= 1 or len(records) < 2:
        return [classify_record(record, index, predicate) for record in records]

    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        return list(
            executor.map(lambda record: classify_record(record, index, predicate), records)
        )


def aggregate(
    results: Sequence[ClassificationResult],
) -> Tuple[List[ExportRow], List[List[Point]]]:
    """
    Collect the mainland results for export and drawing.

    Returns:
        (export_rows, drawables), both in input order and empty if no
        boundary is mainland
    """
    export_rows = []
    drawables = []

    for result in results:
        if not result.is_mainland:
            continue
        export_rows.append(
            ExportRow(boundary_id=result.boundary_id, country_name=result.country_name)
        )
        drawables.append(list(result.points))

    return export_rows, drawables
