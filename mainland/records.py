"""
Boundary record loading.

Reads headerless delimited text where each row holds, positionally,
boundary id, country code, country name and the raw coordinate string.
"""

import csv
import io
import logging
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field

from .errors import RecordLoadError
from .schemas import BoundaryRecord

logger = logging.getLogger(__name__)

FIELD_COUNT = 4


class RecordLoad(BaseModel):
    """Records parsed from one input, plus the number of rows skipped."""

    records: List[BoundaryRecord] = Field(default_factory=list, description="Parsed records")
    skipped: int = Field(0, description="Malformed rows skipped")


def load_records(text: str, delimiter: str = ',') -> RecordLoad:
    """
    Parse boundary records from delimited text.

    Rows with fewer than four fields are skipped and counted; extra fields
    are ignored. Blank lines are ignored. Row order is preserved.

    Args:
        text: Raw delimited text without a header row
        delimiter: Field delimiter

    Returns:
        RecordLoad with the parsed records and the skipped row count
    """
    records = []
    skipped = 0

    try:
        reader = csv.reader(io.StringIO(text or ''), delimiter=delimiter)
    except TypeError as e:
        raise RecordLoadError(f"Invalid delimiter {delimiter!r}: {e}") from e

    try:
        for line_no, row in enumerate(reader, start=1):
            if not row or all(not field.strip() for field in row):
                continue

            if len(row) < FIELD_COUNT:
                logger.warning(
                    "Skipping malformed row %d: expected %d fields, got %d",
                    line_no, FIELD_COUNT, len(row),
                )
                skipped += 1
                continue

            boundary_id, country_code, country_name, raw_coordinates = row[:FIELD_COUNT]
            records.append(
                BoundaryRecord(
                    boundary_id=boundary_id.strip(),
                    country_code=country_code.strip(),
                    country_name=country_name.strip(),
                    raw_coordinates=raw_coordinates,
                )
            )
    except csv.Error as e:
        raise RecordLoadError(f"Unparseable boundary records: {e}") from e

    logger.info("Loaded %d boundary records (%d rows skipped)", len(records), skipped)
    return RecordLoad(records=records, skipped=skipped)


def read_records(path: Union[str, Path], delimiter: str = ',') -> RecordLoad:
    """Read boundary records from a file. Raises RecordLoadError if unreadable."""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise RecordLoadError(f"Cannot read boundary records from {path}: {e}") from e

    return load_records(text, delimiter)
