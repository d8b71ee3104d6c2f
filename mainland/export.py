"""
Mainland export writer.
"""

import csv
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import pandas as pd

from .schemas import DEFAULT_EXPORT_NAME, ExportRow

logger = logging.getLogger(__name__)


def export_frame(rows: Sequence[ExportRow]) -> pd.DataFrame:
    """Tabulate export rows under their published column names."""
    columns = [field.alias for field in ExportRow.model_fields.values()]
    return pd.DataFrame(
        [row.model_dump(by_alias=True) for row in rows],
        columns=columns,
    )


def write_export(
    rows: Sequence[ExportRow],
    output_path: Union[str, Path] = DEFAULT_EXPORT_NAME,
) -> Optional[Path]:
    """
    Write mainland rows to a CSV file: a bare header, then every field double-quoted.

    Args:
        rows: Export rows
        output_path: Destination CSV path

    Returns:
        Path of the written file, or None if there was nothing to write
    """
    if not rows:
        logger.info("No mainland boundaries, nothing to export")
        return None

    output_path = Path(output_path)
    output_path.parent.mkdir(exist_ok=True, parents=True)

    frame = export_frame(rows)
    # Header is written bare, values are quoted
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        f.write(",".join(frame.columns) + "\n")
        frame.to_csv(
            f,
            header=False,
            index=False,
            quoting=csv.QUOTE_ALL,
            lineterminator='\n',
        )
    logger.info("Exported %d mainland boundaries to %s", len(rows), output_path)
    return output_path
