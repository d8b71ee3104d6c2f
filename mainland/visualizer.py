"""
Mainland overlay visualization

Functions for drawing mainland boundary polygons with matplotlib.
"""

from pathlib import Path
from typing import List, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np

from .coordinates import is_valid_point
from .schemas import Point


def create_figure(
    figsize: Tuple[int, int] = (12, 10),
    title: str = "Mainland boundaries",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Create a figure for plotting boundary overlays.

    Args:
        figsize: Figure size as (width, height) in inches
        title: Figure title

    Returns:
        Tuple of (Figure, Axes)
    """
    fig, ax = plt.subplots(figsize=figsize)

    ax.set_title(title, fontsize=16)
    ax.set_xlabel('Longitude', fontsize=12)
    ax.set_ylabel('Latitude', fontsize=12)
    ax.grid(True, alpha=0.3)

    return fig, ax


def drawable_to_array(points: Sequence[Point]) -> np.ndarray:
    """Convert (lat, lon) points to an (N, 2) array of (lon, lat), dropping invalid ones."""
    coords = [(lon, lat) for lat, lon in points if is_valid_point((lat, lon))]
    return np.array(coords, dtype=float).reshape(-1, 2)


def plot_drawables(
    drawables: List[List[Point]],
    output_path: Union[str, Path],
    color: str = 'red',
    line_width: float = 2.0,
    title: str = "Mainland boundaries",
) -> Path:
    """
    Draw each drawable as a closed outline and save the figure as PNG.

    Args:
        drawables: Point sequences of mainland boundaries
        output_path: Destination PNG path
        color: Outline color
        line_width: Outline width
        title: Figure title

    Returns:
        Path of the saved image
    """
    fig, ax = create_figure(title=title)

    for points in drawables:
        coords = drawable_to_array(points)
        if len(coords) == 0:
            continue
        if len(coords) >= 3:
            ax.fill(coords[:, 0], coords[:, 1], facecolor=color, alpha=0.2,
                    edgecolor=color, linewidth=line_width)
        else:
            ax.plot(coords[:, 0], coords[:, 1], color=color,
                    linewidth=line_width, marker='o')

    ax.set_aspect('equal', adjustable='datalim')

    output_path = Path(output_path)
    output_path.parent.mkdir(exist_ok=True, parents=True)
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    return output_path
