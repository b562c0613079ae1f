"""Image generation for floor plan visualization.

This module renders a top-down PNG of a floor plan: room floors coloured by
texture, wall footprints, room centers and wall length labels.
"""

import logging
from pathlib import Path
from typing import Optional

import matplotlib

matplotlib.use("Agg")  # Non-interactive backend

import matplotlib.pyplot as plt

from ..config import FALLBACK_COLOR, TEXTURE_COLORS
from ..core.model import FloorPlan
from ..scene.builders import wall_footprint, wall_label
from ..scene.objects import Group

LOGGER = logging.getLogger(__name__)

# Global parameters below imports
FIGURE_SIZE = 10
DPI = 140
WALL_COLOR = "#000000"
CENTER_COLOR = "#d62728"
CENTER_MARKER_SIZE = 6
LABEL_FONT_SIZE = 8


def texture_color(texture: Optional[str]) -> str:
    return TEXTURE_COLORS.get(texture, FALLBACK_COLOR)


def generate_plan_image(
    plan: FloorPlan,
    floor_group: Group,
    centers_group: Group,
    output_path: Path,
    labels: bool = True,
) -> bool:
    """Generate a PNG image of a floor plan.

    Args:
        plan: The floor plan to draw walls and labels from.
        floor_group: Floor meshes built by ``create_floor_model``.
        centers_group: Room center markers built by ``create_floor_model``.
        output_path: Path where to save the PNG image.
        labels: Whether to draw wall length labels.

    Returns:
        True if the image was generated successfully, False otherwise.
    """
    try:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        fig, ax = plt.subplots(figsize=(FIGURE_SIZE, FIGURE_SIZE))

        for mesh in floor_group.named("floor"):
            x, z = mesh.geometry.exterior.xy
            ax.fill(x, z, color=texture_color(mesh.texture), alpha=0.8, edgecolor="none")

        for wall in plan.walls:
            footprint = wall_footprint(wall)
            if footprint.is_empty:
                continue
            x, z = footprint.exterior.xy
            ax.fill(x, z, color=WALL_COLOR)

        for mesh in centers_group:
            # Render coordinates: y is vertical, z is the plan depth axis
            ax.plot(mesh.position[0], mesh.position[2], "o", color=CENTER_COLOR, markersize=CENTER_MARKER_SIZE)

        if labels:
            for wall in plan.walls:
                label = wall_label(wall)
                ax.text(
                    label.position[0],
                    label.position[2],
                    label.text,
                    ha="center",
                    va="center",
                    fontsize=LABEL_FONT_SIZE,
                )

        ax.set_aspect("equal", adjustable="box")
        ax.invert_yaxis()
        ax.axis("off")
        fig.tight_layout()
        fig.savefig(output_path, dpi=DPI)
        plt.close(fig)

        return True

    except Exception as e:
        LOGGER.error("Error in image generation: %s", e)
        plt.close("all")
        return False
