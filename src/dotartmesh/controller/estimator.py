"""
Print Estimates
===============
Coarse print time, material and cost figures computed from the pattern and
the parameters, independent of mesh generation.

All constants are configuration values, not measurements. Volumes are in mm³,
times in minutes, weights in grams.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, TYPE_CHECKING

from dotartmesh import config
from dotartmesh.controller.builders import base_footprint
from dotartmesh.model.geometry_primitives import Box

if TYPE_CHECKING:
    from dotartmesh.model.parameters import ParameterSet
    from dotartmesh.model.pattern import PatternGrid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrintProfile:
    """Printer and filament figures used by the estimator."""
    print_speed: float = config.PRINT_SPEED  # mm³/min
    material_density: float = config.MATERIAL_DENSITY  # g/mL
    cost_per_gram: float = config.COST_PER_GRAM

    def __post_init__(self) -> None:
        if self.print_speed <= 0:
            raise ValueError(f"Print speed must be positive, got {self.print_speed}.")
        if self.material_density <= 0:
            raise ValueError(f"Material density must be positive, got {self.material_density}.")
        if self.cost_per_gram < 0:
            raise ValueError(f"Cost per gram must not be negative, got {self.cost_per_gram}.")


@dataclass(frozen=True)
class PrintEstimate:
    occupied_cells: int
    cube_volume: float
    total_cube_volume: float
    base_volume: float
    total_volume: float
    print_time_minutes: float
    material_weight: float
    estimated_cost: float

    @property
    def total_volume_ml(self) -> float:
        return self.total_volume / 1000.0

    @property
    def print_time_label(self) -> str:
        hours = self.print_time_minutes / 60.0
        if hours > 1:
            return f"{hours:.1f} hours"
        return f"{self.print_time_minutes:.0f} minutes"

    @property
    def material_label(self) -> str:
        return f"{self.material_weight:.1f}g ({self.total_volume_ml:.1f}mL)"

    @property
    def cost_label(self) -> str:
        return f"${self.estimated_cost:.2f}"


def estimate_print(
    grid: PatternGrid,
    params: ParameterSet,
    profile: Optional[PrintProfile] = None,
) -> PrintEstimate:
    """
    Estimate print time, material weight and cost.

    The base plate volume uses the same footprint as the generated base.
    """
    profile = profile or PrintProfile()

    occupied = grid.occupied_count
    half = params.cube_size / 2
    cube_volume = Box(center=(0.0, 0.0, 0.0), half_extents=(half, params.cube_height / 2, half)).volume
    total_cube_volume = occupied * cube_volume

    base_volume = 0.0
    if params.generate_base:
        width, depth = base_footprint(grid, params)
        # no plate can be built from a non-positive footprint
        width, depth = max(width, 0.0), max(depth, 0.0)
        base_volume = Box(
            center=(0.0, -params.base_thickness / 2, 0.0),
            half_extents=(width / 2, params.base_thickness / 2, depth / 2),
        ).volume

    total_volume = total_cube_volume + base_volume
    print_time_minutes = total_volume / profile.print_speed
    material_weight = (total_volume / 1000.0) * profile.material_density
    estimated_cost = material_weight * profile.cost_per_gram

    logger.debug(f"Estimated {total_volume:.1f} mm³ for {occupied} cells.")

    return PrintEstimate(
        occupied_cells=occupied,
        cube_volume=cube_volume,
        total_cube_volume=total_cube_volume,
        base_volume=base_volume,
        total_volume=total_volume,
        print_time_minutes=print_time_minutes,
        material_weight=material_weight,
        estimated_cost=estimated_cost,
    )
