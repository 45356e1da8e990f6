"""
Mesh Generation Parameters
==========================
Defines the parameter set that controls cube size, spacing, the base plate and
the generation strategy, plus a small library of named presets.

Classes:
    ParameterSet: Immutable generation parameters with validation.
    ParameterLibrary: Named presets, loadable from and savable to JSON.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields, replace
from typing import Any, Dict, List, Optional
import json
import logging
import math

from dotartmesh import config
from dotartmesh.exceptions import ParameterValidationError

logger = logging.getLogger(__name__)

# Keys used by the upstream pattern editor
CAMEL_CASE_KEYS: Dict[str, str] = {
    "cubeSize": "cube_size",
    "cubeHeight": "cube_height",
    "spacing": "spacing",
    "generateBase": "generate_base",
    "baseThickness": "base_thickness",
    "optimizeMesh": "optimize_mesh",
    "mergeAdjacentFaces": "merge_adjacent_faces",
    "chamferEdges": "chamfer_edges",
    "chamferSize": "chamfer_size",
}


@dataclass(frozen=True)
class ParameterSet:
    """
    Parameters for 3D model generation. Lengths are in mm.
    """
    cube_size: float = config.DEFAULT_CUBE_SIZE
    cube_height: float = config.DEFAULT_CUBE_HEIGHT
    spacing: float = config.DEFAULT_SPACING
    generate_base: bool = True
    base_thickness: float = config.DEFAULT_BASE_THICKNESS
    optimize_mesh: bool = True
    merge_adjacent_faces: bool = False
    chamfer_edges: bool = False
    chamfer_size: float = config.DEFAULT_CHAMFER_SIZE

    @property
    def pitch(self) -> float:
        """Distance between the centers of two neighbouring cells."""
        return self.cube_size + self.spacing

    def replace(self, **changes: Any) -> ParameterSet:
        return replace(self, **changes)

    def validation_errors(self) -> List[str]:
        """
        Collect human readable messages for every out-of-range value.

        Returns:
            An empty list when the parameters are usable.
        """
        errors: List[str] = []

        for f in fields(self):
            if isinstance(f.default, bool):
                continue
            value = getattr(self, f.name)
            # bool is an int subclass but never a length
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f"{f.name} must be a number")
            elif not math.isfinite(value):
                errors.append(f"{f.name} must be a finite number")
        if errors:
            return errors

        if self.cube_size <= 0 or self.cube_size > config.MAX_CUBE_SIZE:
            errors.append(f"Cube size must be between 0 and {config.MAX_CUBE_SIZE:g}mm")

        if self.cube_height <= 0 or self.cube_height > config.MAX_CUBE_HEIGHT:
            errors.append(f"Cube height must be between 0 and {config.MAX_CUBE_HEIGHT:g}mm")

        if self.spacing < 0 or self.spacing > config.MAX_SPACING:
            errors.append(f"Spacing must be between 0 and {config.MAX_SPACING:g}mm")

        if self.generate_base and (self.base_thickness <= 0 or self.base_thickness > config.MAX_BASE_THICKNESS):
            errors.append(f"Base thickness must be between 0 and {config.MAX_BASE_THICKNESS:g}mm")

        if self.chamfer_edges:
            if self.chamfer_size < 0 or self.chamfer_size > config.MAX_CHAMFER_SIZE:
                errors.append(f"Chamfer size must be between 0 and {config.MAX_CHAMFER_SIZE:g}mm")
            if self.chamfer_size >= self.cube_size * config.MAX_CHAMFER_RATIO:
                errors.append(f"Chamfer size should be less than {config.MAX_CHAMFER_RATIO:.0%} of cube size")

        return errors

    def validate(self) -> None:
        """Raise ParameterValidationError if any value is out of range."""
        errors = self.validation_errors()
        if errors:
            raise ParameterValidationError(errors)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> ParameterSet:
        """
        Build a ParameterSet from a dict. Missing keys fall back to defaults,
        camelCase keys from the pattern editor are accepted, unknown keys are ignored.
        """
        known = {f.name for f in fields(ParameterSet)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = CAMEL_CASE_KEYS.get(key, key)
            if name in known:
                kwargs[name] = value
            else:
                logger.debug(f"Ignoring unknown parameter '{key}'.")
        return ParameterSet(**kwargs)


class ParameterLibrary:
    """
    Manages a library of named parameter presets, including loading from files.
    """
    def __init__(self) -> None:
        self.presets: Dict[str, ParameterSet] = {}
        self._init_defaults()

    def _init_defaults(self) -> None:
        self.presets["default"] = ParameterSet()
        # Fast to print, one solid object
        self.presets["draft"] = ParameterSet(
            cube_size=3.0, cube_height=1.5, spacing=0.0, base_thickness=1.0,
        )
        # Small dots with gaps, individually softened
        self.presets["fine"] = ParameterSet(
            cube_size=1.0, cube_height=1.0, spacing=0.2, base_thickness=0.8,
            optimize_mesh=False, merge_adjacent_faces=True, chamfer_edges=True, chamfer_size=0.2,
        )
        self.presets["chunky"] = ParameterSet(
            cube_size=5.0, cube_height=4.0, spacing=0.5, base_thickness=2.0,
        )

    def add_preset(self, name: str, parameters: ParameterSet) -> None:
        """Add or update a preset in the library."""
        self.presets[name] = parameters

    def get_preset(self, name: str) -> Optional[ParameterSet]:
        """Retrieve a preset by name."""
        return self.presets.get(name)

    def get_names(self) -> List[str]:
        """List all preset names in the library."""
        return list(self.presets.keys())

    def load_file(self, filepath: str) -> int:
        """
        Merge presets from a JSON file of the form {"name": {parameters}}.

        Invalid presets are rejected as a whole so a broken file never leaves
        the library half updated.

        Returns:
            Number of presets loaded.
        """
        logger.info(f"Loading parameter presets from: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read presets: {e}")
            raise IOError(f"Failed to read presets: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Preset file '{filepath}' must contain a JSON object.")

        loaded: Dict[str, ParameterSet] = {}
        for name, values in data.items():
            parameters = ParameterSet.from_dict(values)
            parameters.validate()
            loaded[name] = parameters

        self.presets.update(loaded)
        logger.info(f"Loaded {len(loaded)} presets.")
        return len(loaded)

    def save_file(self, filepath: str) -> None:
        data = {name: params.to_dict() for name, params in self.presets.items()}
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.info(f"Saved {len(data)} presets to: {filepath}")
