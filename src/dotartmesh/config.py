"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (limits, heuristic weights, material
   data) from being scattered throughout the builders and estimators.
2. Calibration: The print estimate and file size heuristics are coarse and are
   expected to be tuned; keeping them here makes that a one-line change.

Exports:
    Parameter limits (MAX_CUBE_SIZE, ...), chamfer constants,
    file size weights and the print estimator defaults.
"""

# Parameter defaults (mm)
DEFAULT_CUBE_SIZE: float = 2.0
DEFAULT_CUBE_HEIGHT: float = 2.0
DEFAULT_SPACING: float = 0.1
DEFAULT_BASE_THICKNESS: float = 1.0
DEFAULT_CHAMFER_SIZE: float = 0.1

# Parameter limits (mm)
MAX_CUBE_SIZE: float = 50.0
MAX_CUBE_HEIGHT: float = 50.0
MAX_SPACING: float = 10.0
MAX_BASE_THICKNESS: float = 20.0
MAX_CHAMFER_SIZE: float = 5.0

# Chamfer must stay below this fraction of the cube size
MAX_CHAMFER_RATIO: float = 0.4
# Strength of the cosmetic vertex shrink applied for chamfered cubes
CHAMFER_SHRINK_WEIGHT: float = 0.1

# File size heuristic for a text interchange format (bytes)
BYTES_PER_VERTEX: int = 30
BYTES_PER_FACE: int = 20

# Print estimator defaults
PRINT_SPEED: float = 50.0  # mm³/min
MATERIAL_DENSITY: float = 1.25  # g/mL (PLA)
COST_PER_GRAM: float = 0.05  # $/g
