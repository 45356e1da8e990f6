"""
Exceptions raised by the meshing core.
"""
from __future__ import annotations

from typing import Iterable


class DotArtMeshError(Exception):
    """Base class for all errors raised by dotartmesh."""


class MeshGenerationError(DotArtMeshError):
    """Raised when a mesh cannot be built from the given pattern and parameters."""


class ParameterValidationError(DotArtMeshError):
    """
    Raised when a ParameterSet holds values that would produce malformed geometry.

    The individual messages are kept in `errors` so callers can show them one by one.
    """
    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: list[str] = list(errors)
        super().__init__("Invalid parameters: " + "; ".join(self.errors))
