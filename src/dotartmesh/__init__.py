"""
dotartmesh: turn 2D dot-art patterns into printable 3D cube meshes.
"""
from dotartmesh.controller.culling import ExposedFaces, exposed_faces
from dotartmesh.controller.estimator import PrintEstimate, PrintProfile, estimate_print
from dotartmesh.controller.mesher import MeshAssembler, assemble
from dotartmesh.controller.statistics import MeshStats, calculate_mesh_stats
from dotartmesh.exceptions import DotArtMeshError, MeshGenerationError, ParameterValidationError
from dotartmesh.model.mesh_data import CompositeMesh, MeshBuffer
from dotartmesh.model.parameters import ParameterLibrary, ParameterSet
from dotartmesh.model.pattern import PatternGrid

__all__ = [
    "CompositeMesh",
    "DotArtMeshError",
    "ExposedFaces",
    "MeshAssembler",
    "MeshBuffer",
    "MeshGenerationError",
    "MeshStats",
    "ParameterLibrary",
    "ParameterSet",
    "ParameterValidationError",
    "PatternGrid",
    "PrintEstimate",
    "PrintProfile",
    "assemble",
    "calculate_mesh_stats",
    "estimate_print",
    "exposed_faces",
]
