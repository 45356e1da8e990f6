"""
The CONTROLLER layer turns model data into meshes and derived figures.

Note: This package should be pure Python/NumPy and should NOT import PyVista.
"""
