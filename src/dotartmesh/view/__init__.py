"""
The VIEW layer adapts generated meshes to PyVista for previewing.
"""
