"""
The MODEL layer contains pure data structures.
It has NO knowledge of the mesh builders or the Visualization (PyVista).
It deals with Patterns, Parameters and Mesh Buffers.
"""
