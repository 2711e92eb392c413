"""colour_tool.core: foundation layer.

Numeric helpers, matrices, errors, shared types, the unified Colour,
palettes, the palette registry, data sets and environment settings.
This package has NO dependencies on colour_tool.formats or colour_tool.registry.
Only stdlib, numpy and colour_tool.spaces are allowed here.
"""
