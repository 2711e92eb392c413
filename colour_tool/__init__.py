"""colour-tool: convert colours between colour spaces and match them against palettes."""

from colour_tool.core.colour import Colour, parse_colour_value
from colour_tool.core.palette import Palette
from colour_tool.core.palettes import PaletteRegistry, default_registry
from colour_tool.core.types import Match
from colour_tool.spaces import HSL, HWB, LAB, LCH, RGB, XYY, XYZ, YCC, YUV, Linear

__version__ = '0.1.0'

__all__ = [
    'HSL',
    'HWB',
    'LAB',
    'LCH',
    'RGB',
    'XYY',
    'XYZ',
    'YCC',
    'YUV',
    'Colour',
    'Linear',
    'Match',
    'Palette',
    'PaletteRegistry',
    'default_registry',
    'parse_colour_value',
]
