"""colour_tool.spaces: one immutable value type per colour space.

The types share a shape (EMPTY, empty, parse_string, to_string, equal_to,
PRECISION) but no base class. Each owns its direct conversion edges:

    RGB <-> Linear <-> XYZ <-> LAB <-> LCH
    RGB <-> HSL, RGB <-> HWB, XYZ <-> xyY
    Linear <-> YUV, Linear <-> YCC

colour_tool.core.colour composes them into the unified Colour.
"""

from colour_tool.spaces.hsl import HSL
from colour_tool.spaces.hwb import HWB
from colour_tool.spaces.lab import LAB
from colour_tool.spaces.lch import LCH
from colour_tool.spaces.linear import Linear
from colour_tool.spaces.rgb import RGB
from colour_tool.spaces.xyy import XYY
from colour_tool.spaces.xyz import XYZ
from colour_tool.spaces.ycc import YCC
from colour_tool.spaces.yuv import YUV

__all__ = ['HSL', 'HWB', 'LAB', 'LCH', 'Linear', 'RGB', 'XYY', 'XYZ', 'YCC', 'YUV']
