"""DataSet: rows of per-column values for a list of colours.

Column codes:
  r      sRGB, rgb(r,g,b)           p      sRGB, rgb(r%,g%,b%)
  x      sRGB hex, short when exact l      L*a*b*
  6      #rrggbb                    3      nearest #rgb
  [r:e]  ΔE*₀₀ lost representing the colour in sRGB
  [3:e]  ΔE*₀₀ lost representing the colour as #rgb
  [lin] [hsl] [hwb] [yuv] [ycc] [xyz] [lch] [xyy]   other spaces
  [P] [P:d] [P:i] [P:e]   for each registered palette P: entry name,
                          definition, index and ΔE*₀₀

`*` selects every column. Text between codes is ignored.

Values are str, int, float or None (no value). Formatters decide how to
render them.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

from colour_tool.core.colour import Colour
from colour_tool.core.errors import DuplicateNameError
from colour_tool.core.palette import Palette
from colour_tool.core.palettes import PaletteRegistry, default_registry
from colour_tool.spaces import LAB, RGB, XYZ, Linear

DELTA_E = 'ΔE*₀₀'

# code: (header, sample, cell)
_SPACE_COLUMNS: dict[str, tuple[str, str, Callable[[Colour], str]]] = {
    'r': ('sRGB', 'rgb(0,128,255)', lambda c: c.rgb.to_rgb_string()),
    'p': ('sRGB (%)', 'rgb(0%,50%,100%)', lambda c: c.rgb.to_rgb_string(True)),
    'x': ('sRGB (Hex)', '#0080ff', lambda c: c.rgb.to_hex_string()),
    'l': ('L*a*b*', 'lab(53.53 8.67 -72.58)', lambda c: c.lab.to_string()),
    '6': ('#rrggbb', '#0080ff', lambda c: c.rgb.to_hex_string(True)),
    '3': ('#rgb', '#08f', lambda c: c.rgb.clip3().to_hex_string()),
    'lin': ('Linear RGB', 'lin(0,0.215861,1)', lambda c: c.lin.to_string()),
    'hsl': ('HSL', 'hsl(209.88,100%,50%)', lambda c: c.hsl.to_string()),
    'hwb': ('HWB', 'hwb(209.88,0%,0%)', lambda c: c.hwb.to_string()),
    'yuv': ('YUV', 'yuv(61,237,84)', lambda c: c.yuv.to_string()),
    'ycc': ('Yc′CbcCrc', 'ycc(976,3847,1619)', lambda c: c.ycc.to_string()),
    'xyz': ('XYZ', 'xyz(0.25697,0.22525,0.97582)', lambda c: c.xyz.to_string()),
    'lch': ('L*C*h°', 'lch(53.53 73.1 276.81)', lambda c: c.lch.to_string()),
    'xyy': ('xyY', 'xyy(0.17624,0.15449,0.22525)', lambda c: c.xyy.to_string()),
}

_HEX_COLUMNS = {'x', '6', '3'}

# ΔE columns: code -> (header, rgb approximation of a colour)
_LOSS_COLUMNS: dict[str, tuple[str, Callable[[RGB], RGB]]] = {
    'r:e': (f'{DELTA_E} (RGB)', lambda rgb: rgb),
    '3:e': (f'{DELTA_E} (#rgb)', lambda rgb: rgb.clip3()),
}

ALL_FIXED = ['r', 'p', 'x', '6', '3', 'l', 'r:e', '3:e', 'lin', 'hsl', 'hwb', 'yuv', 'ycc', 'xyz', 'lch', 'xyy']

# Columns whose values are CSS colour notations (rendered with a swatch in HTML)
HTML_COLOUR_COLUMNS = {'r', 'p', '6', '3', 'x', 'hsl', 'css'}

_PALETTE_SUFFIX = re.compile(r'(.+):([die])')


def _lab_of(rgb: RGB) -> LAB:
    return LAB.from_xyz(XYZ.from_linear(Linear.from_rgb(rgb)))


def parse_columns(text: str, registry: PaletteRegistry) -> list[str]:
    """Column codes named in text, in order. A repeated code is an error."""
    if text.strip() == '*':
        columns = list(ALL_FIXED)
        for palette in registry:
            columns += [palette.name, f'{palette.name}:d', f'{palette.name}:i', f'{palette.name}:e']
        return columns

    bracketed = ['r:e', '3:e', 'lin', 'hsl', 'hwb', 'yuv', 'ycc', 'xyz', 'lch', 'xyy']
    for palette in registry:
        bracketed += [palette.name, f'{palette.name}:e', f'{palette.name}:d', f'{palette.name}:i']
    # Longest first so 'css:e' is not cut short at 'css'
    alternatives = '|'.join(re.escape(b) for b in sorted(bracketed, key=len, reverse=True))
    pattern = re.compile(r'([rpx63l])|\[(' + alternatives + r')\]')

    columns: list[str] = []
    for m in pattern.finditer(text):
        code = m.group(1) or m.group(2)
        if code in columns:
            raise DuplicateNameError(f'Duplicate column: {code}')
        columns.append(code)
    return columns


class DataSet:
    """Tabulated column values for a sequence of colours."""

    def __init__(self, columns: str, registry: PaletteRegistry | None = None):
        self.registry = registry if registry is not None else default_registry()
        self.columns = parse_columns(columns, self.registry)
        self.content: list[list[Any]] = []
        self.inputs: list[str] = []
        self.colours: list[Colour] = []
        self.contexts: list[Colour | None] = []

    @property
    def cols(self) -> int:
        return len(self.columns)

    @property
    def rows(self) -> int:
        return len(self.content)

    def _split(self, code: str) -> tuple[Palette, str]:
        """Palette and suffix ('', 'd', 'i' or 'e') of a palette column."""
        m = _PALETTE_SUFFIX.fullmatch(code)
        if m and self.registry.has_palette(m.group(1)):
            return self.registry.palette_of(m.group(1)), m.group(2)
        return self.registry.palette_of(code), ''

    @property
    def headers(self) -> list[str]:
        headers = []
        for code in self.columns:
            if code in _SPACE_COLUMNS:
                headers.append(_SPACE_COLUMNS[code][0])
            elif code in _LOSS_COLUMNS:
                headers.append(_LOSS_COLUMNS[code][0])
            else:
                palette, suffix = self._split(code)
                headers.append(
                    {
                        '': palette.description,
                        'd': f'{palette.description} (Definition)',
                        'i': f'{palette.description} (Index)',
                        'e': f'{DELTA_E} ({palette.description})',
                    }[suffix]
                )
        return headers

    @property
    def samples(self) -> list[str]:
        """An example value for each column."""
        samples = []
        for code in self.columns:
            if code in _SPACE_COLUMNS:
                samples.append(_SPACE_COLUMNS[code][1])
            elif code in _LOSS_COLUMNS:
                samples.append('±5.527')
            else:
                palette, suffix = self._split(code)
                if suffix == 'e':
                    samples.append('±5.527')
                elif suffix == 'd':
                    samples.append('rgb(0,128,255)')
                elif suffix == 'i':
                    samples.append('0')
                else:
                    names = (palette.name_at(i) for i in range(len(palette)))
                    samples.append(next((n for n in names if n), f'{palette.name}[0]'))
        return samples

    def push(self, input: str, colour: Colour, context: Colour | None = None) -> None:
        """Add a row for colour, read from the text `input`.

        Without a context, palette columns describe the palette's nearest
        entry to colour. With one (colour is then a palette match for the
        query colour `context`), they describe the palette entry equal to
        colour, and ΔE*₀₀ columns measure against context.
        """
        reference = context or colour
        nearest: dict[str, tuple[int, float] | None] = {}
        row: list[Any] = []
        for code in self.columns:
            if code in _SPACE_COLUMNS:
                if colour.empty or (code in _HEX_COLUMNS and colour.rgb.empty):
                    row.append(None)
                else:
                    row.append(_SPACE_COLUMNS[code][2](colour))
                continue
            if code in _LOSS_COLUMNS:
                approx = _LOSS_COLUMNS[code][1](colour.rgb)
                row.append(_lab_of(approx).delta_e(reference.lab))
                continue

            palette, suffix = self._split(code)
            if palette.name not in nearest:
                nearest[palette.name] = self._locate(palette, colour, context)
            found = nearest[palette.name]
            if found is None:
                row.append(None)
                continue
            index, delta_e = found
            if suffix == 'e':
                row.append(delta_e)
            elif suffix == 'd':
                row.append(palette.definition_at(index))
            elif suffix == 'i':
                row.append(index)
            else:
                row.append(palette.name_at(index))

        self.content.append(row)
        self.inputs.append(input)
        self.colours.append(colour)
        self.contexts.append(context)

    @staticmethod
    def _locate(palette: Palette, colour: Colour, context: Colour | None) -> tuple[int, float] | None:
        """Index and ΔE*₀₀ of the palette entry a row describes."""
        if context is not None:
            index = palette.find(colour)
            if index < 0:
                return None
            return index, context.lab.delta_e(palette.colour_at(index).lab)
        matches = palette.match(colour)
        if not matches:
            return None
        return matches[0].index, colour.lab.delta_e(matches[0].colour.lab)
