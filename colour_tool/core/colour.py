"""The unified Colour: one defining value plus its image in every other space.

Each defining space has a fixed derivation path through the conversion
graph. Linear RGB and XYZ are the hubs:

    RGB    -> Linear -> XYZ -> LAB -> LCH
    Linear -> RGB
    HSL    -> RGB -> Linear
    HWB    -> RGB -> Linear
    XYZ    -> Linear -> RGB
    xyY    -> XYZ -> Linear -> RGB
    LAB    -> XYZ -> Linear -> RGB
    LCH    -> LAB -> XYZ -> Linear -> RGB
    YUV    -> Linear -> RGB
    YCC    -> Linear -> RGB

HSL and HWB always come from RGB; YUV and YCC from Linear; xyY from XYZ.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from colour_tool.core.errors import InvalidColourError
from colour_tool.spaces import HSL, HWB, LAB, LCH, RGB, XYY, XYZ, YCC, YUV, Linear

SpaceValue = Union[RGB, Linear, HSL, HWB, XYZ, XYY, LAB, LCH, YUV, YCC]

# Master dispatcher: first grammar that matches wins
_PARSERS: list[Callable[[str], SpaceValue | None]] = [
    RGB.parse_string,
    Linear.parse_string,
    HSL.parse_string,
    XYZ.parse_string,
    XYY.parse_string,
    LAB.parse_string,
    HWB.parse_string,
    LCH.parse_string,
    YUV.parse_string,
    YCC.parse_string,
]

SPACE_LABELS: dict[type, str] = {
    RGB: 'RGB',
    Linear: 'Linear',
    HSL: 'HSL',
    XYZ: 'XYZ',
    XYY: 'xyY',
    LAB: 'LAB',
    HWB: 'HWB',
    LCH: 'LCH',
    YUV: 'YUV',
    YCC: 'YCC',
}


def parse_colour_value(text: str) -> SpaceValue | None:
    """Parse text with each space grammar in turn; None if nothing matches."""
    for parse in _PARSERS:
        value = parse(text)
        if value is not None:
            return value
    return None


def _hubs(value: SpaceValue) -> dict[str, SpaceValue]:
    """The defining value plus whatever lies on its path to both RGB and Linear."""
    if isinstance(value, RGB):
        return {'rgb': value, 'lin': Linear.from_rgb(value)}
    if isinstance(value, Linear):
        return {'lin': value, 'rgb': value.to_rgb()}
    if isinstance(value, (HSL, HWB)):
        rgb = value.to_rgb()
        key = 'hsl' if isinstance(value, HSL) else 'hwb'
        return {key: value, 'rgb': rgb, 'lin': Linear.from_rgb(rgb)}
    if isinstance(value, (YUV, YCC)):
        lin = value.to_linear()
        key = 'yuv' if isinstance(value, YUV) else 'ycc'
        return {key: value, 'lin': lin, 'rgb': lin.to_rgb()}

    known: dict[str, SpaceValue] = {}
    if isinstance(value, LCH):
        known['lch'] = value
        value = value.to_lab()
    if isinstance(value, LAB):
        known['lab'] = value
        value = value.to_xyz()
    if isinstance(value, XYY):
        known['xyy'] = value
        value = value.to_xyz()
    if isinstance(value, XYZ):
        lin = value.to_linear()
        known.update(xyz=value, lin=lin, rgb=lin.to_rgb())
        return known
    raise InvalidColourError(value)


@dataclass(frozen=True, eq=False)
class Colour:
    """A colour known in every supported space.

    Build with Colour.of(value) from any space value or parseable text.
    Compare with equal_to(), not ==.
    """

    defn: SpaceValue
    space: str
    rgb: RGB
    lin: Linear
    hsl: HSL
    hwb: HWB
    xyz: XYZ
    xyy: XYY
    lab: LAB
    lch: LCH
    yuv: YUV
    ycc: YCC
    name: str | None = None

    @classmethod
    def of(cls, value: SpaceValue | str, name: str | None = None, space: str | None = None) -> Colour:
        """Build a colour from a space value or text.

        `space` overrides the defining-space label, e.g. with the name of
        the palette the colour came from.
        """
        if isinstance(value, str):
            parsed = parse_colour_value(value)
            if parsed is None:
                raise InvalidColourError(value)
            value = parsed
        if type(value) not in SPACE_LABELS:
            raise InvalidColourError(value)

        v = _hubs(value)
        rgb, lin = v['rgb'], v['lin']
        xyz = v.get('xyz') or XYZ.from_linear(lin)
        lab = v.get('lab') or LAB.from_xyz(xyz)
        return cls(
            defn=value,
            space=space or SPACE_LABELS[type(value)],
            rgb=rgb,
            lin=lin,
            hsl=v.get('hsl') or HSL.from_rgb(rgb),
            hwb=v.get('hwb') or HWB.from_rgb(rgb),
            xyz=xyz,
            xyy=v.get('xyy') or XYY.from_xyz(xyz),
            lab=lab,
            lch=v.get('lch') or LCH.from_lab(lab),
            yuv=v.get('yuv') or YUV.from_linear(lin),
            ycc=v.get('ycc') or YCC.from_linear(lin),
            name=name,
        )

    @classmethod
    def parse_string(cls, text: str) -> Colour | None:
        """Parse text with the master dispatcher; None if no grammar matches."""
        value = parse_colour_value(text)
        if value is None:
            return None
        return cls.of(value)

    @property
    def empty(self) -> bool:
        return self.defn.empty

    def equal_to(self, other: Colour, delta_e: float | None = None) -> bool:
        """8-bit RGB equality, or ΔE*₀₀ strictly below `delta_e` when given."""
        if delta_e is None:
            return self.rgb.equal_to(other.rgb)
        return self.lab.delta_e(other.lab) < delta_e

    def __str__(self) -> str:
        if self.name:
            return self.name
        return str(self.defn)
