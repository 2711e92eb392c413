"""Tests for the unified Colour and the master parse dispatcher."""

import math

import pytest
from colour_tool.core.colour import Colour, parse_colour_value
from colour_tool.core.errors import InvalidColourError
from colour_tool.spaces import HSL, HWB, LAB, LCH, RGB, XYY, XYZ, YCC, YUV, Linear


class TestParseColourValue:
    @pytest.mark.parametrize(
        ('text', 'space'),
        [
            ('#123', RGB),
            ('rgb(1,2,3)', RGB),
            ('lin(0.1,0.2,0.3)', Linear),
            ('hsl(72,50%,50%)', HSL),
            ('hwb(72,10%,10%)', HWB),
            ('xyz(0.1,0.2,0.3)', XYZ),
            ('xyy(0.3,0.3,0.5)', XYY),
            ('lab(50 10 -10)', LAB),
            ('lch(50 10 200)', LCH),
            ('yuv(128,128,128)', YUV),
            ('ycc(256,2048,2048)', YCC),
        ],
    )
    def test_dispatch(self, text: str, space: type) -> None:
        assert isinstance(parse_colour_value(text), space)

    def test_unanchored(self) -> None:
        assert isinstance(parse_colour_value('colour: #ff0000;'), RGB)

    def test_nothing_matches(self) -> None:
        assert parse_colour_value('tomato') is None
        assert parse_colour_value('') is None


class TestOf:
    def test_from_text(self) -> None:
        c = Colour.of('rgb(240,248,255)')
        assert c.space == 'RGB'
        assert str(c) == '#f0f8ff'
        assert c.hsl.to_string() == 'hsl(208,100%,97.06%)'
        assert c.rgb.to_rgb_string() == 'rgb(240,248,255)'

    def test_definition_kept(self) -> None:
        c = Colour.of('hsl(72deg,35%,90%)')
        assert c.space == 'HSL'
        assert str(c) == 'hsl(72,35%,90%)'
        assert c.hsl is c.defn

    def test_from_value(self) -> None:
        c = Colour.of(YUV(0.5, -0.3, 0.2))
        assert c.space == 'YUV'
        assert str(c) == 'yuv(128,51,179)'

    def test_xyy_label(self) -> None:
        assert Colour.of('xyy(0.3,0.3,0.5)').space == 'xyY'

    def test_name_and_space_override(self) -> None:
        c = Colour.of('#ff6347', 'tomato', 'css')
        assert str(c) == 'tomato'
        assert c.space == 'css'
        assert c.name == 'tomato'

    def test_every_space_filled(self) -> None:
        c = Colour.of('lch(60 40 180)')
        assert c.lch is c.defn
        assert c.lab.equal_to(c.lch.to_lab())
        assert c.xyz.equal_to(c.lab.to_xyz())
        assert c.rgb.equal_to(c.lin.to_rgb())
        assert c.hsl.to_string() == 'hsl(171.63,79.31%,35.68%)'
        for value in (c.hwb, c.xyy, c.yuv, c.ycc):
            assert not value.empty

    def test_invalid_text(self) -> None:
        with pytest.raises(InvalidColourError, match='nonsense'):
            Colour.of('nonsense')

    def test_invalid_value(self) -> None:
        with pytest.raises(InvalidColourError):
            Colour.of(42)

    def test_parse_string(self) -> None:
        assert Colour.parse_string('nonsense') is None
        assert Colour.parse_string('#f00').rgb.red == 255


class TestEmpty:
    def test_all_unknown(self) -> None:
        c = Colour.of('lab(* * *)')
        assert c.empty
        assert c.rgb.empty
        assert c.hsl.empty
        assert math.isnan(c.yuv.y)

    def test_degenerate_xyy(self) -> None:
        c = Colour.of(XYY(0.3, 0, 0.5))
        assert not c.empty
        assert c.xyz.empty
        assert c.rgb.empty

    def test_never_equal(self) -> None:
        c = Colour.of('lab(* * *)')
        assert not c.equal_to(c)


class TestEqualTo:
    @pytest.mark.parametrize(
        'text',
        ['rgb(255,0,255)', '#ff00ff', '#f0f', 'rgb(100%,0,100%)', 'hsl(300,100%,50%)', 'hwb(300,0%,0%)'],
    )
    def test_magenta(self, text: str) -> None:
        assert Colour.of(text).equal_to(Colour.of('#ff00ff'))

    def test_different(self) -> None:
        assert not Colour.of('#ff6347').equal_to(Colour.of('#ff6348'))

    def test_delta_e(self) -> None:
        a = Colour.of('#ff6347')
        b = Colour.of('#ff6348')
        assert a.equal_to(b, 1.0)
        assert not a.equal_to(b, 0.0)
