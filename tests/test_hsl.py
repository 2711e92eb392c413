"""Tests for the hue-based spaces: HSL and HWB."""

import math

import pytest
from colour_tool.spaces import HSL, HWB, RGB


class TestHSLParse:
    def test_degrees(self) -> None:
        c = HSL.parse_string('hsl(72,100%,50%)')
        assert c is not None
        assert c.h == pytest.approx(0.2)
        assert c.hue_degrees == 72
        assert c.saturation_percent == 100
        assert c.lightness_percent == 50

    def test_deg_suffix(self) -> None:
        c = HSL.parse_string('hsl(72deg,50%,75%)')
        assert c is not None
        assert c.h == pytest.approx(0.2)
        assert c.hue_degrees == 72

    def test_degree_sign(self) -> None:
        c = HSL.parse_string('hsl( 72° , 50% , 75% )')
        assert c is not None
        assert c.h == pytest.approx(0.2)

    def test_radians(self) -> None:
        c = HSL.parse_string('hsl(0.5rad,50%,75%)')
        assert c is not None
        assert c.h == pytest.approx(0.5 / (2 * math.pi))

    def test_no_match(self) -> None:
        assert HSL.parse_string('hwb(72,50%,75%)') is None
        assert HSL.parse_string('hsl(72 50% 75%)') is None


class TestHSLFormat:
    def test_to_string(self) -> None:
        assert HSL(0.2, 0.5, 0.75).to_string() == 'hsl(72,50%,75%)'

    def test_precision(self) -> None:
        assert HSL(1 / 3, 1 / 3, 1 / 3).to_string() == 'hsl(120,33.33%,33.33%)'

    def test_empty(self) -> None:
        assert HSL.EMPTY.empty
        assert HSL.EMPTY.to_string() == 'hsl(NaN,NaN%,NaN%)'
        assert math.isnan(HSL.EMPTY.hue_degrees)

    def test_hue_degrees_clamped(self) -> None:
        assert HSL(0.9999, 1, 0.5).hue_degrees == 360


class TestHSLConvert:
    def test_to_rgb(self) -> None:
        assert HSL(0.2, 1, 0.5).to_rgb().to_hex_string() == '#cf0'

    def test_from_rgb(self) -> None:
        rgb = RGB.parse_string('#cf0')
        hsl = HSL.from_rgb(rgb)
        assert hsl.h == pytest.approx(0.2)
        assert hsl.s == pytest.approx(1)
        assert hsl.l == pytest.approx(0.5)
        assert hsl.to_rgb().equal_to(rgb)

    def test_grey_has_no_saturation(self) -> None:
        hsl = HSL.from_rgb(RGB(0.5, 0.5, 0.5))
        assert hsl.h == 0
        assert hsl.s == 0
        assert hsl.l == pytest.approx(0.5)

    def test_black_and_white(self) -> None:
        assert HSL.from_rgb(RGB(0, 0, 0)).s == 0
        assert HSL.from_rgb(RGB(1, 1, 1)).s == 0

    def test_aliceblue(self) -> None:
        hsl = HSL.from_rgb(RGB.parse_string('#f0f8ff'))
        assert hsl.to_string() == 'hsl(208,100%,97.06%)'

    def test_empty_rgb(self) -> None:
        assert HSL.from_rgb(RGB.EMPTY) is HSL.EMPTY

    def test_equal_to(self) -> None:
        assert HSL(0.2, 0.5, 0.5).equal_to(HSL(0.201, 0.5, 0.5))
        assert not HSL(0.2, 0.5, 0.5).equal_to(HSL(0.25, 0.5, 0.5))


class TestHWB:
    def test_parse(self) -> None:
        c = HWB.parse_string('hwb(300,10%,20%)')
        assert c is not None
        assert c.hue_degrees == 300
        assert c.whiteness_percent == pytest.approx(10)
        assert c.blackness_percent == pytest.approx(20)

    def test_parse_grad(self) -> None:
        c = HWB.parse_string('hwb(100grad,0%,0%)')
        assert c is not None
        assert c.h == pytest.approx(0.25)

    def test_to_string(self) -> None:
        assert HWB(0.5, 0.25, 0.125).to_string() == 'hwb(180,25%,12.5%)'

    def test_pure_hue(self) -> None:
        assert HWB(300 / 360, 0, 0).to_rgb().to_hex_string() == '#f0f'

    def test_from_rgb(self) -> None:
        hwb = HWB.from_rgb(RGB(1, 0, 1))
        assert hwb.hue_degrees == 300
        assert hwb.w == 0
        assert hwb.b == 0

    def test_grey(self) -> None:
        hwb = HWB.from_rgb(RGB(0.5, 0.5, 0.5))
        assert hwb.w == pytest.approx(0.5)
        assert hwb.b == pytest.approx(0.5)
        assert hwb.to_rgb().equal_to(RGB(0.5, 0.5, 0.5))

    def test_whiteness_and_blackness_normalized(self) -> None:
        rgb = HWB(0, 0.6, 0.6).to_rgb()
        assert rgb.equal_to(RGB(0.5, 0.5, 0.5), 1e-9)

    def test_round_trip(self) -> None:
        rgb = RGB.parse_string('#1ab23c')
        assert HWB.from_rgb(rgb).to_rgb().equal_to(rgb)

    def test_empty(self) -> None:
        assert HWB.from_rgb(RGB.EMPTY) is HWB.EMPTY
        assert HWB.EMPTY.empty
