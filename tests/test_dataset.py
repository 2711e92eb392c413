"""Tests for colour_tool.core.dataset: column specs, headers and row values."""

import pytest
from colour_tool.core.colour import Colour
from colour_tool.core.dataset import ALL_FIXED, DELTA_E, DataSet, parse_columns
from colour_tool.core.errors import DuplicateNameError
from colour_tool.core.palette import Palette
from colour_tool.core.palettes import PaletteRegistry
from colour_tool.spaces import XYY


@pytest.fixture
def registry(basic: Palette) -> PaletteRegistry:
    reg = PaletteRegistry()
    reg.add(basic)
    return reg


class TestParseColumns:
    def test_letters_and_brackets(self, registry: PaletteRegistry) -> None:
        assert parse_columns('rx[hsl][css:e]', registry) == ['r', 'x', 'hsl', 'css:e']

    def test_palette_suffixes(self, registry: PaletteRegistry) -> None:
        codes = '[basic][basic:d][basic:i][basic:e]'
        assert parse_columns(codes, registry) == ['basic', 'basic:d', 'basic:i', 'basic:e']

    def test_loss_columns(self, registry: PaletteRegistry) -> None:
        assert parse_columns('[r:e][3:e]36', registry) == ['r:e', '3:e', '3', '6']

    def test_other_text_ignored(self, registry: PaletteRegistry) -> None:
        assert parse_columns('r, x [zzz] l', registry) == ['r', 'x', 'l']

    def test_all(self, registry: PaletteRegistry) -> None:
        columns = parse_columns('*', registry)
        assert columns[: len(ALL_FIXED)] == ALL_FIXED
        assert columns[len(ALL_FIXED) :] == [
            'css',
            'css:d',
            'css:i',
            'css:e',
            'basic',
            'basic:d',
            'basic:i',
            'basic:e',
        ]

    def test_duplicate(self, registry: PaletteRegistry) -> None:
        with pytest.raises(DuplicateNameError, match='Duplicate column: r'):
            parse_columns('rxr', registry)
        with pytest.raises(DuplicateNameError, match='Duplicate column: css'):
            parse_columns('[css]x[css]', registry)

    def test_unknown_palette_ignored(self) -> None:
        assert parse_columns('[basic]', PaletteRegistry()) == []


class TestHeaders:
    def test_headers(self, registry: PaletteRegistry) -> None:
        data = DataSet('rpx6l3', registry)
        assert data.headers == ['sRGB', 'sRGB (%)', 'sRGB (Hex)', '#rrggbb', 'L*a*b*', '#rgb']

    def test_palette_headers(self, registry: PaletteRegistry) -> None:
        data = DataSet('[basic][basic:d][basic:i][basic:e][r:e][3:e]', registry)
        assert data.headers == [
            'Basic colours',
            'Basic colours (Definition)',
            'Basic colours (Index)',
            f'{DELTA_E} (Basic colours)',
            f'{DELTA_E} (RGB)',
            f'{DELTA_E} (#rgb)',
        ]

    def test_samples(self, registry: PaletteRegistry) -> None:
        data = DataSet('x3[lin][css][basic:i][basic:e]', registry)
        assert data.samples == ['#0080ff', '#08f', 'lin(0,0.215861,1)', 'aliceblue', '0', '±5.527']

    def test_samples_match_conversions(self, registry: PaletteRegistry) -> None:
        data = DataSet('rx63[lin][hsl][hwb]', registry)
        data.push('#0080ff', Colour.of('#0080ff'))
        assert data.content[0] == data.samples

    def test_counts(self, registry: PaletteRegistry) -> None:
        data = DataSet('rx', registry)
        assert (data.cols, data.rows) == (2, 0)
        data.push('red', Colour.of('#f00'))
        assert (data.cols, data.rows) == (2, 1)

    def test_default_registry(self) -> None:
        assert DataSet('[css]').registry is not None


class TestPush:
    def test_spaces(self, registry: PaletteRegistry) -> None:
        data = DataSet('rpx[hsl]', registry)
        data.push('#ff00ff', Colour.of('#ff00ff'))
        assert data.content == [['rgb(255,0,255)', 'rgb(100%,0%,100%)', '#f0f', 'hsl(300,100%,50%)']]
        assert data.inputs == ['#ff00ff']
        assert data.contexts == [None]

    def test_nearest_palette_entry(self, registry: PaletteRegistry) -> None:
        data = DataSet('x[css][css:d][css:i][css:e]', registry)
        data.push('#ff6347', Colour.of('#ff6347'))
        index = registry.css.index_of('tomato')
        assert data.content == [['#ff6347', 'tomato', '#ff6347', index, 0.0]]

    def test_match_rows(self, registry: PaletteRegistry) -> None:
        query = Colour.of('#ff6347')
        data = DataSet('[basic][basic:i][basic:e]', registry)
        for m in registry.palette_of('basic').match(query, 2):
            data.push('#ff6347', m.colour, query)
        assert [row[0] for row in data.content] == ['red', 'orange']
        assert [row[1] for row in data.content] == [2, 7]
        assert data.content[0][2] == pytest.approx(12.99, abs=0.005)
        assert data.content[1][2] == pytest.approx(14.97, abs=0.005)
        assert data.contexts == [query, query]

    def test_context_other_palette(self, registry: PaletteRegistry) -> None:
        query = Colour.of('#010101')
        [m] = registry.palette_of('basic').match(query)
        data = DataSet('[basic][css][css:e]', registry)
        data.push('#010101', m.colour, query)
        row = data.content[0]
        assert row[:2] == ['black', 'black']
        assert row[2] == pytest.approx(m.delta_e)

    def test_loss(self, registry: PaletteRegistry) -> None:
        data = DataSet('[r:e][3:e]', registry)
        data.push('#123', Colour.of('#123'))
        data.push('#1a2b3c', Colour.of('#1a2b3c'))
        assert data.content[0] == [0.0, 0.0]
        assert data.content[1][0] == 0.0
        assert data.content[1][1] > 0

    def test_empty_colour(self, registry: PaletteRegistry) -> None:
        data = DataSet('rx[hsl][css][css:e]', registry)
        data.push('lab(* * *)', Colour.of('lab(* * *)'))
        assert data.content == [[None, None, None, None, None]]

    def test_no_rgb(self, registry: PaletteRegistry) -> None:
        data = DataSet('x6[xyy]', registry)
        data.push('xyy(0.3,0,0.5)', Colour.of(XYY(0.3, 0, 0.5)))
        assert data.content[0][:2] == [None, None]
        assert data.content[0][2] == 'xyy(0.3,0,0.5)'

