"""Tests for the output formats and their discovery."""

import json
import math
from pathlib import Path

import pytest
from colour_tool import registry
from colour_tool.core.colour import Colour
from colour_tool.core.dataset import DataSet
from colour_tool.core.errors import TemplateRenderError
from colour_tool.core.palettes import PaletteRegistry
from colour_tool.core.types import Formatter
from colour_tool.formats import json_list
from colour_tool.formats._table import CellText, cell


@pytest.fixture
def data() -> DataSet:
    d = DataSet('x[css]', PaletteRegistry())
    d.push('#ff6347', Colour.of('#ff6347'))
    return d


@pytest.fixture
def with_missing() -> DataSet:
    d = DataSet('x[css]', PaletteRegistry())
    d.push('lab(* * *)', Colour.of('lab(* * *)'))
    return d


class TestDiscovery:
    def test_all_formats(self) -> None:
        assert set(registry.discover()) == {'csv', 'flat', 'html', 'json', 'text'}

    def test_get(self) -> None:
        fmt = registry.get('csv')
        assert isinstance(fmt, Formatter)
        assert fmt.help

    def test_get_unknown(self) -> None:
        with pytest.raises(KeyError, match='Unknown format: nope'):
            registry.get('nope')

    def test_module_of(self) -> None:
        assert registry.module_of('csv') == 'colour_tool.formats.csv_table'

    def test_formatter_without_render(self, data: DataSet) -> None:
        with pytest.raises(RuntimeError):
            Formatter('empty').format(data)


class TestCell:
    def test_values(self) -> None:
        text = CellText()
        assert cell(None, text) == ''
        assert cell('abc', text) == 'abc'
        assert cell(3, text) == '3'
        assert cell(1.23456, text) == '1.235'
        assert cell(math.nan, text) == 'NaN'
        assert cell(math.inf, text) == '+Infinity'
        assert cell(-math.inf, text) == '-Infinity'


class TestText:
    def test_table(self, data: DataSet) -> None:
        assert registry.get('text').format(data) == (
            '| sRGB (Hex) | CSS    |\r\n'
            '|:-----------|:-------|\r\n'
            '| #ff6347    | tomato |\r\n'
        )

    def test_missing(self, with_missing: DataSet) -> None:
        lines = registry.get('text').format(with_missing).splitlines()
        assert lines[2] == '| N/A        | N/A |'

    def test_header_only(self) -> None:
        out = registry.get('text').format(DataSet('r', PaletteRegistry()))
        assert out == '| sRGB |\r\n|:-----|\r\n'


class TestCsv:
    def test_table(self, data: DataSet) -> None:
        assert registry.get('csv').format(data) == 'sRGB (Hex),CSS\r\n#ff6347,tomato\r\n'

    def test_missing(self, with_missing: DataSet) -> None:
        assert registry.get('csv').format(with_missing) == 'sRGB (Hex),CSS\r\n#NA,#NA\r\n'

    def test_quoting(self) -> None:
        d = DataSet('r', PaletteRegistry())
        d.push('#f00', Colour.of('#f00'))
        assert registry.get('csv').format(d) == 'sRGB\r\n"rgb(255,0,0)"\r\n'


class TestJson:
    def test_rows(self, data: DataSet) -> None:
        out = registry.get('json').format(data)
        assert json.loads(out) == [{'x': '#ff6347', 'css': 'tomato'}]
        assert out.endswith('\n')

    def test_numbers(self) -> None:
        d = DataSet('[css:i][css:e]', PaletteRegistry())
        d.push('#ff6347', Colour.of('#ff6347'))
        [row] = json.loads(registry.get('json').format(d))
        assert row == {'css:i': d.registry.css.index_of('tomato'), 'css:e': 0.0}

    def test_missing(self, with_missing: DataSet) -> None:
        assert json.loads(registry.get('json').format(with_missing)) == [{'x': None, 'css': None}]

    def test_non_finite(self) -> None:
        assert json_list._value(math.nan) is None
        assert json_list._value(-math.inf) is None
        assert json_list._value(1.5) == 1.5

    def test_no_rows(self) -> None:
        out = registry.get('json').format(DataSet('[r:e]', PaletteRegistry()))
        assert out == '[]\n'


class TestFlat:
    def test_blocks(self, data: DataSet) -> None:
        assert registry.get('flat').format(data) == '#ff6347\r\n\tsRGB (Hex)\t #ff6347\r\n\tCSS       \t tomato\r\n\r\n'

    def test_missing(self, with_missing: DataSet) -> None:
        out = registry.get('flat').format(with_missing)
        assert out.startswith('lab(* * *)\r\n\tsRGB (Hex)\t \r\n')


class TestHtml:
    def test_page(self, data: DataSet) -> None:
        out = registry.get('html').format(data)
        assert out.startswith('<!DOCTYPE html>')
        assert '<th>sRGB (Hex)</th><th>CSS</th>' in out
        assert '<td><span class="swatch" style="background: #ff6347"></span>#ff6347</td>' in out
        assert '<td><span class="swatch" style="background: tomato"></span>tomato</td>' in out

    def test_no_swatch(self) -> None:
        d = DataSet('l', PaletteRegistry())
        d.push('#f00', Colour.of('#f00'))
        out = registry.get('html').format(d)
        assert 'swatch" style' not in out
        assert '<td>lab(' in out

    def test_missing(self, with_missing: DataSet) -> None:
        out = registry.get('html').format(with_missing)
        assert '<td>\u00a0</td><td>\u00a0</td>' in out

    def test_unicode_header(self) -> None:
        d = DataSet('[r:e]', PaletteRegistry())
        out = registry.get('html').format(d)
        assert '<th>ΔE*₀₀ (RGB)</th>' in out

    def test_user_template(self, data: DataSet, tmp_path: Path) -> None:
        path = tmp_path / 'mine.html.j2'
        path.write_text('{% for row in content %}{{ row[0].text }}|{{ row[1].swatch }};{% endfor %}')
        out = registry.get('html').format(data, template=str(path))
        assert out == '#ff6347|True;'

    def test_user_template_escapes(self, tmp_path: Path) -> None:
        path = tmp_path / 'mine.html.j2'
        path.write_text('{{ headers[0] }}')
        out = registry.get('html').format(DataSet('[r:e]', PaletteRegistry()), template=str(path))
        assert out == 'ΔE*₀₀ (RGB)'
        path.write_text('{{ "<b>" }}')
        assert registry.get('html').format(DataSet('r', PaletteRegistry()), template=str(path)) == '&lt;b&gt;'

    def test_missing_template(self, data: DataSet, tmp_path: Path) -> None:
        with pytest.raises(TemplateRenderError, match='Template not found'):
            registry.get('html').format(data, template=str(tmp_path / 'none.html.j2'))

    def test_broken_template(self, data: DataSet, tmp_path: Path) -> None:
        path = tmp_path / 'bad.html.j2'
        path.write_text('{{ nothing_here }}')
        with pytest.raises(TemplateRenderError, match='Template rendering failed'):
            registry.get('html').format(data, template=str(path))

    def test_template_ignored_by_other_formats(self, data: DataSet, tmp_path: Path) -> None:
        out = registry.get('csv').format(data, template=str(tmp_path / 'none.html.j2'))
        assert out == 'sRGB (Hex),CSS\r\n#ff6347,tomato\r\n'
