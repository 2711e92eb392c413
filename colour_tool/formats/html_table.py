"""Standalone HTML page holding the table, rendered with Jinja2.

Cells of columns that hold CSS colour notations (r, p, x, 6, 3, hsl, and
the css palette names) get a colour swatch beside the text.

The packaged template is formats/templates/table.html.j2. Pass your own
with -t/--template; it is rendered with autoescaping and these variables:

    headers   list of column headers
    content   one list per row of cells, each with .text and .swatch

Example:
    colour-tool -f html -c '*' convert red green blue > colours.html
    colour-tool -f html -t mine.html.j2 convert tomato
"""

from pathlib import Path

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
)

from colour_tool.core.dataset import HTML_COLOUR_COLUMNS, DataSet
from colour_tool.core.errors import TemplateRenderError
from colour_tool.core.types import Formatter
from colour_tool.formats._table import CellText, tabulate

formatter = Formatter(name='html', help='Standalone HTML table with colour swatches.', templated=True)

HTML = CellText(missing='\u00a0', inf='∞', neg_inf='-∞')

DEFAULT_TEMPLATE = 'table.html.j2'


def _environment(loader: BaseLoader) -> Environment:
    return Environment(
        loader=loader,
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def _locals(data: DataSet) -> dict:
    table = tabulate(data, HTML)
    swatches = [code in HTML_COLOUR_COLUMNS for code in data.columns]
    content = [
        [{'text': text, 'swatch': swatch and bool(text.strip())} for text, swatch in zip(row, swatches)]
        for row in table[1:]
    ]
    return {'headers': table[0], 'content': content}


@formatter.render
def render(data: DataSet, template: str | None = None) -> str:
    if template is None:
        env = _environment(PackageLoader('colour_tool.formats', 'templates'))
        name = DEFAULT_TEMPLATE
    else:
        path = Path(template).resolve()
        env = _environment(FileSystemLoader(path.parent))
        name = path.name
    try:
        return env.get_template(name).render(**_locals(data))
    except TemplateNotFound as e:
        raise TemplateRenderError(f'Template not found: {template or e}') from e
    except TemplateError as e:
        raise TemplateRenderError(f'Template rendering failed: {e}') from e
