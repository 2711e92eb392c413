"""One block per input colour: the input, then a header/value line per column.

Values are separated from their header by a tab. Missing values are blank.
Lines end with CRLF.

Example:
    colour-tool -f flat -c '*' convert tomato
"""

from colour_tool.core.dataset import DataSet
from colour_tool.core.types import Formatter
from colour_tool.formats._table import CellText, tabulate

formatter = Formatter(name='flat', help='One block per colour with a line per column.')


@formatter.render
def render(data: DataSet) -> str:
    table = tabulate(data, CellText())
    headers = table[0]
    width = max((len(h) for h in headers), default=0)
    out = []
    for input_text, row in zip(data.inputs, table[1:]):
        out.append(f'{input_text}\r\n')
        for header, value in zip(headers, row):
            out.append(f'\t{header.ljust(width)}\t {value}\r\n')
        out.append('\r\n')
    return ''.join(out)
