"""Plain text table with a header rule, readable in a terminal and as Markdown.

Missing values show as N/A; infinities as ∞ and -∞. Lines end with CRLF.

Example:
    colour-tool -f text -c 'rx[css]' convert tomato 'hsl(120,50%,50%)'
"""

from colour_tool.core.dataset import DataSet
from colour_tool.core.types import Formatter
from colour_tool.formats._table import CellText, tabulate

formatter = Formatter(name='text', help='Pipe-delimited text table (default).')

TEXT = CellText(missing='N/A', inf='∞', neg_inf='-∞')


@formatter.render
def render(data: DataSet) -> str:
    table = tabulate(data, TEXT)
    widths = [max(len(row[c]) for row in table) for c in range(data.cols)]
    lines = []
    for r, row in enumerate(table):
        lines.append('|' + ''.join(f' {v.ljust(w)} |' for v, w in zip(row, widths)))
        if r == 0:
            lines.append('|' + ''.join(f':{"-" * w}-|' for w in widths))
    return ''.join(line + '\r\n' for line in lines)
