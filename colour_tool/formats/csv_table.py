"""Comma-separated values (RFC 4180), header row first.

Missing values are #NA; NaN is #NAN; infinities are #INF and -#INF.

Example:
    colour-tool -f csv -c 'rx[hsl]' convert red '#808080'
"""

import csv
import io

from colour_tool.core.dataset import DataSet
from colour_tool.core.types import Formatter
from colour_tool.formats._table import CellText, tabulate

formatter = Formatter(name='csv', help='Comma-separated values with a header row.')

CSV = CellText(missing='#NA', nan='#NAN', inf='#INF', neg_inf='-#INF')


@formatter.render
def render(data: DataSet) -> str:
    out = io.StringIO()
    writer = csv.writer(out, lineterminator='\r\n')
    writer.writerows(tabulate(data, CSV))
    return out.getvalue()
