"""JSON: a list with one object per row, keyed by column code.

Numbers stay numbers; NaN and infinities become null, as do missing values.

Example:
    colour-tool -f json -c 'x[css][css:e]' convert '#8a371b'
"""

import json
import math
from typing import Any

from colour_tool.core.dataset import DataSet
from colour_tool.core.types import Formatter

formatter = Formatter(name='json', help='JSON list of objects keyed by column code.')


def _value(v: Any) -> Any:
    if isinstance(v, float) and not math.isfinite(v):
        return None
    return v


@formatter.render
def render(data: DataSet) -> str:
    rows = [{code: _value(v) for code, v in zip(data.columns, row)} for row in data.content]
    return json.dumps(rows, indent=4, ensure_ascii=False) + '\n'
