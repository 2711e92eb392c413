"""Shared cell rendering for the tabular formats."""

import math
from dataclasses import dataclass
from typing import Any

from colour_tool.core.component import format_number
from colour_tool.core.dataset import DataSet

NUMBER_PRECISION = 1e-3


@dataclass(frozen=True)
class CellText:
    """How a format writes values that are not plain text or finite numbers."""

    missing: str = ''
    nan: str = 'NaN'
    inf: str = '+Infinity'
    neg_inf: str = '-Infinity'


def cell(value: Any, text: CellText) -> str:
    if value is None:
        return text.missing
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        if math.isnan(value):
            return text.nan
        if math.isinf(value):
            return text.inf if value > 0 else text.neg_inf
        return format_number(value, NUMBER_PRECISION)
    return str(value)


def tabulate(data: DataSet, text: CellText) -> list[list[str]]:
    """Header row followed by one row of cell strings per data row."""
    table = [list(data.headers)]
    for row in data.content:
        table.append([cell(v, text) for v in row])
    return table
