"""Shared types for colour-tool: Match, Formatter."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from colour_tool.core.colour import Colour
    from colour_tool.core.dataset import DataSet


@dataclass(frozen=True)
class Match:
    """A palette entry that matched a query colour."""

    index: int  # position in the palette
    colour: Colour
    delta_e: float  # ΔE*₀₀ from the query colour
    defn: str  # entry definition text
    name: str | None = None


class Formatter:
    """A self-registering output format.

    Usage in a formats module:

        formatter = Formatter(name='csv', help='Comma-separated values')

        @formatter.render
        def render(data):
            ...

    A templated formatter's render function also takes the path of a user
    template, or None for the packaged one.
    """

    def __init__(self, name: str, help: str = '', templated: bool = False):
        self.name = name
        self.help = help
        self.templated = templated
        self._render_fn: Callable[..., str] | None = None

    def render(self, fn: Callable[..., str]) -> Callable[..., str]:
        """Decorator to register the render function."""
        self._render_fn = fn
        return fn

    def format(self, data: DataSet, template: str | None = None) -> str:
        """Render a data set with this format. template is ignored unless the format is templated."""
        if self._render_fn is None:
            raise RuntimeError(f'Formatter {self.name} has no render function')
        if self.templated:
            return self._render_fn(data, template)
        return self._render_fn(data)
