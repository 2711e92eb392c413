"""The palette registry.

A registry always starts with the built-in `css` palette at index 0.
User palettes (*.palette JSON files) are added from the configured palette
directories by load_user_palettes(). Palette names are unique.

Most code uses the process-wide default_registry(); tests build their own.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from pathlib import Path

from colour_tool.core import env
from colour_tool.core.colour import Colour
from colour_tool.core.css import CSS_NAMED_COLOURS
from colour_tool.core.errors import DuplicateNameError, PaletteIndexError, UnknownNameError
from colour_tool.core.palette import Palette

PALETTE_SUFFIX = '.palette'


def css_palette() -> Palette:
    return Palette('css', 'CSS', [(defn, name) for name, defn in CSS_NAMED_COLOURS])


class PaletteRegistry:
    def __init__(self) -> None:
        self._palettes: list[Palette] = []
        self._indices: dict[str, int] = {}
        self._lock = threading.Lock()
        self.add(css_palette())

    def __iter__(self):
        return iter(list(self._palettes))

    def __len__(self) -> int:
        return len(self._palettes)

    @property
    def count(self) -> int:
        return len(self._palettes)

    @property
    def css(self) -> Palette:
        return self._palettes[0]

    def add(self, palette: Palette) -> int:
        """Register a palette and return its index."""
        with self._lock:
            if palette.name in self._indices:
                raise DuplicateNameError(f'There is already a palette named {palette.name} in the list')
            index = len(self._palettes)
            self._palettes.append(palette)
            self._indices[palette.name] = index
            return index

    def palette_at(self, index: int) -> Palette:
        if not 0 <= index < len(self._palettes):
            raise PaletteIndexError(index, len(self._palettes))
        return self._palettes[index]

    def has_palette(self, name: str) -> bool:
        return name in self._indices

    def palette_of(self, name: str) -> Palette:
        if name not in self._indices:
            raise UnknownNameError(f'No palette named {name}', name)
        return self._palettes[self._indices[name]]

    def index_of(self, name: str) -> int:
        return self._indices.get(name, -1)

    def parse_string(self, text: str) -> Colour | None:
        """Parse a colour notation, else look the text up as a colour name in each palette in turn."""
        colour = Colour.parse_string(text)
        if colour is not None:
            return colour
        for palette in self:
            if palette.has_colour(text):
                return palette.colour_of(text)
        return None

    def load_user_palettes(self, dirs: Iterable[str | Path] | None = None) -> list[Palette]:
        """Load and register every *.palette file in dirs (default: configured palette directories).

        Files are taken in name order per directory. Missing directories are skipped.
        """
        if dirs is None:
            dirs = env.settings().palette_dirs
        loaded = []
        for path in collect_palette_files(dirs):
            palette = Palette.parse_json_file(path)
            self.add(palette)
            loaded.append(palette)
        return loaded


def collect_palette_files(dirs: Iterable[str | Path]) -> list[Path]:
    files: list[Path] = []
    for d in dirs:
        directory = Path(d)
        if not directory.is_dir():
            continue
        found = [p for p in directory.iterdir() if p.is_file() and p.name.lower().endswith(PALETTE_SUFFIX)]
        files.extend(sorted(found, key=lambda p: p.name))
    return files


_default: PaletteRegistry | None = None
_default_lock = threading.Lock()


def default_registry() -> PaletteRegistry:
    """The process-wide registry, created on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = PaletteRegistry()
        return _default
