"""Palettes: ordered lists of named colour definitions, with nearest-colour matching.

An entry's colour is parsed from its definition on first use and cached for
the palette's lifetime, so a bad definition only fails when it is reached.

Palette files are JSON:

    {
        "name": "basic",
        "desc": "Basic colours",          (optional, defaults to name)
        "entries": [
            {"defn": "#ff0000", "name": "red"},
            {"defn": "hsl(120,100%,25%)"}  (name optional)
        ]
    }
"""

from __future__ import annotations

import json
import math
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from colour_tool.core.colour import Colour
from colour_tool.core.errors import (
    InvalidColourError,
    PaletteEntryError,
    PaletteFormatError,
    PaletteIndexError,
    UnknownNameError,
)
from colour_tool.core.types import Match


@dataclass
class PaletteEntry:
    defn: str
    name: str | None = None
    colour: Colour | None = None  # set on first access


class Palette:
    """A named, ordered colour list with case-insensitive name lookup.

    Duplicate entry names are allowed; the last one wins for lookups by name.
    """

    def __init__(self, name: str, description: str | None, entries: list[tuple[str, str | None]]):
        self.name = name.lower()
        self.description = description if description is not None else name
        self._entries = [PaletteEntry(defn, entry_name) for defn, entry_name in entries]
        self._indices: dict[str, int] = {}
        for i, entry in enumerate(self._entries):
            if entry.name:
                self._indices[entry.name.lower()] = i
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f'Palette({self.name!r}, {len(self)} entries)'

    @classmethod
    def parse_json(cls, obj: Any) -> Palette:
        """Build a palette from a decoded palette definition."""
        if not isinstance(obj, dict) or 'name' not in obj:
            raise PaletteFormatError('Missing field: "name" on: root object')
        name = str(obj['name'])
        desc = str(obj['desc']) if 'desc' in obj else name

        entries: list[tuple[str, str | None]] = []
        if 'entries' in obj:
            items = obj['entries']
            if not isinstance(items, list):
                raise PaletteFormatError('Field is not an array: "entries" on: root object')
            for i, item in enumerate(items):
                if not isinstance(item, dict) or 'defn' not in item:
                    raise PaletteFormatError(
                        f'Missing field: "defn" on: item at index {i} in field "entries" of: root object'
                    )
                entry_name = str(item['name']) if 'name' in item else None
                entries.append((str(item['defn']), entry_name))
        if not entries:
            raise PaletteFormatError('Palette contains no entries')
        return cls(name, desc, entries)

    @classmethod
    def parse_json_file(cls, path: str | Path) -> Palette:
        """Read and parse a UTF-8 palette file."""
        text = Path(path).read_text(encoding='utf-8')
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as e:
            raise PaletteFormatError(f'{path}: {e}') from e
        return cls.parse_json(obj)

    def _check_index(self, index: int) -> PaletteEntry:
        if not 0 <= index < len(self._entries):
            raise PaletteIndexError(index, len(self._entries))
        return self._entries[index]

    def _entry_colour(self, index: int) -> Colour:
        entry = self._entries[index]
        with self._lock:
            if entry.colour is None:
                try:
                    entry.colour = Colour.of(entry.defn, entry.name, self.name)
                except InvalidColourError as e:
                    raise PaletteEntryError(
                        f'Cannot parse palette {self.name} entry #{index + 1} ({entry.name or "unnamed"}) '
                        f'definition {entry.defn} as a colour'
                    ) from e
            return entry.colour

    def _lookup(self, name: str) -> int:
        n = name.lower()
        if n not in self._indices:
            raise UnknownNameError(f'Palette {self.name} does not define a colour named {n}', n)
        return self._indices[n]

    def has_colour(self, name: str) -> bool:
        return name.lower() in self._indices

    def index_of(self, name: str) -> int:
        """Index of the named colour, or -1."""
        return self._indices.get(name.lower(), -1)

    def colour_of(self, name: str) -> Colour:
        return self._entry_colour(self._lookup(name))

    def definition_of(self, name: str) -> str:
        return self._entries[self._lookup(name)].defn

    def colour_at(self, index: int) -> Colour:
        self._check_index(index)
        return self._entry_colour(index)

    def name_at(self, index: int) -> str | None:
        return self._check_index(index).name

    def definition_at(self, index: int) -> str:
        return self._check_index(index).defn

    def find(self, colour: Colour, start_at: int = 0, delta_e: float | None = None) -> int:
        """Index of the first entry from start_at that equals colour (see Colour.equal_to), or -1."""
        for i in range(max(0, start_at), len(self._entries)):
            if colour.equal_to(self._entry_colour(i), delta_e):
                return i
        return -1

    def match(self, colour: Colour, count: int = 1, delta_e: float = math.inf) -> list[Match]:
        """Up to `count` entries closer than `delta_e`, nearest first; ties keep palette order."""
        matches = []
        for i, entry in enumerate(self._entries):
            candidate = self._entry_colour(i)
            d = colour.lab.delta_e(candidate.lab)
            if d < delta_e:
                matches.append(Match(index=i, colour=candidate, delta_e=d, defn=entry.defn, name=entry.name))
        matches.sort(key=lambda m: m.delta_e)
        return matches[:count]
