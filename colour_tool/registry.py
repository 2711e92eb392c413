"""Output format discovery.

Scans colour_tool/formats/ for modules defining a `formatter` object of
type Formatter and collects them by name. Under a frozen binary, where
pkgutil.iter_modules returns nothing, the known module list is used.
"""

import importlib
import pkgutil

from colour_tool.core.types import Formatter

_formats: dict[str, Formatter] = {}
_modules: dict[str, str] = {}  # format name -> module name

# Fallback for frozen binaries
_FORMAT_MODULES = [
    'csv_table',
    'flat_list',
    'html_table',
    'json_list',
    'text_table',
]


def discover() -> dict[str, Formatter]:
    """Import all format modules and return the formats by name."""
    if _formats:
        return _formats

    import colour_tool.formats as pkg

    names = [name for _finder, name, _ispkg in pkgutil.iter_modules(pkg.__path__) if not name.startswith('_')]
    for modname in names or _FORMAT_MODULES:
        module = importlib.import_module(f'colour_tool.formats.{modname}')
        fmt = getattr(module, 'formatter', None)
        if isinstance(fmt, Formatter):
            _formats[fmt.name] = fmt
            _modules[fmt.name] = module.__name__
    return _formats


def get(name: str) -> Formatter:
    """The format called name."""
    formats = discover()
    if name not in formats:
        raise KeyError(f'Unknown format: {name}. Available: {", ".join(sorted(formats))}')
    return formats[name]


def module_of(name: str) -> str:
    """Module name implementing the format called name."""
    get(name)
    return _modules[name]
