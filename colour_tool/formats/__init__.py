"""Auto-discovery of output format modules.

Every .py file in this package that defines a `formatter` object is
auto-registered by colour_tool.registry.discover(). Modules starting
with `_` are helpers.

The explicit imports below ensure PyInstaller includes these modules
in a frozen binary, where pkgutil.iter_modules finds nothing.
"""

# PyInstaller hidden imports: keep this list in sync with format modules
import colour_tool.formats.csv_table as _csv_table  # noqa: F401
import colour_tool.formats.flat_list as _flat_list  # noqa: F401
import colour_tool.formats.html_table as _html_table  # noqa: F401
import colour_tool.formats.json_list as _json_list  # noqa: F401
import colour_tool.formats.text_table as _text_table  # noqa: F401
