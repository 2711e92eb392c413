"""Exception types raised by colour-tool.

Each derives from ColourError (so the CLI can catch everything the library
raises) and from the builtin a caller would naturally expect.
Grammar mismatches are not errors: parse functions return None.
"""


class ColourError(Exception):
    """Base class for colour-tool errors."""


class InvalidColourError(ColourError, ValueError):
    """A unified colour was built from something that is not a colour."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f'Invalid colour space value: {value!r}')


class PaletteIndexError(ColourError, IndexError):
    """An index outside [0, length) was used on a palette or registry."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f'Argument index = {index} out of range [0,{length})')


class UnknownNameError(ColourError, KeyError):
    """A colour or palette name lookup failed."""

    def __init__(self, message: str, name: str):
        self.name = name
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class DuplicateNameError(ColourError, ValueError):
    """A name that must be unique was used twice."""


class PaletteFormatError(ColourError, ValueError):
    """A palette definition (JSON) does not follow the palette schema."""


class PaletteEntryError(ColourError, ValueError):
    """A palette entry definition could not be parsed as a colour."""


class TemplateRenderError(ColourError, ValueError):
    """An HTML template could not be found, compiled or rendered."""
