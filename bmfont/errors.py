"""
bmfont.errors - exception types

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


class BMFontError(Exception):
    """Base class for BMFont errors."""


class TagSyntaxError(BMFontError):
    """Syntax error in a text descriptor."""

    def __init__(self, pos, message):
        super().__init__(f'{pos}: {message}')
        self.pos = pos
        self.message = message


class ParseErrors(BMFontError):
    """One or more syntax errors found while parsing a descriptor."""

    def __init__(self, errors):
        self.errors = tuple(errors)
        super().__init__(str(self.errors[0]) if self.errors else 'no errors')

    def __len__(self):
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)


class DecodeError(BMFontError):
    """Page sheet could not be decoded as an image."""
