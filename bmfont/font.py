"""
bmfont.font - bitmap font with page sheet images

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import logging
from pathlib import Path
from types import MappingProxyType

from PIL import Image

from .descriptor import read_descriptor, load_descriptor
from .streams import closing_checked, file_sheets, get_name
from .renderer import draw_text, measure_text
from .errors import DecodeError
from .constants import DEFAULT_NAME, FALLBACK_CHAR


def decode_sheet(instream, name=''):
    """Decode a page sheet image from a binary stream into an RGBA image."""
    name = name or get_name(instream)
    # errors reading the stream propagate unchanged
    data = instream.read()
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f'Could not decode page sheet `{name}`: {e}') from e
    logging.debug(
        'Decoded page sheet `%s`: %s image, %dx%d pixels, mode %s.',
        name, image.format, image.width, image.height, image.mode
    )
    # ensure we have RGBA channels
    return image.convert('RGBA')


def read_sheet(open_sheet, filename):
    """Open, decode and close one page sheet."""
    with closing_checked(open_sheet(filename)) as instream:
        return decode_sheet(instream, filename)


class BitmapFont:
    """Bitmap font: descriptor plus decoded page sheets."""

    def __init__(self, descriptor, sheets, *, fallback=FALLBACK_CHAR):
        """
        Create font from descriptor and page sheets.

        descriptor: Descriptor
        sheets: dict of page index to PIL Image
        fallback: character to draw for code points not in the font
        """
        self.descriptor = descriptor
        self.sheets = MappingProxyType(dict(sheets))
        self.fallback = fallback

    def __repr__(self):
        return (
            f"<{type(self).__name__} face='{self.descriptor.info.face}' "
            f"chars={len(self.descriptor.chars)} pages={len(self.sheets)}>"
        )

    @classmethod
    def from_descriptor(cls, descriptor, open_sheet, **kwargs):
        """
        Load all page sheets referenced by the descriptor.

        open_sheet: callable taking a page file name and returning a binary stream;
                    the stream is closed after decoding.
        """
        sheets = {}
        for index in sorted(descriptor.pages):
            page = descriptor.pages[index]
            sheets[index] = read_sheet(open_sheet, page.file)
        return cls(descriptor, sheets, **kwargs)

    @property
    def line_height(self):
        return self.descriptor.common.line_height

    @property
    def base(self):
        return self.descriptor.common.base

    def get_char(self, char):
        """
        Glyph record and page sheet for a character or code point.
        Falls back to the replacement character; returns (None, None) if not drawable.
        """
        if isinstance(char, str):
            char = ord(char)
        record = self.descriptor.chars.get(char, None)
        if record is None and self.fallback:
            record = self.descriptor.chars.get(ord(self.fallback), None)
        if record is None:
            return None, None
        sheet = self.sheets.get(record.page, None)
        if sheet is None:
            logging.debug(
                'Page %d for code point %d is not loaded.', record.page, record.id
            )
            return None, None
        return record, sheet

    def get_kerning(self, first, second):
        """Kerning amount for the ordered pair, or None."""
        return self.descriptor.get_kerning(first, second)

    def draw_text(self, image, pos, text):
        """
        Draw text on image, starting at pos on the base line of the first line.
        Characters usually extend above the base line.
        Multiple lines are left aligned.
        """
        draw_text(self, image, pos, text)

    def measure_text(self, text):
        """
        Bounding box of text as if drawn at (0, 0).
        The top usually has a negative y coordinate, as characters extend
        above the base line; the left may be negative due to character offsets.
        """
        return measure_text(self, text)


def read(instream, open_sheet, name=DEFAULT_NAME, **kwargs):
    """
    Read a bitmap font from a BMFont text descriptor stream,
    and the referenced page sheets from streams provided by open_sheet.
    """
    descriptor = read_descriptor(instream, name)
    return BitmapFont.from_descriptor(descriptor, open_sheet, **kwargs)


def load(path, **kwargs):
    """
    Load a bitmap font from a BMFont text descriptor file (.fnt),
    including the referenced page sheets located relative to the descriptor.
    """
    path = Path(path)
    descriptor = load_descriptor(path)
    return BitmapFont.from_descriptor(descriptor, file_sheets(path.parent), **kwargs)
