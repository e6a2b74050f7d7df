"""
bmfont.descriptor - AngelCode BMFont text descriptor

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from enum import IntEnum, IntFlag
from pathlib import Path
from types import MappingProxyType
from collections.abc import Mapping
from typing import NamedTuple

from .basetypes import Coord, Rect
from .tags import parse_tags
from .streams import open_stream, read_text
from .constants import DEFAULT_NAME


# text format: https://www.angelcode.com/products/bmfont/doc/file_format.html


##############################################################################
# info tag
#
# > This tag holds information on how the font was generated.

class Padding(NamedTuple):
    """Padding for each character."""
    up: int = 0
    right: int = 0
    down: int = 0
    left: int = 0


class Spacing(NamedTuple):
    """Spacing for each character."""
    horizontal: int = 0
    vertical: int = 0


class Info(NamedTuple):
    """Font generation settings."""
    # name of the true type font
    face: str = ''
    size: int = 0
    bold: bool = False
    italic: bool = False
    # name of the OEM charset used (when not unicode)
    charset: str = ''
    unicode: bool = False
    # font height stretch in percentage
    stretch_h: int = 0
    smooth: bool = False
    # supersampling level, 1 means none
    aa: int = 0
    padding: Padding = Padding()
    spacing: Spacing = Spacing()
    # outline thickness
    outline: int = 0


##############################################################################
# common tag
#
# > This tag holds information common to all characters.

class ChannelInfo(IntEnum):
    """What a texture channel holds."""
    GLYPH = 0
    OUTLINE = 1
    GLYPH_AND_OUTLINE = 2
    ZERO = 3
    ONE = 4


class Common(NamedTuple):
    """Metrics shared by all characters."""
    # distance in pixels between each line of text
    line_height: int = 0
    # pixels from the absolute top of the line to the base of the characters
    base: int = 0
    # texture size
    scale_w: int = 0
    scale_h: int = 0
    # monochrome characters packed into each of the texture channels
    packed: bool = False
    alpha_chnl: ChannelInfo = ChannelInfo.GLYPH
    red_chnl: ChannelInfo = ChannelInfo.GLYPH
    green_chnl: ChannelInfo = ChannelInfo.GLYPH
    blue_chnl: ChannelInfo = ChannelInfo.GLYPH

    @property
    def scale(self):
        """Nominal texture size."""
        return Coord(self.scale_w, self.scale_h)


##############################################################################
# page tag
#
# > This tag gives the name of a texture file. There is one for each page in the font.

class Page(NamedTuple):
    """Texture page."""
    id: int
    file: str


##############################################################################
# char tag
#
# > This tag describes on character in the font. There is one for each included
# > character in the font.

class Channel(IntFlag):
    """Texture channels holding a character image."""
    BLUE = 1
    GREEN = 2
    RED = 4
    ALPHA = 8
    ALL = 15


class Char(NamedTuple):
    """Glyph metrics and location in page sheet."""
    # code point
    id: int
    # rectangle of the character image in the texture
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    # offset from cursor position when copying to the screen
    xoffset: int = 0
    yoffset: int = 0
    # cursor advance after drawing the character
    xadvance: int = 0
    page: int = 0
    chnl: Channel = Channel(0)

    @property
    def char(self):
        return chr(self.id)

    @property
    def pos(self):
        return Coord(self.x, self.y)

    @property
    def size(self):
        return Coord(self.width, self.height)

    @property
    def bounds(self):
        """Rectangle of the character image in its page sheet."""
        return Rect.from_size(self.pos, self.size)

    @property
    def offset(self):
        return Coord(self.xoffset, self.yoffset)


##############################################################################
# kerning tag
#
# > The kerning information is used to adjust the distance between certain
# > characters, e.g. some characters should be placed closer to each other
# > than others.

class CharPair(NamedTuple):
    """Ordered pair of code points."""
    first: int
    second: int


class Kerning(NamedTuple):
    """Horizontal adjustment when drawing the second character after the first."""
    amount: int


##############################################################################
# descriptor

class Descriptor(NamedTuple):
    """Bitmap font metadata, without the page sheet images."""
    info: Info = Info()
    common: Common = Common()
    pages: MappingProxyType = MappingProxyType({})
    chars: MappingProxyType = MappingProxyType({})
    kernings: MappingProxyType = MappingProxyType({})

    @classmethod
    def create(cls, info=Info(), common=Common(), pages=(), chars=(), kernings=()):
        """Create descriptor from sequences or dicts of records."""
        if not isinstance(pages, Mapping):
            pages = {_page.id: _page for _page in pages}
        if not isinstance(chars, Mapping):
            chars = {_char.id: _char for _char in chars}
        return cls(
            info=info,
            common=common,
            pages=MappingProxyType(dict(pages)),
            chars=MappingProxyType(dict(chars)),
            kernings=MappingProxyType(dict(kernings)),
        )

    def get_char(self, codepoint):
        """Glyph record for code point or single-character string, or None."""
        if isinstance(codepoint, str):
            codepoint = ord(codepoint)
        return self.chars.get(codepoint, None)

    def get_kerning(self, first, second):
        """Kerning amount for the ordered pair, or None."""
        if isinstance(first, str):
            first = ord(first)
        if isinstance(second, str):
            second = ord(second)
        kerning = self.kernings.get(CharPair(first, second), None)
        if kerning is None:
            return None
        return kerning.amount


##############################################################################
# build descriptor from tags

def _build_info(tag):
    return Info(
        face=tag.str_attr('face'),
        size=tag.int_attr('size'),
        bold=tag.bool_attr('bold'),
        italic=tag.bool_attr('italic'),
        charset=tag.str_attr('charset'),
        unicode=tag.bool_attr('unicode'),
        stretch_h=tag.int_attr('stretchH'),
        smooth=tag.bool_attr('smooth'),
        aa=tag.int_attr('aa'),
        padding=Padding(*tag.int_list_attr('padding', 4)),
        spacing=Spacing(*tag.int_list_attr('spacing', 2)),
        outline=tag.int_attr('outline'),
    )

def _build_common(tag):
    def _channel(name):
        return tag.enum_attr(name, ChannelInfo, ChannelInfo.GLYPH)

    return Common(
        line_height=tag.int_attr('lineHeight'),
        base=tag.int_attr('base'),
        scale_w=tag.int_attr('scaleW'),
        scale_h=tag.int_attr('scaleH'),
        packed=tag.bool_attr('packed'),
        alpha_chnl=_channel('alphaChnl'),
        red_chnl=_channel('redChnl'),
        green_chnl=_channel('greenChnl'),
        blue_chnl=_channel('blueChnl'),
    )

def _build_page(tag):
    return Page(id=tag.int_attr('id'), file=tag.str_attr('file'))

def _build_char(tag):
    return Char(
        id=tag.int_attr('id'),
        x=tag.int_attr('x'),
        y=tag.int_attr('y'),
        width=tag.int_attr('width'),
        height=tag.int_attr('height'),
        xoffset=tag.int_attr('xoffset'),
        yoffset=tag.int_attr('yoffset'),
        xadvance=tag.int_attr('xadvance'),
        page=tag.int_attr('page'),
        chnl=Channel(max(tag.int_attr('chnl'), 0)),
    )

def _build_kerning(tag):
    pair = CharPair(first=tag.int_attr('first'), second=tag.int_attr('second'))
    return pair, Kerning(amount=tag.int_attr('amount'))


def build_descriptor(tags):
    """Convert parsed tags to a descriptor. Unknown tags are ignored."""
    info, common = Info(), Common()
    pages, chars, kernings = {}, {}, {}
    for tag in tags:
        if tag.name == 'info':
            info = _build_info(tag)
        elif tag.name == 'common':
            common = _build_common(tag)
        elif tag.name == 'page':
            page = _build_page(tag)
            pages[page.id] = page
        elif tag.name == 'char':
            char = _build_char(tag)
            chars[char.id] = char
        elif tag.name == 'kerning':
            pair, kerning = _build_kerning(tag)
            kernings[pair] = kerning
        else:
            logging.debug('Ignoring tag `%s`.', tag.name)
    return Descriptor.create(info, common, pages, chars, kernings)


##############################################################################
# top-level calls

def parse_descriptor(text, name=DEFAULT_NAME):
    """Parse descriptor from text. Raises ParseErrors on syntax errors."""
    return build_descriptor(parse_tags(text, name))


def read_descriptor(instream, name=DEFAULT_NAME):
    """
    Read descriptor in BMFont text format from a binary or text stream.
    The referenced page sheets are not loaded; use `read` for a complete font.
    """
    return parse_descriptor(read_text(instream), name)


def load_descriptor(path):
    """
    Load descriptor from a BMFont text descriptor file (.fnt).
    The referenced page sheets are not loaded; use `load` for a complete font.
    """
    path = Path(path)
    with open_stream(path) as instream:
        return read_descriptor(instream, path.name)


# names used by earlier versions
read_control_data = read_descriptor
load_control_data = load_descriptor
