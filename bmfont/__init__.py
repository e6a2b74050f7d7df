"""
bmfont - read AngelCode BMFont bitmap fonts and draw text with them

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .errors import BMFontError, TagSyntaxError, ParseErrors, DecodeError
from .basetypes import Coord, Rect
from .descriptor import (
    Descriptor, Info, Padding, Spacing, Common, ChannelInfo,
    Page, Char, Channel, CharPair, Kerning,
    load_descriptor, read_descriptor, parse_descriptor, build_descriptor,
    load_control_data, read_control_data,
)
from .writer import save_descriptor, write_descriptor
from .streams import file_sheets
from .font import BitmapFont, load, read
from .renderer import draw_text, measure_text
