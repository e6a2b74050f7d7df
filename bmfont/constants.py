"""
bmfont.constants - package-wide constants

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.1.0'

# name used in error positions when reading from an unnamed stream
DEFAULT_NAME = 'bmfont'

# glyph used for code points not defined in the font
FALLBACK_CHAR = '?'
