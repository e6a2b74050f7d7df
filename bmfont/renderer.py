"""
bmfont.renderer - draw and measure text using a bitmap font

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from PIL import Image

from .basetypes import Coord, Rect


NEWLINE = '\n'


###############################################################################
# output sinks
# a sink has a method draw(rect, sheet, origin) that receives
# the destination rectangle, the page sheet image,
# and the location of the glyph image on the page sheet

class ImageDrawer:
    """Composite glyphs onto an image."""

    def __init__(self, image):
        self.image = image

    def draw(self, rect, sheet, origin):
        """Composite the sheet area at origin onto rect, clipped to the image."""
        clip = rect.intersect(Rect(0, 0, *self.image.size))
        if clip.is_empty():
            return
        left, top = Coord(*origin) + clip.origin - rect.origin
        sprite = sheet.crop((left, top, left + clip.width, top + clip.height))
        if self.image.mode == 'RGBA':
            self.image.alpha_composite(sprite, dest=(clip.left, clip.top))
        elif self.image.mode == 'P':
            # map glyph colours to the target palette, not the default one
            indexed = sprite.convert('RGB').quantize(
                palette=self.image, dither=Image.Dither.NONE
            )
            self.image.paste(
                indexed, (clip.left, clip.top), mask=sprite.getchannel('A')
            )
        else:
            # use the sprite's alpha channel as mask
            self.image.paste(sprite, (clip.left, clip.top), mask=sprite)


class BoundsMeasurer:
    """Accumulate the bounding box of all glyphs."""

    def __init__(self):
        self.bounds = Rect(0, 0, 0, 0)

    def draw(self, rect, sheet, origin):
        self.bounds = self.bounds.union(rect)


###############################################################################
# text layout

def layout(font, pos, text, sink):
    """
    Lay out text and send each glyph to the sink.

    font: BitmapFont
    pos: start position on the base line of the first line
    text: str, iterated by code point
    sink: object with a draw(rect, sheet, origin) method

    A newline returns the cursor to the start x and moves it down by the
    line height. Code points not in the font are replaced by the fallback
    character; if that is not in the font either, they are skipped without
    moving the cursor. Kerning is looked up for the previously drawn
    character and the current one; the previous character is kept across
    newlines.
    """
    start = Coord(*pos)
    x, y = start
    prev = None
    for index, char in enumerate(text):
        if char == NEWLINE:
            x = start.x
            y += font.line_height
            continue
        record, sheet = font.get_char(char)
        if record is None:
            logging.debug('Skipping undrawable character %r.', char)
            continue
        if index > 0:
            kerning = font.get_kerning(prev, char)
            if kerning is not None:
                x += kerning
        rect = Rect.from_size(
            (x + record.xoffset, y - font.base + record.yoffset),
            record.size
        )
        sink.draw(rect, sheet, record.pos)
        x += record.xadvance
        prev = char


def draw_text(font, image, pos, text):
    """Draw text on a PIL image, starting on the base line at pos."""
    layout(font, pos, text, ImageDrawer(image))


def measure_text(font, text):
    """Bounding rectangle of text drawn at (0, 0)."""
    measurer = BoundsMeasurer()
    layout(font, (0, 0), text, measurer)
    return measurer.bounds
