"""
Render text to an image using a BMFont bitmap font
(c) 2019--2023 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse
import logging

from PIL import Image, ImageColor

import bmfont
from bmfont.scripting import wrap_main, unescape
from bmfont.basetypes import Coord


def render(font, text, margin=(0, 0), paper=(0, 0, 0, 0)):
    """Render text onto a new image just large enough to hold it."""
    margin = Coord(*margin)
    bounds = font.measure_text(text)
    size = bounds.size + margin + margin
    logging.debug('Creating %s image for text bounds %s.', size, bounds)
    image = Image.new('RGBA', size, paper)
    font.draw_text(image, margin - bounds.origin, text)
    return image


def main(argv=None):
    # parse command line
    parser = argparse.ArgumentParser()
    parser.add_argument(
        'text', nargs='*', type=str,
        help=(
            'text to be printed. '
            'multiple text arguments represent consecutive lines. '
            'if not given, read from standard input'
        )
    )
    parser.add_argument(
        '--font', '-f', type=str, required=True,
        help='BMFont text descriptor (.fnt) to use when printing text'
    )
    parser.add_argument(
        '--output', '-o', type=str, default='',
        help='output image file name (default: show image)'
    )
    parser.add_argument(
        '--paper', '--background', '-bg', type=str, default='',
        help='colour to use for background (default: transparent)'
    )
    parser.add_argument(
        '--margin', '-m', type=Coord.create, default=Coord(0, 0),
        help=(
            'number of background pixels to use as a margin '
            'in x and y direction (default: 0,0)'
        )
    )
    parser.add_argument(
        '--measure', action='store_true',
        help='print bounding box `left top right bottom` instead of rendering'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='show debugging output'
    )
    args = parser.parse_args(argv)

    with wrap_main(args.debug):
        # read text from stdin if not supplied
        if not args.text:
            text = sys.stdin.read()
        else:
            # multiple options or \n give line breaks
            text = '\n'.join(args.text)
        text = unescape(text)
        font = bmfont.load(args.font)
        if args.measure:
            sys.stdout.write(f'{font.measure_text(text)}\n')
            return
        if args.paper:
            paper = ImageColor.getcolor(args.paper, 'RGBA')
        else:
            paper = (0, 0, 0, 0)
        image = render(font, text, margin=args.margin, paper=paper)
        if args.output:
            image.save(args.output)
        else:
            image.show()


if __name__ == '__main__':
    main()
