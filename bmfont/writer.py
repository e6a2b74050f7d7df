"""
bmfont.writer - write BMFont text descriptors

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import logging
from pathlib import Path

from .streams import closing_checked


def _to_str(value):
    """Convert value to str for bmfont file."""
    if isinstance(value, str):
        escaped = value.replace('\\', '\\\\').replace('"', '\\"').replace('\n', '\\n')
        return f'"{escaped}"'
    if isinstance(value, (list, tuple)):
        return ','.join(str(int(_item)) for _item in value)
    return str(int(value))

def _create_textdict(name, attrs):
    """Create a text-dictionary line for bmfont file."""
    return '{} {}\n'.format(name, ' '.join(
        f'{_k}={_to_str(_v)}' for _k, _v in attrs.items()
    ))


def _info_attrs(info):
    return dict(
        face=info.face,
        size=info.size,
        bold=info.bold,
        italic=info.italic,
        charset=info.charset,
        unicode=info.unicode,
        stretchH=info.stretch_h,
        smooth=info.smooth,
        aa=info.aa,
        padding=info.padding,
        spacing=info.spacing,
        outline=info.outline,
    )

def _common_attrs(common, pages):
    return dict(
        lineHeight=common.line_height,
        base=common.base,
        scaleW=common.scale_w,
        scaleH=common.scale_h,
        pages=pages,
        packed=common.packed,
        alphaChnl=common.alpha_chnl,
        redChnl=common.red_chnl,
        greenChnl=common.green_chnl,
        blueChnl=common.blue_chnl,
    )


def write_descriptor(descriptor, outstream):
    """Write descriptor to a text stream in BMFont text format."""
    bmf = outstream
    bmf.write(_create_textdict('info', _info_attrs(descriptor.info)))
    bmf.write(_create_textdict(
        'common', _common_attrs(descriptor.common, len(descriptor.pages))
    ))
    for index in sorted(descriptor.pages):
        page = descriptor.pages[index]
        bmf.write(_create_textdict('page', dict(id=page.id, file=page.file)))
    bmf.write('chars count={}\n'.format(len(descriptor.chars)))
    for codepoint in sorted(descriptor.chars):
        char = descriptor.chars[codepoint]
        bmf.write(_create_textdict('char', char._asdict()))
    bmf.write('kernings count={}\n'.format(len(descriptor.kernings)))
    for pair in sorted(descriptor.kernings):
        bmf.write(_create_textdict('kerning', dict(
            first=pair.first,
            second=pair.second,
            amount=descriptor.kernings[pair].amount,
        )))


def save_descriptor(descriptor, path):
    """Save descriptor to a BMFont text descriptor file (.fnt)."""
    logging.debug("Opening file `%s` for mode 'w'.", path)
    outfile = io.open(Path(path), 'w', encoding='utf-8', newline='\n')
    with closing_checked(outfile):
        write_descriptor(descriptor, outfile)
