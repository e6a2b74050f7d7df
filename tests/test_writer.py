"""
bmfont test suite
descriptor writer tests
"""

import io
import unittest

import bmfont
from bmfont import Descriptor, Info, Common, Page, Char, CharPair, Kerning
from .base import BaseTester, FONT_TEXT


class TestWriter(BaseTester):
    """Test writing text descriptors."""

    def _roundtrip(self, descriptor):
        outstream = io.StringIO()
        bmfont.write_descriptor(descriptor, outstream)
        return bmfont.parse_descriptor(outstream.getvalue())

    def test_roundtrip(self):
        descriptor = bmfont.parse_descriptor(FONT_TEXT)
        self.assertEqual(self._roundtrip(descriptor), descriptor)

    def test_text_format(self):
        descriptor = Descriptor.create(
            info=Info(face='Mono'),
            common=Common(line_height=9, base=7),
            pages=[Page(0, 'mono_0.png')],
            chars=[Char(65, x=1, y=2, width=3, height=4, xadvance=5)],
            kernings={CharPair(65, 65): Kerning(-1)},
        )
        outstream = io.StringIO()
        bmfont.write_descriptor(descriptor, outstream)
        lines = outstream.getvalue().splitlines()
        self.assertTrue(lines[0].startswith('info face="Mono" size=0 bold=0 '))
        self.assertIn('padding=0,0,0,0 spacing=0,0', lines[0])
        self.assertTrue(lines[1].startswith('common lineHeight=9 base=7 '))
        self.assertEqual(lines[2], 'page id=0 file="mono_0.png"')
        self.assertEqual(lines[3], 'chars count=1')
        self.assertEqual(
            lines[4],
            'char id=65 x=1 y=2 width=3 height=4 xoffset=0 yoffset=0 xadvance=5 page=0 chnl=0'
        )
        self.assertEqual(lines[5], 'kernings count=1')
        self.assertEqual(lines[6], 'kerning first=65 second=65 amount=-1')

    def test_quoted_strings(self):
        descriptor = Descriptor.create(
            info=Info(face='quote " and \\ backslash'),
            pages=[Page(0, 'dir\\page.png')],
        )
        result = self._roundtrip(descriptor)
        self.assertEqual(result.info.face, 'quote " and \\ backslash')
        self.assertEqual(result.pages[0].file, 'dir\\page.png')

    def test_save_descriptor(self):
        descriptor = bmfont.parse_descriptor(FONT_TEXT)
        path = self.temp_path / 'saved.fnt'
        bmfont.save_descriptor(descriptor, path)
        self.assertEqual(bmfont.load_descriptor(path), descriptor)


if __name__ == '__main__':
    unittest.main()
