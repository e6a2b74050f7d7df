"""
bmfont test suite
tag parser tests
"""

import unittest

from bmfont.tags import parse_tags, Tag, TagParser
from bmfont.errors import ParseErrors, TagSyntaxError
from bmfont.scanner import Position
from bmfont.descriptor import ChannelInfo


class TestTagParser(unittest.TestCase):
    """Test parsing text descriptors into tags."""

    def test_tags_in_order(self):
        tags = parse_tags(
            'info face="Arial" size=32\n'
            'common lineHeight=20 base=16\n'
            'page id=0 file="arial_0.png"\n'
        )
        self.assertEqual(tags, [
            Tag('info', {'face': 'Arial', 'size': '32'}),
            Tag('common', {'lineHeight': '20', 'base': '16'}),
            Tag('page', {'id': '0', 'file': 'arial_0.png'}),
        ])

    def test_tag_without_attributes(self):
        self.assertEqual(parse_tags('end\n'), [Tag('end')])

    def test_no_trailing_newline(self):
        self.assertEqual(parse_tags('page id=1'), [Tag('page', {'id': '1'})])

    def test_blank_lines_and_crlf(self):
        tags = parse_tags('\n\npage id=1\r\n\r\nchar id=2\r\n')
        self.assertEqual(tags, [Tag('page', {'id': '1'}), Tag('char', {'id': '2'})])

    def test_empty_input(self):
        self.assertEqual(parse_tags(''), [])

    def test_quote_workaround(self):
        tags = parse_tags('char id=34 letter="""\n')
        self.assertEqual(tags[0].attrs['letter'], '"')
        self.assertEqual(len(tags[0].attrs['letter']), 1)

    def test_quote_workaround_continues(self):
        tags = parse_tags('char letter=""" id=34\n')
        self.assertEqual(tags[0].attrs, {'letter': '"', 'id': '34'})

    def test_escaped_string(self):
        tags = parse_tags(r'info face="say \"hi\"\\"' + '\n')
        self.assertEqual(tags[0].attrs['face'], 'say "hi"\\')

    def test_int_list_raw(self):
        tags = parse_tags('info padding=-1,2, -3,4 spacing=5\n')
        self.assertEqual(tags[0].attrs['padding'], '-1,2,-3,4')
        self.assertEqual(tags[0].attrs['spacing'], '5')

    def test_duplicate_attribute_last_wins(self):
        tags = parse_tags('char id=1 id=2\n')
        self.assertEqual(tags[0].attrs['id'], '2')


class TestTagErrors(unittest.TestCase):
    """Test syntax errors and recovery."""

    def _errors(self, text, filename='bmfont'):
        with self.assertRaises(ParseErrors) as cm:
            parse_tags(text, filename)
        return cm.exception.errors

    def test_missing_equals(self):
        errors = self._errors('info face="x"\npage id 3\n')
        self.assertEqual(len(errors), 1)
        error, = errors
        self.assertIsInstance(error, TagSyntaxError)
        self.assertEqual(error.pos, Position('bmfont', 2, 9))
        self.assertEqual(error.message, 'expected "=", found `3`')
        self.assertEqual(str(error), 'bmfont:2:9: expected "=", found `3`')

    def test_recovery_continues_next_line(self):
        errors = self._errors('page id 3\nchar id=1\nkerning first second=2\n')
        self.assertEqual(len(errors), 2)
        self.assertEqual(errors[0].pos.line, 1)
        self.assertEqual(errors[1].pos.line, 3)
        self.assertEqual(errors[1].message, 'expected "=", found `second`')

    def test_headline_is_first_error(self):
        with self.assertRaises(ParseErrors) as cm:
            parse_tags('page id 3\nchar x y\n', 'f.fnt')
        self.assertEqual(str(cm.exception), str(cm.exception.errors[0]))
        self.assertTrue(str(cm.exception).startswith('f.fnt:1:9: '))
        self.assertEqual(len(cm.exception), 2)

    def test_unexpected_value(self):
        cases = {
            'info face=Arial\n': 'expected string or integer attribute value, found `Arial`',
            'info size=1.5\n': 'expected string or integer attribute value, found `1.5`',
            'info size=\n': 'expected string or integer attribute value, found newline',
            'info size=': 'expected string or integer attribute value, found EOF',
            "info face='a'\n": "expected string or integer attribute value, found `'`",
        }
        for text, message in cases.items():
            with self.subTest(text=text):
                errors = self._errors(text)
                self.assertEqual(len(errors), 1)
                self.assertEqual(errors[0].message, message)

    def test_bad_attribute_name(self):
        errors = self._errors('char 3=4\n')
        self.assertEqual(errors[0].message, 'expected attribute name, found `3`')

    def test_bad_tag_name(self):
        errors = self._errors('=x\n')
        self.assertEqual(errors[0].message, 'expected tag name, found `=`')
        self.assertEqual(errors[0].pos, Position('bmfont', 1, 1))

    def test_malformed_string_abandons_line(self):
        parser = TagParser()
        with self.assertRaises(ParseErrors) as cm:
            parser.parse('page id=0 file="a\\qb" x=1 = = =\nchar id=1\n')
        errors = cm.exception.errors
        self.assertEqual(len(errors), 1)
        self.assertTrue(errors[0].message.startswith('malformed string literal'))
        self.assertEqual(errors[0].pos.column, 16)

    def test_unterminated_string(self):
        errors = self._errors('info face="Arial\ncommon lineHeight=2\n')
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].pos.line, 1)


class TestTag(unittest.TestCase):
    """Test typed attribute access."""

    tag = Tag('x', {
        'n': '12', 'neg': '-3', 'bad': 'twelve', 's': 'text',
        'list': '1,2', 'long': '1,2,3,4,5', 'holes': '1,,x,4', 'ch': '2', 'badch': '9',
    })

    def test_int(self):
        self.assertEqual(self.tag.int_attr('n'), 12)
        self.assertEqual(self.tag.int_attr('neg'), -3)
        self.assertEqual(self.tag.int_attr('bad'), 0)
        self.assertEqual(self.tag.int_attr('absent'), 0)

    def test_str(self):
        self.assertEqual(self.tag.str_attr('s'), 'text')
        self.assertEqual(self.tag.str_attr('absent'), '')

    def test_bool(self):
        self.assertTrue(self.tag.bool_attr('n'))
        self.assertTrue(self.tag.bool_attr('neg'))
        self.assertFalse(self.tag.bool_attr('bad'))
        self.assertFalse(self.tag.bool_attr('absent'))

    def test_int_list(self):
        self.assertEqual(self.tag.int_list_attr('list', 4), [1, 2, 0, 0])
        self.assertEqual(self.tag.int_list_attr('long', 4), [1, 2, 3, 4])
        self.assertEqual(self.tag.int_list_attr('holes', 4), [1, 0, 0, 4])
        self.assertEqual(self.tag.int_list_attr('absent', 2), [0, 0])

    def test_enum(self):
        self.assertEqual(
            self.tag.enum_attr('ch', ChannelInfo, ChannelInfo.GLYPH),
            ChannelInfo.GLYPH_AND_OUTLINE
        )
        self.assertEqual(
            self.tag.enum_attr('badch', ChannelInfo, ChannelInfo.GLYPH),
            ChannelInfo.GLYPH
        )


if __name__ == '__main__':
    unittest.main()
