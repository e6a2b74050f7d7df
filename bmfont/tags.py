"""
bmfont.tags - parse BMFont text descriptors into tags

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from .scanner import Scanner, unquote, IDENT, INT, STRING, NEWLINE, EOF, QUOTE
from .errors import TagSyntaxError, ParseErrors
from .basetypes import to_int, to_bool, to_int_list
from .constants import DEFAULT_NAME


# tokens that may occur in an integer list value
_INT_LIST_TOKENS = (INT, ',', '-')


class Tag:
    """Descriptor line: tag name and raw attribute values."""

    def __init__(self, name, attrs=None):
        self.name = name
        self.attrs = dict(attrs or {})

    def __repr__(self):
        return f'{type(self).__name__}({self.name!r}, {self.attrs!r})'

    def __eq__(self, other):
        return (
            isinstance(other, Tag)
            and self.name == other.name and self.attrs == other.attrs
        )

    def str_attr(self, name):
        return self.attrs.get(name, '')

    def int_attr(self, name):
        return to_int(self.str_attr(name))

    def bool_attr(self, name):
        return to_bool(self.str_attr(name))

    def int_list_attr(self, name, length):
        """Comma-separated integers, zero-padded or truncated to length."""
        return to_int_list(self.str_attr(name), length)

    def enum_attr(self, name, enum, default):
        """Integer attribute as enum member; out-of-range values give default."""
        try:
            return enum(self.int_attr(name))
        except ValueError:
            return default


class _LineError(Exception):
    """Abandon the rest of the current line."""


class TagParser:
    """Parser for the line-oriented `tag key=value ...` grammar."""

    def __init__(self):
        self._errors = []
        self._scanner = None
        self._token = None

    def parse(self, text, filename=DEFAULT_NAME):
        """
        Parse descriptor text into a list of tags.
        Raises ParseErrors if any syntax errors were found.
        """
        self._errors = []
        self._scanner = Scanner(text, filename)
        self._next()
        tags = []
        while self._token.kind != EOF:
            if self._token.kind == NEWLINE:
                # skip blank lines
                self._next()
                continue
            tag = self._parse_line()
            if tag is not None:
                tags.append(tag)
        if self._errors:
            raise ParseErrors(self._errors)
        return tags

    def _next(self):
        self._token = self._scanner.scan()

    def _parse_line(self):
        """Parse one line into a tag, leave the scanner at the start of the next line."""
        tag = None
        try:
            name = self._expect(IDENT, 'tag name')
            tag = Tag(name)
            while self._token.kind not in (NEWLINE, EOF):
                attr_name = self._expect(IDENT, 'attribute name')
                self._expect('=', '"="')
                tag.attrs[attr_name] = self._parse_value()
        except _LineError:
            self._skip_line()
        if self._token.kind == NEWLINE:
            self._next()
        return tag

    def _parse_value(self):
        """Parse a string or integer-list attribute value."""
        if self._token.kind == STRING:
            literal = self._token.text
            try:
                value = unquote(literal)
            except ValueError:
                self._error(f'malformed string literal `{literal}`')
            if self._scanner.peek() == QUOTE:
                # workaround for `letter="""`
                self._scanner.next()
                value += QUOTE
            self._next()
            return value
        if self._token.kind in (INT, '-'):
            return self._parse_int_list()
        self._error_expected('string or integer attribute value')

    def _parse_int_list(self):
        """Concatenate the raw text of integer, comma and minus tokens."""
        parts = []
        while self._token.kind in _INT_LIST_TOKENS:
            parts.append(self._token.text)
            self._next()
        return ''.join(parts)

    def _expect(self, kind, message):
        """Consume a token of the given kind and return its text."""
        if self._token.kind != kind:
            self._error_expected(message)
        text = self._token.text
        self._next()
        return text

    def _skip_line(self):
        """Consume tokens up to, not including, the end of the line."""
        while self._token.kind not in (NEWLINE, EOF):
            self._next()

    def _error_expected(self, message):
        self._error(f'expected {message}, found {self._token.describe()}')

    def _error(self, message):
        error = TagSyntaxError(self._token.pos, message)
        logging.debug('Syntax error, skipping rest of line: %s', error)
        self._errors.append(error)
        raise _LineError()


def parse_tags(text, filename=DEFAULT_NAME):
    """Parse descriptor text into a list of tags."""
    return TagParser().parse(text, filename)
