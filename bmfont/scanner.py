"""
bmfont.scanner - lexical scanner for BMFont text descriptors

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
from collections import namedtuple


# token kinds; any other character is returned as a token of its own kind
IDENT = 'Ident'
INT = 'Int'
FLOAT = 'Float'
STRING = 'String'
NEWLINE = '\n'
EOF = 'EOF'

# newline is significant, so not included here
WHITESPACE = ' \t\r'
QUOTE = '"'
ESCAPE = '\\'

# a double-quoted literal with standard backslash escapes
_STRING_LITERAL = re.compile(r'''
    "
    (?:
        [^\\"\n]
        | \\ (?:
            [abfnrtv\\'"]
            | x [0-9a-fA-F]{2}
            | u [0-9a-fA-F]{4}
            | U [0-9a-fA-F]{8}
            | [0-3][0-7]{2}
        )
    )*
    "
''', re.VERBOSE)


class Position(namedtuple('Position', 'filename line column')):
    """Location in source text, line and column counting from 1."""

    def __str__(self):
        if self.filename:
            return f'{self.filename}:{self.line}:{self.column}'
        return f'{self.line}:{self.column}'


class Token(namedtuple('Token', 'kind text pos')):
    """Lexical token."""

    def describe(self):
        """Representation for use in error messages."""
        if self.kind == EOF:
            return 'EOF'
        if self.kind == NEWLINE:
            return 'newline'
        return f'`{self.text}`'


def unquote(literal):
    """
    Interpret a double-quoted string literal.
    Raises ValueError if the literal is unterminated or has invalid escapes.
    """
    if not _STRING_LITERAL.fullmatch(literal):
        raise ValueError(f'malformed string literal {literal}')
    body = literal[1:-1]
    if ESCAPE not in body:
        return body
    try:
        # raw-unicode-escape leaves backslashes alone and escapes non-latin-1
        # unicode-escape then interprets the standard escapes
        return body.encode('raw-unicode-escape').decode('unicode_escape')
    except UnicodeDecodeError as e:
        # e.g. \U escape out of unicode range
        raise ValueError(f'malformed string literal {literal}') from e


class Scanner:
    """Split descriptor text into tokens."""

    def __init__(self, text, filename=''):
        self._text = text
        self._filename = filename
        self._offset = 0
        self._line = 1
        self._column = 1

    @property
    def pos(self):
        """Position of the next unread character."""
        return Position(self._filename, self._line, self._column)

    def peek(self):
        """Next unread character, or empty string at end of input."""
        return self._text[self._offset:self._offset+1]

    def next(self):
        """Consume and return the next character, or empty string at end of input."""
        char = self.peek()
        if char:
            self._offset += 1
            if char == '\n':
                self._line += 1
                self._column = 1
            else:
                self._column += 1
        return char

    def scan(self):
        """Read the next token."""
        while self.peek() and self.peek() in WHITESPACE:
            self.next()
        pos = self.pos
        start = self._offset
        char = self.next()
        if not char:
            kind = EOF
        elif char == QUOTE:
            kind = STRING
            self._scan_string()
        elif char.isdigit():
            kind = self._scan_number()
        elif char.isalpha() or char == '_':
            kind = IDENT
            while self.peek() and (self.peek().isalnum() or self.peek() == '_'):
                self.next()
        else:
            kind = char
        return Token(kind, self._text[start:self._offset], pos)

    def __iter__(self):
        """Iterate over tokens up to and including EOF."""
        while True:
            token = self.scan()
            yield token
            if token.kind == EOF:
                return

    def _scan_string(self):
        """Read up to and including the closing quote, or up to end of line."""
        while True:
            char = self.peek()
            if not char or char == '\n':
                # unterminated; leave the newline for the next token
                return
            self.next()
            if char == QUOTE:
                return
            if char == ESCAPE and self.peek() not in ('', '\n'):
                self.next()

    def _scan_number(self):
        """Read the rest of a decimal number."""
        while self.peek().isdigit():
            self.next()
        if self.peek() != '.':
            return INT
        self.next()
        while self.peek().isdigit():
            self.next()
        return FLOAT
