"""
bmfont.streams - file stream tools

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import logging
from pathlib import Path
from contextlib import contextmanager


BOM = '\ufeff'


@contextmanager
def closing_checked(stream):
    """
    Close stream on exit.
    A failure to close is raised only if no other exception occurred.
    """
    try:
        yield stream
    except BaseException:
        try:
            stream.close()
        except EnvironmentError as e:
            logging.debug('Ignoring error closing %r: %s', stream, e)
        raise
    else:
        stream.close()


@contextmanager
def open_stream(path):
    """Open a binary input stream on the file system."""
    logging.debug("Opening file `%s` for mode 'r'.", path)
    with closing_checked(io.open(path, 'rb')) as stream:
        yield stream


def is_binary(stream):
    """Check if input stream is binary."""
    # read 0 bytes - the return type will tell us if this is a text or binary stream
    return isinstance(stream.read(0), bytes)


def read_text(instream):
    """Read all text from a text stream, or from a binary stream holding utf-8."""
    if not is_binary(instream):
        text = instream.read()
        # text streams opened without utf-8-sig keep the byte order mark
        if text.startswith(BOM):
            text = text[len(BOM):]
        return text
    # on the one hand, this avoids breaks on slightly damaged files
    # on the other hand, we are less likely to break on files that are clearly not text
    return instream.read().decode('utf-8-sig', errors='ignore')


def get_name(stream):
    """Get stream name, if available."""
    try:
        return stream.name
    except AttributeError:
        # not all streams have one (e.g. BytesIO)
        return ''


def file_sheets(directory):
    """Page sheet opener that resolves file names relative to a directory."""
    directory = Path(directory)

    def _open_sheet(filename):
        path = directory / filename
        logging.debug("Opening page sheet `%s` for mode 'r'.", path)
        return io.open(path, 'rb')

    return _open_sheet
