"""
bmfont.scripting - scripting utilities

(c) 2019--2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys
import os
import logging
from contextlib import contextmanager

from .errors import ParseErrors


def unescape(text):
    """Interpolate escape sequences."""
    #   raw-unicode-escape encodes to latin-1, leaves existing backslashes untouched but escapes non-latin-1
    #   unicode-escape decodes from latin-1 and unescapes standard c escapes, \x.. and \u.. \U..
    return text.encode('raw-unicode-escape').decode('unicode_escape')


@contextmanager
def wrap_main(debug=False):
    """Main script context."""
    # set log level
    if debug:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.WARNING
    logging.basicConfig(level=loglevel, format='%(levelname)s: %(message)s', force=True)
    # run main script
    try:
        yield
    except BrokenPipeError:
        # happens e.g. when piping to `head`
        sys.stdout = os.fdopen(1)
    except ParseErrors as exc:
        for error in exc.errors:
            logging.error(error)
        if debug:
            raise
        sys.exit(1)
    except Exception as exc:
        logging.error(exc)
        if debug:
            raise
        sys.exit(1)
