"""
bdfont.plumbing - frame for main scripts

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import os
import sys
import logging
from contextlib import contextmanager

from .errors import BdfError


@contextmanager
def wrap_main(debug=False, source=''):
    """
    Main script context: set up logging and report errors.

    source: name of the BDF input, used to locate parse errors
    """
    loglevel = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=loglevel, format='%(levelname)s: %(message)s', force=True)
    try:
        yield
    except BrokenPipeError:
        # output closed early, e.g. piped to `head`
        sys.stdout = os.fdopen(1)
    except BdfError as exc:
        if exc.line is None:
            logging.error('%s: %s', type(exc).__name__, exc.message)
        else:
            logging.error('%s, line %d: %s', source or '<stdin>', exc.line, exc.message)
        if debug:
            raise
        sys.exit(1)
    except Exception as exc:
        logging.error(exc)
        if debug:
            raise
        sys.exit(1)
