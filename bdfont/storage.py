"""
bdfont.storage - load and save BDF files

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import sys
import logging
from pathlib import Path

from .reader import BdfReader
from .writer import RecordWriter


def load(infile=''):
    """
    Read font from BDF file.

    infile: path, text stream or binary stream (default: stdin)
    """
    infile = infile or sys.stdin
    if isinstance(infile, (str, Path)):
        logging.info("Loading '%s'", infile)
        with open(infile, 'r', encoding='utf-8') as instream:
            return BdfReader().parse(instream)
    if isinstance(infile, io.TextIOBase):
        return BdfReader().parse(infile)
    # binary stream; don't close the caller's stream
    instream = io.TextIOWrapper(infile, encoding='utf-8')
    try:
        return BdfReader().parse(instream)
    finally:
        instream.detach()


def save(font, outfile='', *, overwrite=False):
    """
    Write font to BDF file.

    outfile: path or binary stream (default: stdout)
    overwrite: if outfile is a path, allow overwriting existing file
    """
    outfile = outfile or sys.stdout.buffer
    if isinstance(outfile, (str, Path)):
        # validate before the file is created
        font.validate()
        mode = 'wb' if overwrite else 'xb'
        logging.info("Saving '%s'", outfile)
        with open(outfile, mode) as outstream:
            _write(font, outstream)
    else:
        _write(font, outfile)
    return font


def _write(font, outstream):
    writer = RecordWriter(outstream)
    try:
        writer.write_font(font)
    finally:
        # release without closing the caller's stream
        writer.finalize()
