"""
bdfont test suite
testing utilities
"""

import tempfile
import unittest
import logging
from pathlib import Path

import bdfont


def assert_text_eq(text, model):
    assert text == model, f'"""\\\n{text}"""\n != \n"""\\\n{model}"""'


def make_font(*body, header=()):
    """BDF text for a minimal font with extra header and body lines."""
    return '\n'.join((
        'STARTFONT 2.2',
        'FONT test',
        'SIZE 10 75 75',
        'FONTBOUNDINGBOX 8 8 0 0',
        *header,
        *body,
        'ENDFONT',
    )) + '\n'


def make_glyph(*lines, name='box', encoding=65, bbx='8 8 0 0', rows=8):
    """BDF text lines for a glyph with a blank bitmap of the given number of rows."""
    return (
        f'STARTCHAR {name}',
        f'ENCODING {encoding}',
        *((f'BBX {bbx}',) if bbx else ()),
        *lines,
        'BITMAP',
        *(('00',) * rows),
        'ENDCHAR',
    )


class BaseTester(unittest.TestCase):
    """Base class for testers."""

    logging.basicConfig(level=logging.WARNING)

    font_path = Path(__file__).parent / 'fonts'

    # fonts are immutable so no problem in loading only once
    testfont = bdfont.load(font_path / 'test.bdf')

    minimal = make_font()

    testfont_A = """\
.@..
@.@.
@@@.
@.@.
@.@.
....
"""

    def setUp(self):
        """Setup ahead of each test."""
        bar = '-' * 20
        logging.debug('%s %s %s', bar, self.id(), bar)
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

    def tearDown(self):
        """Clean up after each test."""
        self.temp_dir.cleanup()
