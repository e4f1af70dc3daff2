"""
bdfont.reader - BDF parser

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from enum import Enum
from functools import partial

from .records import (
    split_record, NO_VALUE, KEYWORDS, WIDTH_RECORDS,
    STARTFONT, FONT, COMMENT, CONTENTVERSION, SIZE, FONTBOUNDINGBOX, METRICSSET,
    CHARS, STARTPROPERTIES, ENDPROPERTIES, STARTCHAR, ENCODING, BBX, BITMAP,
    ENDCHAR, ENDFONT,
)
from .values import (
    XYPair, BoundingBox, FontSize, MetricsSet,
    parse_property_value, split_tokens, to_int, to_uint,
)
from .bitmap import BitRow
from .base.binary import ceildiv
from .xlfd import XLFD_KEYWORDS, attr_name
from .shells import FontShell, GlyphShell, PropertyShell
from .errors import (
    BdfError, MissingValue, UnexpectedEntry, MissingBoundingBox,
    InvalidCodepoint, SpecialEncoding, ValueFormatError, FontValidationError,
)


# highest unicode scalar value
_MAX_CODEPOINT = 0x10ffff
_SURROGATES = range(0xd800, 0xe000)


class State(Enum):
    """Parser nesting state."""
    EMPTY = 'empty'
    IN_FONT = 'font'
    IN_PROPERTIES = 'properties'
    IN_CHARS = 'chars'
    IN_CHAR = 'char'
    IN_BITMAP = 'bitmap'
    DONE = 'done'


def parse(text):
    """
    Parse BDF source text into a Font.
    Raises a BdfError subclass, with the line number set, on the first problem found.
    """
    return BdfReader().parse(text.split('\n'))


def _parse_count(text):
    token, = split_tokens(text, 1, 'count')
    return to_uint(token, 'count')


def _parse_content_version(text):
    token, = split_tokens(text, 1, 'integer')
    return to_int(token)


class BdfReader:
    """Line-by-line BDF parser."""

    def __init__(self):
        self._font = FontShell()
        self._state = State.EMPTY
        # line counter, counting only non-blank lines
        self._line = 0
        # number of properties read in the current block
        self._nprops_read = 0
        self._result = None
        # record handlers per state
        font = self._font
        set_font = partial(self._set_field, lambda: font)
        set_glyph = partial(self._set_field, lambda: font.glyph)
        self._handlers = {
            State.EMPTY: {
                STARTFONT: self._start_font,
            },
            State.IN_FONT: {
                FONT: set_font('name', str),
                CONTENTVERSION: set_font('content_version', _parse_content_version),
                SIZE: set_font('size', FontSize.parse),
                FONTBOUNDINGBOX: set_font('bounding_box', BoundingBox.parse),
                METRICSSET: set_font('metrics', MetricsSet.parse),
                **{
                    _key: set_font(_attr, XYPair.parse)
                    for _key, _attr in WIDTH_RECORDS
                },
                STARTPROPERTIES: self._start_properties,
                CHARS: self._start_chars,
                ENDFONT: self._end_font,
            },
            State.IN_PROPERTIES: {
                ENDPROPERTIES: self._end_properties,
            },
            State.IN_CHARS: {
                STARTCHAR: self._start_char,
                ENDFONT: self._end_font,
            },
            State.IN_CHAR: {
                ENCODING: self._read_encoding,
                METRICSSET: set_glyph('metrics', MetricsSet.parse),
                **{
                    _key: set_glyph(_attr, XYPair.parse)
                    for _key, _attr in WIDTH_RECORDS
                },
                BBX: set_glyph('bounding_box', BoundingBox.parse),
                BITMAP: self._start_bitmap,
                ENDCHAR: self._end_char,
            },
            State.IN_BITMAP: {},
            State.DONE: {},
        }

    @property
    def state(self):
        return self._state

    @property
    def line(self):
        """Number of non-blank lines read so far."""
        return self._line

    def parse(self, lines):
        """Parse an iterable of lines and return the Font."""
        for line in lines:
            self.feed(line)
        return self.finish()

    def feed(self, line):
        """Process a single line of BDF source."""
        line = line.strip()
        if not line:
            return
        self._line += 1
        try:
            self._process(line)
        except BdfError as e:
            if e.line is None:
                e.line = self._line
            raise

    def finish(self):
        """Complete parsing and return the validated Font."""
        if self._state != State.DONE:
            try:
                self._font.validate()
            except BdfError as e:
                e.line = self._line
                raise
            raise FontValidationError('ENDFONT not found', self._line)
        return self._result

    ##########################################################################
    # dispatch

    def _enter(self, state):
        logging.debug('line %d: %s -> %s', self._line, self._state.value, state.value)
        self._state = state

    def _process(self, line):
        """Dispatch one non-blank line according to parser state."""
        if self._state == State.IN_BITMAP:
            self._read_row(line)
            return
        keyword, value = split_record(line)
        if keyword == COMMENT and self._state != State.DONE:
            self._font.comments.append(value)
            return
        handler = self._handlers[self._state].get(keyword)
        if handler is None:
            # record keywords can't be property names
            if self._state != State.IN_PROPERTIES or keyword in KEYWORDS:
                raise UnexpectedEntry(keyword)
            handler = partial(self._read_property, keyword)
        if not value and keyword not in NO_VALUE:
            raise MissingValue(keyword)
        handler(value)

    def _set_field(self, get_target, attr, converter):
        """Create handler that converts a value and stores it on the target shell."""
        def _setter(value):
            setattr(get_target(), attr, converter(value))
        return _setter

    ##########################################################################
    # font level

    def _start_font(self, value):
        self._font.bdf_version = value
        self._enter(State.IN_FONT)

    def _start_properties(self, value):
        self._font.nproperties = _parse_count(value)
        self._nprops_read = 0
        self._enter(State.IN_PROPERTIES)

    def _read_property(self, keyword, value):
        """Read a property; XLFD keywords must have the right value type."""
        propvalue = parse_property_value(value)
        self._nprops_read += 1
        if keyword in XLFD_KEYWORDS:
            expected = XLFD_KEYWORDS[keyword]
            if not isinstance(propvalue, expected):
                raise ValueFormatError(f'{expected.desired} for {keyword}', value)
            self._font.xlfd.set(attr_name(keyword), propvalue.value)
        else:
            self._font.properties.append(PropertyShell(keyword, propvalue))

    def _end_properties(self, value):
        if self._nprops_read != self._font.nproperties:
            logging.warning(
                'Number of properties found (%d) does not match '
                'STARTPROPERTIES declaration (%d).',
                self._nprops_read, self._font.nproperties
            )
        self._enter(State.IN_FONT)

    def _start_chars(self, value):
        self._font.nchars = _parse_count(value)
        self._enter(State.IN_CHARS)

    def _end_font(self, value):
        nglyphs = len(self._font.glyphs)
        if self._font.nchars is not None and self._font.nchars != nglyphs:
            logging.warning(
                'Number of characters found (%d) does not match '
                'CHARS declaration (%d).', nglyphs, self._font.nchars
            )
        self._result = self._font.to_font()
        logging.info(
            'Parsed font `%s`: BDF v%s, %d glyphs, %d properties.',
            self._result.name, self._result.bdf_version,
            len(self._result.glyphs), len(self._result.properties)
        )
        self._enter(State.DONE)

    ##########################################################################
    # glyph level

    def _start_char(self, value):
        self._font.glyphs.append(GlyphShell(name=value))
        self._enter(State.IN_CHAR)

    def _read_encoding(self, value):
        """Read codepoint; the -1 (unencoded) convention is not supported."""
        first, *rest = value.split()
        try:
            codepoint = to_int(first)
        except ValueFormatError:
            raise InvalidCodepoint(value) from None
        if codepoint == -1:
            raise SpecialEncoding()
        if (
                rest or not 0 <= codepoint <= _MAX_CODEPOINT
                or codepoint in _SURROGATES
            ):
            raise InvalidCodepoint(value)
        self._font.glyph.codepoint = chr(codepoint)

    def _start_bitmap(self, value):
        """Fix bitmap size from glyph or font bounding box."""
        glyph = self._font.glyph
        bbx = glyph.bounding_box or self._font.bounding_box
        if bbx is None:
            raise MissingBoundingBox()
        glyph.bitmap_size = (bbx.width, bbx.height)
        glyph.rows = []
        if bbx.height:
            self._enter(State.IN_BITMAP)

    def _read_row(self, line):
        """Read one bitmap row; record keywords mean the block ended early."""
        keyword, _ = split_record(line)
        if keyword in KEYWORDS:
            raise UnexpectedEntry(keyword)
        glyph = self._font.glyph
        width, _ = glyph.bitmap_size
        row = BitRow.from_hex(line, width)
        if len(line) > 2 * ceildiv(width, 8):
            logging.debug(
                'line %d: excess bitmap bytes ignored in glyph `%s`',
                self._line, glyph.name
            )
        glyph.rows.append(row)
        if not glyph.rows_expected:
            self._enter(State.IN_CHAR)

    def _end_char(self, value):
        self._font.glyph.validate()
        self._enter(State.IN_CHARS)
