"""
bdfont.writer - render fonts as BDF records

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import io
import logging

from .records import (
    format_record, WIDTH_RECORDS,
    STARTFONT, FONT, COMMENT, CONTENTVERSION, SIZE, FONTBOUNDINGBOX, METRICSSET,
    STARTPROPERTIES, ENDPROPERTIES, CHARS, STARTCHAR, ENCODING, BBX, BITMAP,
    ENDCHAR, ENDFONT,
)
from .values import MetricsSet


##############################################################################
# records

def iter_records(font):
    """
    Generate the BDF records of a font, one line each without line ending.
    Raises ValidationError before producing any record if the font is invalid.
    """
    font.validate()
    yield format_record(STARTFONT, font.bdf_version)
    yield format_record(FONT, font.name)
    for comment in font.comments:
        yield format_record(COMMENT, comment)
    if font.content_version is not None:
        yield format_record(CONTENTVERSION, font.content_version)
    yield format_record(SIZE, font.size)
    yield format_record(FONTBOUNDINGBOX, font.bounding_box)
    yield from _iter_metrics(font)
    properties = font.xlfd.properties() + [
        (_prop.name, _prop.value) for _prop in font.properties
    ]
    if properties:
        yield format_record(STARTPROPERTIES, len(properties))
        for key, value in properties:
            yield format_record(key, value)
        yield format_record(ENDPROPERTIES)
    if font.glyphs:
        yield format_record(CHARS, len(font.glyphs))
        for glyph in font.glyphs:
            yield from _iter_glyph_records(glyph)
    yield format_record(ENDFONT)


def _iter_metrics(item):
    """Metrics set and writing metrics, for font or glyph."""
    if item.metrics != MetricsSet.NORMAL:
        yield format_record(METRICSSET, int(item.metrics))
    for keyword, attr in WIDTH_RECORDS:
        value = getattr(item, attr)
        if value is not None:
            yield format_record(keyword, value)


def _iter_glyph_records(glyph):
    yield format_record(STARTCHAR, glyph.name)
    yield format_record(ENCODING, ord(glyph.codepoint))
    yield format_record(BBX, glyph.bounding_box)
    yield from _iter_metrics(glyph)
    yield format_record(BITMAP)
    for row in glyph.bitmap.rows:
        # zero-width rows still take up a line
        yield row.as_hex() or '00'
    yield format_record(ENDCHAR)


def render_font(font):
    """Render font to BDF text."""
    return ''.join(f'{_record}\n' for _record in iter_records(font))


##############################################################################
# buffered output

class RecordWriter:
    """Buffered writer of BDF records to a binary stream."""

    def __init__(self, sink, buffer_size=io.DEFAULT_BUFFER_SIZE):
        self._stream = io.BufferedWriter(sink, buffer_size)

    def write(self, record):
        """Write one record, adding the line ending."""
        self._stream.write(f'{record}\n'.encode('utf-8'))

    def write_font(self, font):
        """Write all records of a font."""
        logging.debug('Writing font `%s` with %d glyphs', font.name, len(font.glyphs))
        for record in iter_records(font):
            self.write(record)

    def flush(self):
        self._stream.flush()

    def finalize(self):
        """Flush buffer and release the underlying stream."""
        return self._stream.detach()
