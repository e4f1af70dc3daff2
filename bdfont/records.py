"""
bdfont.records - BDF record keywords and line splitting

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

# BDF specification: https://adobe-type-tools.github.io/font-tech-notes/pdfs/5005.BDF_Spec.pdf

STARTFONT = 'STARTFONT'
FONT = 'FONT'
COMMENT = 'COMMENT'
CONTENTVERSION = 'CONTENTVERSION'
SIZE = 'SIZE'
FONTBOUNDINGBOX = 'FONTBOUNDINGBOX'
METRICSSET = 'METRICSSET'
SWIDTH = 'SWIDTH'
DWIDTH = 'DWIDTH'
SWIDTH1 = 'SWIDTH1'
DWIDTH1 = 'DWIDTH1'
VVECTOR = 'VVECTOR'
CHARS = 'CHARS'
STARTPROPERTIES = 'STARTPROPERTIES'
ENDPROPERTIES = 'ENDPROPERTIES'
STARTCHAR = 'STARTCHAR'
ENCODING = 'ENCODING'
BBX = 'BBX'
BITMAP = 'BITMAP'
ENDCHAR = 'ENDCHAR'
ENDFONT = 'ENDFONT'

# writing metrics shared by the global and per-glyph sections
# as (keyword, attribute name), in output order
WIDTH_RECORDS = (
    (SWIDTH, 'scalable_width'),
    (DWIDTH, 'device_width'),
    (SWIDTH1, 'scalable_width_alt'),
    (DWIDTH1, 'device_width_alt'),
    (VVECTOR, 'vector'),
)

# records that take no argument
NO_VALUE = {ENDPROPERTIES, BITMAP, ENDCHAR, ENDFONT}

# fixed record vocabulary, not including property keywords
KEYWORDS = frozenset((
    STARTFONT, FONT, COMMENT, CONTENTVERSION, SIZE, FONTBOUNDINGBOX, METRICSSET,
    SWIDTH, DWIDTH, SWIDTH1, DWIDTH1, VVECTOR, CHARS, STARTPROPERTIES,
    ENDPROPERTIES, STARTCHAR, ENCODING, BBX, BITMAP, ENDCHAR, ENDFONT,
))


def split_record(line):
    """Split line into keyword and (possibly empty) argument."""
    keyword, *value = line.split(None, 1)
    if not value:
        return keyword, ''
    return keyword, value[0].strip()


def format_record(keyword, value=None):
    """Render a single record line, without line ending."""
    if value is None:
        return keyword
    value = str(value)
    if not value:
        return keyword
    return f'{keyword} {value}'
