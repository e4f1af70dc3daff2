"""
bdfont - read, validate and write Glyph Bitmap Distribution Format fonts

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .errors import (
    BdfError, MissingValue, UnexpectedEntry, MissingBoundingBox,
    InvalidCodepoint, SpecialEncoding, ValueFormatError,
    ValidationError, FontValidationError, GlyphValidationError,
)
from .values import XYPair, BoundingBox, FontSize, MetricsSet, Str, Int
from .bitmap import BitRow, Bitmap
from .xlfd import Xlfd
from .font import Font, Glyph, Property
from .reader import parse, BdfReader
from .writer import RecordWriter
from .storage import load, save
