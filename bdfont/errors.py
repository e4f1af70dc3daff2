"""
bdfont.errors - exceptions for reading and writing BDF

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


class BdfError(Exception):
    """Base class for BDF errors. Carries the line number, if known."""

    def __init__(self, message, line=None):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self):
        if self.line is None:
            return self.message
        return f'line {self.line}: {self.message}'


class MissingValue(BdfError):
    """Record requires an argument but has none."""

    def __init__(self, keyword, line=None):
        super().__init__(f'missing value for `{keyword}`', line)
        self.keyword = keyword


class UnexpectedEntry(BdfError):
    """Keyword not allowed in the current parser state."""

    def __init__(self, keyword, line=None):
        super().__init__(f'unexpected entry `{keyword}`', line)
        self.keyword = keyword


class MissingBoundingBox(BdfError):
    """Bitmap block with no glyph or font bounding box to size it."""

    def __init__(self, line=None):
        super().__init__('bitmap without bounding box', line)


class InvalidCodepoint(BdfError):
    """ENCODING value is not a unicode scalar value."""

    def __init__(self, value, line=None):
        super().__init__(f'invalid codepoint `{value}`', line)
        self.value = value


class SpecialEncoding(BdfError):
    """ENCODING uses the unsupported `-1` convention."""

    def __init__(self, line=None):
        super().__init__('special encoding -1 not supported', line)


class ValueFormatError(BdfError):
    """Value text does not match the expected shape."""

    def __init__(self, desired, value='', line=None):
        super().__init__(f'expected {desired}, got `{value}`', line)
        self.desired = desired
        self.value = value


class ValidationError(BdfError):
    """Structural invariant failed on a completed block."""


class FontValidationError(ValidationError):

    def __init__(self, reason, line=None):
        super().__init__(f'invalid font: {reason}', line)
        self.reason = reason


class GlyphValidationError(ValidationError):

    def __init__(self, codepoint, reason, line=None):
        if codepoint is None:
            label = 'glyph'
        else:
            label = f'glyph U+{ord(codepoint):04X}'
        super().__init__(f'invalid {label}: {reason}', line)
        self.codepoint = codepoint
        self.reason = reason
