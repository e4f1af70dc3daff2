"""
bdfont.values - typed values of BDF records

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
from collections import namedtuple
from dataclasses import dataclass
from enum import IntEnum

from .errors import ValueFormatError


_INT_PATTERN = re.compile(r'[+-]?[0-9]+')
_UINT_PATTERN = re.compile(r'\+?[0-9]+')


def to_int(token, desired='integer'):
    """Convert decimal string to int."""
    if not _INT_PATTERN.fullmatch(token):
        raise ValueFormatError(desired, token)
    return int(token)


def to_uint(token, desired='unsigned integer'):
    """Convert decimal string to non-negative int."""
    if not _UINT_PATTERN.fullmatch(token):
        raise ValueFormatError(desired, token)
    return int(token)


def split_tokens(text, count, desired):
    """Split on whitespace, requiring exactly `count` tokens."""
    tokens = text.split()
    if len(tokens) != count:
        raise ValueFormatError(f'{desired} ({len(tokens)} found)', text)
    return tokens


class _VectorMixin:
    """Whitespace-separated rendering and parsing of integer tuples."""

    # converter per field, in field order
    _converters = ()

    def __str__(self):
        return ' '.join(f'{_e}' for _e in self)

    @classmethod
    def parse(cls, text):
        tokens = split_tokens(text, len(cls._fields), cls.desired)
        return cls(*(
            _conv(_tok, cls.desired)
            for _conv, _tok in zip(cls._converters, tokens)
        ))


class XYPair(_VectorMixin, namedtuple('XYPair', 'x y')):
    """Two-axis metric: scalable or device width, vector."""

    desired = 'two unsigned integers'
    _converters = (to_uint, to_uint)


class BoundingBox(_VectorMixin, namedtuple('BoundingBox', 'width height x_offset y_offset')):
    """Pixel extent and origin offset."""

    desired = 'width, height, x offset and y offset'
    _converters = (to_uint, to_uint, to_int, to_int)


class FontSize(_VectorMixin, namedtuple('FontSize', 'point_size x_dpi y_dpi')):
    """Nominal point size and resolution."""

    desired = 'point size, x resolution and y resolution'
    _converters = (to_uint, to_uint, to_uint)


class MetricsSet(IntEnum):
    """Writing directions for which metrics are given."""

    NORMAL = 0
    ALTERNATE = 1
    BOTH = 2

    @classmethod
    def parse(cls, text):
        token, = split_tokens(text, 1, cls.desired)
        value = to_int(token, cls.desired)
        try:
            return cls(value)
        except ValueError:
            raise ValueFormatError(cls.desired, text) from None

    def __str__(self):
        return str(int(self))


MetricsSet.desired = 'metrics set 0, 1 or 2'


##############################################################################
# property values

@dataclass(frozen=True)
class Str:
    """String property value."""

    value: str

    desired = 'quoted string'

    @classmethod
    def parse(cls, text):
        """Decode quoted string; doubled quotes stand for one quote."""
        if not text.startswith('"'):
            raise ValueFormatError(cls.desired, text)
        body, quote, trailer = text[1:].rpartition('"')
        if not quote or trailer.strip():
            raise ValueFormatError(cls.desired, text)
        return cls(body.replace('""', '"'))

    def __str__(self):
        return '"{}"'.format(self.value.replace('"', '""'))


@dataclass(frozen=True)
class Int:
    """Integer property value."""

    value: int

    desired = 'integer'

    @classmethod
    def parse(cls, text):
        return cls(to_int(text.strip(), cls.desired))

    def __str__(self):
        return str(self.value)


def parse_property_value(text):
    """Parse a property value: quoted string or signed integer."""
    if text.startswith('"'):
        return Str.parse(text)
    try:
        return Int.parse(text)
    except ValueFormatError:
        raise ValueFormatError('quoted string or integer', text) from None
