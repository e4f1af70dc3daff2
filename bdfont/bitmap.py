"""
bdfont.bitmap - glyph bit matrices

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import string

from .base.binary import ceildiv, bytes_to_bits, bits_to_bytes
from .base.image import to_image
from .errors import ValueFormatError


_HEXDIGITS = set(string.hexdigits)


class BitRow:
    """Fixed-width row of pixels."""

    desired = 'even-length hexadecimal string'

    def __init__(self, bits=(), width=None):
        """Create row from sequence of bits, padded or clipped to width."""
        bits = [bool(_b) for _b in bits]
        if width is None:
            width = len(bits)
        self._bits = bits[:width] + [False] * (width - len(bits))

    @classmethod
    def blank(cls, width):
        return cls(width=width)

    @classmethod
    def from_hex(cls, hexstr, width=None):
        """
        Decode row from hex string, two digits per byte, most significant bit first.

        width: number of pixels to keep (default: all bits in the string)
        """
        if len(hexstr) % 2 or not set(hexstr) <= _HEXDIGITS:
            raise ValueFormatError(cls.desired, hexstr)
        byteseq = bytes.fromhex(hexstr)
        if width is not None and width > 8 * len(byteseq):
            raise ValueFormatError(
                f'{ceildiv(width, 8) * 2} hexadecimal digits', hexstr
            )
        return cls(bytes_to_bits(byteseq, width))

    def as_hex(self):
        """Encode row as upper-case hex string, padded to byte boundary."""
        return bits_to_bytes(self._bits).hex().upper()

    def __str__(self):
        return self.as_hex()

    def __repr__(self):
        return "{}({!r})".format(
            type(self).__name__, ''.join('1' if _b else '0' for _b in self._bits)
        )

    def __len__(self):
        return len(self._bits)

    def __iter__(self):
        return iter(self._bits)

    def __getitem__(self, index):
        return self._bits[index]

    def __setitem__(self, index, value):
        self._bits[index] = bool(value)

    def __eq__(self, other):
        if not isinstance(other, BitRow):
            return NotImplemented
        return self._bits == other._bits


class Bitmap:
    """Glyph pixel image: a fixed number of equal-width rows."""

    def __init__(self, width, height, rows=None):
        """Create bitmap, blank unless rows are given."""
        if rows is None:
            rows = (BitRow.blank(width) for _ in range(height))
        self._rows = list(rows)
        self._width = width
        self._height = height
        if len(self._rows) != height:
            raise ValueError(
                f'Bitmap height {height} does not match number of rows {len(self._rows)}'
            )
        if any(len(_row) != width for _row in self._rows):
            raise ValueError(f'All rows in bitmap must have width {width}')

    @classmethod
    def blank(cls, width=0, height=0):
        return cls(width, height)

    @classmethod
    def from_hex(cls, hexrows, width, height):
        """Create bitmap from a sequence of hex strings, one per row."""
        rows = [BitRow.from_hex(_row, width) for _row in hexrows]
        return cls(width, height, rows)

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def rows(self):
        return tuple(self._rows)

    def get(self, x, y):
        """Pixel value at (x, y), counted from top left; None if out of range."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            return None
        return self._rows[y][x]

    def set(self, x, y, value):
        """Set pixel at (x, y); ignored if out of range."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            return
        self._rows[y][x] = value

    def pixels(self):
        """Iterate over ((x, y), value) in row order."""
        for y, row in enumerate(self._rows):
            for x, value in enumerate(row):
                yield (x, y), value

    def is_blank(self):
        return not any(_v for _, _v in self.pixels())

    ##########################################################################
    # representation

    def as_hex(self):
        """Hex string per row."""
        return [_row.as_hex() for _row in self._rows]

    def as_matrix(self):
        """Tuple of tuples of 0/1 values."""
        return tuple(tuple(int(_b) for _b in _row) for _row in self._rows)

    def as_text(self, *, ink='@', paper='.', end='\n'):
        """Text art, one line per row."""
        if not self._height:
            return ''
        return end.join(
            ''.join(ink if _b else paper for _b in _row)
            for _row in self._rows
        ) + end

    def as_image(self, scale=1, paper=(0, 0, 0), ink=(255, 255, 255)):
        """Convert to a PIL image."""
        return to_image(self.as_matrix(), scale=scale, paper=paper, ink=ink)

    def __repr__(self):
        if self._height:
            return '{}({}, {}, (\n  {}))'.format(
                type(self).__name__, self._width, self._height,
                '\n  '.join(repr(_row) + ',' for _row in self._rows)
            )
        return f'{type(self).__name__}({self._width}, {self._height})'

    def __eq__(self, other):
        if not isinstance(other, Bitmap):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._rows == other._rows
        )
