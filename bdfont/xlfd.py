"""
bdfont.xlfd - X11 Logical Font Description fields

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

# XLFD conventions: https://www.x.org/releases/X11R7.6/doc/xorg-docs/specs/XLFD/xlfd.html

from dataclasses import dataclass, fields

from .values import Str, Int, to_int
from .errors import ValueFormatError


# fields of the xlfd font name, in name order
# these are reserved property keywords with a fixed value type
XLFD_FIELDS = (
    ('FOUNDRY', Str),
    ('FAMILY_NAME', Str),
    ('WEIGHT_NAME', Str),
    ('SLANT', Str),
    ('SETWIDTH_NAME', Str),
    ('ADD_STYLE_NAME', Str),
    ('PIXEL_SIZE', Int),
    ('POINT_SIZE', Int),
    ('RESOLUTION_X', Int),
    ('RESOLUTION_Y', Int),
    ('SPACING', Str),
    ('AVERAGE_WIDTH', Int),
    ('CHARSET_REGISTRY', Str),
    ('CHARSET_ENCODING', Str),
)

XLFD_KEYWORDS = dict(XLFD_FIELDS)


def attr_name(keyword):
    """Xlfd attribute for property keyword."""
    return keyword.lower()


@dataclass(frozen=True)
class Xlfd:
    """Structured XLFD properties. Any field may be absent."""

    foundry: str = None
    family_name: str = None
    weight_name: str = None
    slant: str = None
    setwidth_name: str = None
    add_style_name: str = None
    pixel_size: int = None
    point_size: int = None
    resolution_x: int = None
    resolution_y: int = None
    spacing: str = None
    average_width: int = None
    charset_registry: str = None
    charset_encoding: str = None

    def __bool__(self):
        return any(getattr(self, _f.name) is not None for _f in fields(self))

    def properties(self):
        """Present fields as (keyword, property value) pairs, in name order."""
        return [
            (_key, _type(getattr(self, attr_name(_key))))
            for _key, _type in XLFD_FIELDS
            if getattr(self, attr_name(_key)) is not None
        ]

    def to_name(self):
        """
        Hyphen-delimited XLFD font name.
        Absent fields are left empty; negative widths are written with a tilde.
        """
        values = []
        for key, _type in XLFD_FIELDS:
            value = getattr(self, attr_name(key))
            if value is None:
                value = ''
            elif _type is Int:
                value = str(value).replace('-', '~')
            values.append(value)
        return '-' + '-'.join(values)

    @classmethod
    def from_name(cls, name):
        """Parse hyphen-delimited XLFD font name. Empty fields are absent."""
        desired = f'XLFD name with {len(XLFD_FIELDS)} fields'
        registry, *values = name.split('-')
        if registry or len(values) != len(XLFD_FIELDS):
            raise ValueFormatError(desired, name)
        kwargs = {}
        for (key, _type), value in zip(XLFD_FIELDS, values):
            if not value:
                continue
            if _type is Int:
                value = to_int(value.replace('~', '-'), desired)
            kwargs[attr_name(key)] = value
        return cls(**kwargs)
