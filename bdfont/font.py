"""
bdfont.font - validated BDF font model

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from dataclasses import dataclass, field, fields

from .values import MetricsSet, XYPair, BoundingBox, FontSize, Str, Int
from .bitmap import Bitmap
from .xlfd import Xlfd, XLFD_KEYWORDS
from .records import KEYWORDS
from .errors import FontValidationError, GlyphValidationError
from .writer import render_font


# required fields as (attribute, reason), in checking order
FONT_REQUIRED = (
    ('bdf_version', 'bdf version not found'),
    ('name', 'name not found'),
    ('size', 'size not found'),
    ('bounding_box', 'bounding box not found'),
)

GLYPH_REQUIRED = (
    ('codepoint', 'codepoint not found'),
    ('name', 'name not found'),
    ('bounding_box', 'bounding box not found'),
)


def check_required(item, required):
    """Reason for the first required field that is absent or empty, or None."""
    for attr, reason in required:
        value = getattr(item, attr)
        if value is None or value == '':
            return reason
    return None


def check_alternate_widths(metrics, scalable_width_alt, device_width_alt):
    """Reason why alternate widths don't agree with the metrics set, or None."""
    present = (scalable_width_alt is not None, device_width_alt is not None)
    if metrics == MetricsSet.NORMAL:
        if any(present):
            return 'alternate widths given with normal metrics set'
    elif not all(present):
        return 'alternate widths required by metrics set'
    return None


def has_line_break(text):
    return '\n' in text or '\r' in text


def check_property(name, value):
    """Reason why a generic property can't be written as one record, or None."""
    if (
            not name or name.split() != [name]
            or name in KEYWORDS or name in XLFD_KEYWORDS
        ):
        return f'invalid property name `{name}`'
    if not isinstance(value, (Str, Int)):
        return f'invalid value for property {name}'
    if isinstance(value, Str) and has_line_break(value.value):
        return f'line break in property {name}'
    return None


@dataclass(frozen=True)
class Property:
    """Free-form font property."""

    name: str
    value: object


@dataclass(frozen=True)
class Glyph:
    """A single character of a BDF font."""

    name: str
    codepoint: str
    bounding_box: BoundingBox
    bitmap: Bitmap
    metrics: MetricsSet = MetricsSet.NORMAL
    scalable_width: XYPair = None
    device_width: XYPair = None
    scalable_width_alt: XYPair = None
    device_width_alt: XYPair = None
    vector: XYPair = None

    def validate(self):
        """Raise GlyphValidationError if the glyph is inconsistent."""
        codepoint = self.codepoint
        if not isinstance(codepoint, str) or len(codepoint) != 1:
            raise GlyphValidationError(None, 'codepoint not found')
        reason = check_required(self, GLYPH_REQUIRED)
        if reason:
            raise GlyphValidationError(codepoint, reason)
        if has_line_break(self.name):
            raise GlyphValidationError(codepoint, 'line break in name')
        reason = check_alternate_widths(
            self.metrics, self.scalable_width_alt, self.device_width_alt
        )
        if reason:
            raise GlyphValidationError(codepoint, reason)
        if (
                self.bitmap.width != self.bounding_box.width
                or self.bitmap.height != self.bounding_box.height
            ):
            raise GlyphValidationError(
                codepoint, 'bitmap does not match bounding box'
            )


@dataclass(frozen=True)
class Font:
    """BDF font."""

    bdf_version: str
    name: str
    size: FontSize
    bounding_box: BoundingBox
    metrics: MetricsSet = MetricsSet.NORMAL
    comments: tuple = ()
    properties: tuple = ()
    glyphs: tuple = ()
    content_version: int = None
    scalable_width: XYPair = None
    device_width: XYPair = None
    scalable_width_alt: XYPair = None
    device_width_alt: XYPair = None
    vector: XYPair = None
    xlfd: Xlfd = field(default_factory=Xlfd)

    def validate(self):
        """
        Raise ValidationError if the font or any of its glyphs is inconsistent,
        or can't be written back as well-formed BDF.
        """
        reason = check_required(self, FONT_REQUIRED)
        if reason:
            raise FontValidationError(reason)
        if has_line_break(self.bdf_version) or has_line_break(self.name):
            raise FontValidationError('line break in header')
        if any(has_line_break(_comment) for _comment in self.comments):
            raise FontValidationError('line break in comment')
        for prop in self.properties:
            reason = check_property(prop.name, prop.value)
            if reason:
                raise FontValidationError(reason)
        for xlfd_field in fields(self.xlfd):
            value = getattr(self.xlfd, xlfd_field.name)
            if isinstance(value, str) and has_line_break(value):
                raise FontValidationError(
                    f'line break in property {xlfd_field.name.upper()}'
                )
        reason = check_alternate_widths(
            self.metrics, self.scalable_width_alt, self.device_width_alt
        )
        if reason:
            raise FontValidationError(reason)
        for glyph in self.glyphs:
            glyph.validate()

    def get_glyph(self, char):
        """First glyph for the given character, or None."""
        for glyph in self.glyphs:
            if glyph.codepoint == char:
                return glyph
        return None

    def render(self):
        """Render to canonical BDF text."""
        return render_font(self)
