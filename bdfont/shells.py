"""
bdfont.shells - drafts of font structures filled in while parsing

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT

A shell collects record values in any order; converting it checks that the
whole block is complete and consistent and returns the immutable model.
"""

from dataclasses import dataclass, field

from .values import MetricsSet
from .bitmap import Bitmap
from .xlfd import Xlfd
from .font import (
    Font, Glyph, Property, FONT_REQUIRED, GLYPH_REQUIRED,
    check_required, check_alternate_widths,
)
from .errors import FontValidationError, GlyphValidationError


@dataclass
class PropertyShell:
    name: str
    value: object

    def to_property(self):
        return Property(self.name, self.value)


@dataclass
class XlfdShell:
    fields: dict = field(default_factory=dict)

    def set(self, attr, value):
        # repeated keywords: last one wins
        self.fields[attr] = value

    def to_xlfd(self):
        return Xlfd(**self.fields)


@dataclass
class GlyphShell:
    name: str = None
    codepoint: str = None
    bounding_box: object = None
    metrics: MetricsSet = None
    scalable_width: object = None
    device_width: object = None
    scalable_width_alt: object = None
    device_width_alt: object = None
    vector: object = None
    # bitmap size fixed at the BITMAP record; rows appended as they come
    bitmap_size: tuple = None
    rows: list = field(default_factory=list)

    @property
    def rows_expected(self):
        """Number of bitmap rows still to be read."""
        if self.bitmap_size is None:
            return 0
        return self.bitmap_size[1] - len(self.rows)

    def validate(self):
        """Raise GlyphValidationError if the draft can't become a Glyph."""
        reason = check_required(self, GLYPH_REQUIRED)
        if reason:
            raise GlyphValidationError(self.codepoint, reason)
        reason = check_alternate_widths(
            self.metrics or MetricsSet.NORMAL,
            self.scalable_width_alt, self.device_width_alt
        )
        if reason:
            raise GlyphValidationError(self.codepoint, reason)
        if self.bitmap_size is not None and self.bitmap_size != (
                self.bounding_box.width, self.bounding_box.height
            ):
            raise GlyphValidationError(
                self.codepoint, 'bitmap does not match bounding box'
            )

    def to_glyph(self):
        """Validate and convert to Glyph."""
        self.validate()
        if self.bitmap_size is None:
            bitmap = Bitmap.blank(self.bounding_box.width, self.bounding_box.height)
        else:
            width, height = self.bitmap_size
            bitmap = Bitmap(width, height, self.rows)
        glyph = Glyph(
            name=self.name,
            codepoint=self.codepoint,
            bounding_box=self.bounding_box,
            bitmap=bitmap,
            metrics=self.metrics or MetricsSet.NORMAL,
            scalable_width=self.scalable_width,
            device_width=self.device_width,
            scalable_width_alt=self.scalable_width_alt,
            device_width_alt=self.device_width_alt,
            vector=self.vector,
        )
        glyph.validate()
        return glyph


@dataclass
class FontShell:
    bdf_version: str = None
    name: str = None
    size: object = None
    bounding_box: object = None
    metrics: MetricsSet = None
    content_version: int = None
    scalable_width: object = None
    device_width: object = None
    scalable_width_alt: object = None
    device_width_alt: object = None
    vector: object = None
    comments: list = field(default_factory=list)
    properties: list = field(default_factory=list)
    glyphs: list = field(default_factory=list)
    xlfd: XlfdShell = field(default_factory=XlfdShell)
    # declared counts, for checking only
    nproperties: int = None
    nchars: int = None

    @property
    def glyph(self):
        """Glyph currently being drafted."""
        return self.glyphs[-1]

    def validate(self):
        """Raise FontValidationError if the draft can't become a Font."""
        reason = check_required(self, FONT_REQUIRED)
        if reason:
            raise FontValidationError(reason)
        reason = check_alternate_widths(
            self.metrics or MetricsSet.NORMAL,
            self.scalable_width_alt, self.device_width_alt
        )
        if reason:
            raise FontValidationError(reason)

    def to_font(self):
        """Validate and convert to Font, with all its glyphs and properties."""
        self.validate()
        return Font(
            bdf_version=self.bdf_version,
            name=self.name,
            size=self.size,
            bounding_box=self.bounding_box,
            metrics=self.metrics or MetricsSet.NORMAL,
            comments=tuple(self.comments),
            properties=tuple(_prop.to_property() for _prop in self.properties),
            glyphs=tuple(_glyph.to_glyph() for _glyph in self.glyphs),
            content_version=self.content_version,
            scalable_width=self.scalable_width,
            device_width=self.device_width,
            scalable_width_alt=self.scalable_width_alt,
            device_width_alt=self.device_width_alt,
            vector=self.vector,
            xlfd=self.xlfd.to_xlfd(),
        )
