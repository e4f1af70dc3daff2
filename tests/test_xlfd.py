"""
bdfont test suite
xlfd tests
"""

import unittest

import bdfont
from bdfont import Xlfd, ValueFormatError
from .base import BaseTester, make_font


NAME = '-Misc-Fixed-Medium-R-Normal--6-60-75-75-C-40-ISO10646-1'


class TestXlfd(BaseTester):
    """Test XLFD font names and properties."""

    def test_from_name(self):
        xlfd = Xlfd.from_name(NAME)
        self.assertEqual(xlfd.foundry, 'Misc')
        self.assertEqual(xlfd.family_name, 'Fixed')
        self.assertEqual(xlfd.weight_name, 'Medium')
        self.assertEqual(xlfd.slant, 'R')
        self.assertEqual(xlfd.setwidth_name, 'Normal')
        self.assertIsNone(xlfd.add_style_name)
        self.assertEqual(xlfd.pixel_size, 6)
        self.assertEqual(xlfd.point_size, 60)
        self.assertEqual((xlfd.resolution_x, xlfd.resolution_y), (75, 75))
        self.assertEqual(xlfd.spacing, 'C')
        self.assertEqual(xlfd.average_width, 40)
        self.assertEqual(xlfd.charset_registry, 'ISO10646')
        self.assertEqual(xlfd.charset_encoding, '1')

    def test_to_name(self):
        self.assertEqual(Xlfd.from_name(NAME).to_name(), NAME)

    def test_empty(self):
        xlfd = Xlfd()
        self.assertFalse(xlfd)
        self.assertEqual(xlfd.to_name(), '-' * 14)
        self.assertEqual(xlfd.properties(), [])
        self.assertEqual(Xlfd.from_name('-' * 14), xlfd)

    def test_negative_width(self):
        xlfd = Xlfd.from_name('-Misc-Fixed-Medium-R-Normal--6-60-75-75-P-~20-ISO10646-1')
        self.assertEqual(xlfd.average_width, -20)
        self.assertTrue(xlfd.to_name().endswith('-P-~20-ISO10646-1'))

    def test_bad_field_count(self):
        with self.assertRaises(ValueFormatError):
            Xlfd.from_name('-Misc-Fixed-Medium')
        with self.assertRaises(ValueFormatError):
            Xlfd.from_name(NAME + '-extra')

    def test_not_xlfd(self):
        with self.assertRaises(ValueFormatError):
            Xlfd.from_name('fixed')
        with self.assertRaises(ValueFormatError):
            Xlfd.from_name(NAME[1:] + '-')

    def test_bad_number(self):
        with self.assertRaises(ValueFormatError):
            Xlfd.from_name(NAME.replace('-60-', '-sixty-'))

    def test_properties_from_font(self):
        font = bdfont.parse(make_font(
            'STARTPROPERTIES 3',
            'CHARSET_REGISTRY "ISO8859"', 'RESOLUTION_Y 96', 'FAMILY_NAME "Sans"',
            'ENDPROPERTIES',
        ))
        self.assertEqual(
            [_key for _key, _ in font.xlfd.properties()],
            ['FAMILY_NAME', 'RESOLUTION_Y', 'CHARSET_REGISTRY'],
        )
        self.assertEqual(font.xlfd.to_name(), '--Sans--------96---ISO8859-')

    def test_testfont_name(self):
        font = self.testfont
        self.assertEqual(Xlfd.from_name(font.name).foundry, font.xlfd.foundry)


if __name__ == '__main__':
    unittest.main()
