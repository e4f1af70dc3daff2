"""
bdfont test suite
bitmap tests
"""

import unittest

from bdfont import BitRow, Bitmap, ValueFormatError
from bdfont.base.image import Image
from .base import BaseTester


class TestBitRow(BaseTester):
    """Test hex encoding of bitmap rows."""

    def test_full_byte(self):
        row = BitRow.from_hex('FF')
        self.assertEqual(len(row), 8)
        self.assertTrue(all(row))

    def test_msb_first(self):
        row = BitRow.from_hex('80')
        self.assertEqual(list(row), [True] + [False] * 7)

    def test_odd_length(self):
        with self.assertRaises(ValueFormatError):
            BitRow.from_hex('F')

    def test_not_hex(self):
        with self.assertRaises(ValueFormatError):
            BitRow.from_hex('GG')
        with self.assertRaises(ValueFormatError):
            BitRow.from_hex('F F')

    def test_clip_to_width(self):
        row = BitRow.from_hex('FFC0', 10)
        self.assertEqual(len(row), 10)
        self.assertTrue(all(row))
        # padded back to byte boundary
        self.assertEqual(row.as_hex(), 'FFC0')

    def test_too_narrow(self):
        with self.assertRaises(ValueFormatError) as cm:
            BitRow.from_hex('FF', 12)
        self.assertIn('4 hexadecimal digits', str(cm.exception))

    def test_lowercase(self):
        self.assertEqual(BitRow.from_hex('a5').as_hex(), 'A5')

    def test_blank(self):
        row = BitRow.blank(3)
        self.assertEqual(list(row), [False, False, False])
        self.assertEqual(row.as_hex(), '00')


class TestBitmap(BaseTester):
    """Test bitmap access."""

    def test_get(self):
        bitmap = Bitmap.from_hex(['80', '40'], 2, 2)
        self.assertIs(bitmap.get(0, 0), True)
        self.assertIs(bitmap.get(1, 0), False)
        self.assertIs(bitmap.get(1, 1), True)

    def test_get_out_of_range(self):
        bitmap = Bitmap.blank(2, 2)
        self.assertIsNone(bitmap.get(2, 0))
        self.assertIsNone(bitmap.get(0, 2))
        self.assertIsNone(bitmap.get(-1, 0))

    def test_set(self):
        bitmap = Bitmap.blank(3, 2)
        bitmap.set(2, 1, True)
        self.assertIs(bitmap.get(2, 1), True)
        self.assertEqual(bitmap.as_hex(), ['00', '20'])
        bitmap.set(2, 1, False)
        self.assertTrue(bitmap.is_blank())

    def test_set_out_of_range(self):
        bitmap = Bitmap.blank(2, 2)
        bitmap.set(5, 5, True)
        bitmap.set(-1, 0, True)
        self.assertTrue(bitmap.is_blank())

    def test_dimensions(self):
        bitmap = Bitmap.blank(8, 3)
        self.assertEqual((bitmap.width, bitmap.height), (8, 3))
        self.assertEqual(len(bitmap.rows), 3)

    def test_rows_must_match_height(self):
        with self.assertRaises(ValueError):
            Bitmap(8, 2, [BitRow.blank(8)])
        with self.assertRaises(ValueError):
            Bitmap(8, 1, [BitRow.blank(4)])

    def test_pixels(self):
        bitmap = Bitmap.from_hex(['40'], 2, 1)
        self.assertEqual(
            list(bitmap.pixels()),
            [((0, 0), False), ((1, 0), True)]
        )

    def test_as_text(self):
        glyph = self.testfont.get_glyph('A')
        self.assertEqual(glyph.bitmap.as_text(), self.testfont_A)
        self.assertEqual(Bitmap.blank(3, 0).as_text(), '')

    def test_equality(self):
        self.assertEqual(
            Bitmap.from_hex(['C0'], 2, 1),
            Bitmap.from_hex(['FF'], 2, 1),
        )
        self.assertNotEqual(Bitmap.blank(2, 1), Bitmap.blank(3, 1))

    @unittest.skipIf(Image is None, 'PIL not available')
    def test_as_image(self):
        bitmap = Bitmap.from_hex(['80', '00'], 2, 2)
        image = bitmap.as_image(scale=2, ink=(255, 0, 0))
        self.assertEqual(image.size, (4, 4))
        self.assertEqual(image.getpixel((1, 1)), (255, 0, 0))
        self.assertEqual(image.getpixel((3, 3)), (0, 0, 0))


if __name__ == '__main__':
    unittest.main()
