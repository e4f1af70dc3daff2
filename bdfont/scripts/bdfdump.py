#!/usr/bin/env python3
"""
Check a BDF font file and print its contents
(c) 2019--2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse

import bdfont
from bdfont.plumbing import wrap_main


def _to_char(label):
    """Convert a character or U+XXXX label to a character."""
    if label[:2].upper() == 'U+':
        return chr(int(label[2:], 16))
    if len(label) != 1:
        raise ValueError(f'Not a single character: `{label}`')
    return label


def summary(font):
    """Summary of font metadata, as lines of text."""
    lines = [
        f'font: {font.name}',
        f'bdf version: {font.bdf_version}',
        f'size: {font.size}',
        f'bounding box: {font.bounding_box}',
        f'metrics set: {font.metrics.name.lower()}',
        f'glyphs: {len(font.glyphs)}',
    ]
    if font.xlfd:
        lines.append(f'xlfd: {font.xlfd.to_name()}')
    lines.extend(f'property {_prop.name}: {_prop.value}' for _prop in font.properties)
    lines.extend(f'comment: {_comment}' for _comment in font.comments)
    return lines


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument('infile', nargs='?', default='', help='BDF file (default: stdin)')
    parser.add_argument(
        '--glyph', default='',
        help='print the glyph for this character (or U+XXXX) as text'
    )
    parser.add_argument(
        '--output', default='',
        help='write the font as canonical BDF to this file, or - for stdout'
    )
    parser.add_argument('--overwrite', action='store_true', help='allow overwriting the output file')
    parser.add_argument('--debug', action='store_true', help='enable debugging output')
    args = parser.parse_args(argv)

    with wrap_main(args.debug, source=args.infile):
        font = bdfont.load(args.infile)
        if args.output:
            outfile = '' if args.output == '-' else args.output
            bdfont.save(font, outfile, overwrite=args.overwrite)
        elif args.glyph:
            char = _to_char(args.glyph)
            glyph = font.get_glyph(char)
            if glyph is None:
                raise KeyError(f'No glyph for U+{ord(char):04X} in font.')
            sys.stdout.write(glyph.bitmap.as_text())
        else:
            print('\n'.join(summary(font)))


if __name__ == '__main__':
    main()
