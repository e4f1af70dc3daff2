"""
bdfont.base.binary - binary utilities

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


def ceildiv(num, den):
    """Integer division, rounding up."""
    return (num + den - 1) // den


def bytes_to_bits(byteseq, width=None):
    """Unpack bytes to a tuple of bits, most significant first, clipped to width."""
    bits = tuple(
        bool(_byte & (0x80 >> _shift))
        for _byte in byteseq
        for _shift in range(8)
    )
    return bits[:width]


def bits_to_bytes(bits):
    """Pack a sequence of bits into bytes, padded on the right to a byte boundary."""
    bits = list(bits)
    bits.extend([False] * (-len(bits) % 8))
    return bytes(
        sum(0x80 >> _i for _i, _bit in enumerate(bits[_start:_start+8]) if _bit)
        for _start in range(0, len(bits), 8)
    )
