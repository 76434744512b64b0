"""
Stripe export - serpentine ordering and byte packing for LED panels

Most LED matrix panels are a single strip folded column by column, so every
other column runs bottom-to-top. interleave() produces the two possible
orderings of a column-major bitmap: `even` displays correctly when the first
column sits at an even position on the strip, `odd` when it sits at an odd
one.
"""
from typing import List, Sequence, Tuple


def interleave(rows: int, bitmap: Sequence[int]) -> Tuple[List[int], List[int]]:
    """
    Build the even and odd serpentine stripes of a column-major bitmap

    Args:
        rows: Number of rows (pixels per column)
        bitmap: Column-major colors, len(bitmap) a multiple of rows

    Returns:
        (even, odd), each the same length as bitmap
    """
    size = len(bitmap)
    even = [0] * size
    odd = [0] * size
    for base in range(0, size, rows):
        flip_even = (base // rows) % 2 == 1
        for y in range(rows):
            straight = bitmap[base + y]
            flipped = bitmap[base + rows - 1 - y]
            if flip_even:
                even[base + y] = flipped
                odd[base + y] = straight
            else:
                even[base + y] = straight
                odd[base + y] = flipped
    return even, odd


def stripe_to_bytes(stripe: Sequence[int]) -> bytes:
    """Pack colors as consecutive R, G, B bytes (bits above 23 dropped)"""
    out = bytearray(len(stripe) * 3)
    for i, color in enumerate(stripe):
        out[i * 3] = (color >> 16) & 0xFF
        out[i * 3 + 1] = (color >> 8) & 0xFF
        out[i * 3 + 2] = color & 0xFF
    return bytes(out)
