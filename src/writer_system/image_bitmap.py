from __future__ import annotations

from typing import List, Optional

from PIL import Image

from matrix_system.pixel import Pixel


def _normalize_image(img: Image.Image, background: Pixel) -> Image.Image:
    if img.mode == "RGB":
        return img
    if img.mode in ("RGBA", "LA", "P"):
        # Flatten transparency onto the background color
        rgba = img.convert("RGBA")
        base = Image.new("RGBA", rgba.size, background.rgb + (255,))
        return Image.alpha_composite(base, rgba).convert("RGB")
    return img.convert("RGB")


def image_to_bitmap(img: Image.Image, height: Optional[int] = None,
                    background: int = 0) -> List[List[Pixel]]:
    """
    Row-major bitmap of an already decoded Pillow image

    Args:
        img: Image in any mode; transparency is flattened onto `background`
        height: Resize to this many rows, keeping the aspect ratio
        background: Color under transparent pixels
    """
    img = _normalize_image(img, Pixel(background))
    if height is not None and img.height != height:
        ratio = height / float(img.height)
        width = max(1, int(img.width * ratio))
        img = img.resize((width, height), Image.LANCZOS)

    pixels = img.load()
    return [
        [Pixel(*pixels[x, y]) for x in range(img.width)]
        for y in range(img.height)
    ]
