"""
Column-bitmap fonts

A glyph is a list of column masks, left to right; bit k of a mask lights
row k (bit 0 is the top row). Fonts carry their own inter-glyph spacing as
blank trailing columns.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

_ALIAS_PATTERN = re.compile(r"\{\{|\{([A-Za-z0-9_\-]+)\}")


def expand_alias(text: str, aliases: Dict[str, str]) -> str:
    """
    Replace {name} tokens with aliases[name]

    Unknown names are kept as written; '{{' stands for a literal '{'.
    """
    def replace(match: 're.Match') -> str:
        name = match.group(1)
        if name is None:
            return "{"
        return aliases.get(name, match.group(0))

    return _ALIAS_PATTERN.sub(replace, text)


@dataclass
class Font:
    """Bitmap font with a fixed height"""
    height: int
    bitmap: Dict[str, List[int]]
    aliases: Dict[str, str] = field(default_factory=dict)
    fallback: Optional[str] = None  # character drawn for unknown characters

    def __post_init__(self):
        if self.height <= 0:
            raise ValueError(f"Font height must be positive, got {self.height}")
        limit = 1 << self.height
        for char, columns in self.bitmap.items():
            for mask in columns:
                if mask < 0 or mask >= limit:
                    raise ValueError(
                        f"Glyph {char!r} has column 0x{mask:X} taller than {self.height} rows"
                    )

    def expand(self, text: str) -> str:
        return expand_alias(text, self.aliases)

    def glyph(self, char: str) -> List[int]:
        if char in self.bitmap:
            return self.bitmap[char]
        if self.fallback is not None:
            return self.bitmap.get(self.fallback, [])
        return []

    def text_width(self, text: str) -> int:
        """Columns occupied by `text` after alias expansion"""
        return sum(len(self.glyph(c)) for c in self.expand(text))


# 5x7 ASCII glyphs for characters 32..126, five column bytes per entry
_GLYPHS_5X7 = (
    0x0000000000, 0x00005F0000, 0x0007070000, 0x147F147F14, 0x242A7F2A12, 0x2313086462, 0x3649552250, 0x0000030000,
    0x001C224100, 0x0041221C00, 0x14083E0814, 0x08083E0808, 0x0050300000, 0x0808080808, 0x0060600000, 0x2010080402,
    0x3E4141413E, 0x00427F4000, 0x6251494946, 0x2241494936, 0x1814127F10, 0x2745454539, 0x3C4A494930, 0x0371090503,
    0x3649494936, 0x264949493E, 0x0036360000, 0x0056360000, 0x0814224100, 0x1414141414, 0x0041221408, 0x0201510906,
    0x324979413E, 0x7E1111117E, 0x7F49494936, 0x3E41414122, 0x7F4141413E, 0x7F49494941, 0x7F09090901, 0x3E4141493A,
    0x7F0808087F, 0x00417F4100, 0x2040413F01, 0x7F08142241, 0x7F40404040, 0x7F020C027F, 0x7F0408107F, 0x3E4141413E,
    0x7F09090906, 0x3E4151215E, 0x7F09192946, 0x0649494930, 0x01017F0101, 0x3F4040403F, 0x1F2040201F, 0x3F4038403F,
    0x6314081463, 0x0708700807, 0x6151494543, 0x007F414100, 0x0204081020, 0x0041417F00, 0x0402010204, 0x4040404040,
    0x0001020400, 0x2054545478, 0x7F48444438, 0x3844444420, 0x384444487F, 0x3854545418, 0x087E090102, 0x085454543C,
    0x7F08040478, 0x00487D4000, 0x002040443D, 0x7F10284400, 0x00417F4000, 0x7C04780478, 0x7C08040478, 0x3844444438,
    0x7C14141408, 0x081414187C, 0x7C08040408, 0x4854545420, 0x043F444020, 0x3C4040207C, 0x1C2040201C, 0x3C4030403C,
    0x4428102844, 0x0C5050503C, 0x4464544C44, 0x0008364100, 0x00007F0000, 0x0041360800, 0x1008081008,
)


def _unpack_5x7(packed: int) -> List[int]:
    columns = [(packed >> shift) & 0xFF for shift in (32, 24, 16, 8, 0)]
    return columns + [0]


FONT_5X7 = Font(
    height=7,
    bitmap={chr(32 + i): _unpack_5x7(g) for i, g in enumerate(_GLYPHS_5X7)},
    aliases={"smile": ":)", "heart": "<3", "degree": "*"},
    fallback="?",
)
