from dataclasses import dataclass
import re
from typing import List

BRAILLE_BLANK = 0x2800
SIX_DOT_MASK = 0b111111


@dataclass(frozen=True)
class BrailleCell:
    """A six-dot cell, stored as the bitmask of its raised dots.

    Dot ``n`` sets bit ``n - 1``, which is how the Unicode Braille Patterns
    block lays out its code points.
    """

    mask: int

    def __post_init__(self):
        self._validate()

    def _validate(self):
        if not isinstance(self.mask, int) or not 0 <= self.mask <= SIX_DOT_MASK:
            raise ValueError("Cell mask must be an integer between 0 and 63")

    @classmethod
    def from_dots(cls, dots: str) -> "BrailleCell":
        if not re.fullmatch(r"[1-6]*", dots):
            raise ValueError("Dots must be digits between 1 and 6")
        if len(set(dots)) != len(dots):
            raise ValueError(f"Repeated dot in pattern: {dots}")

        mask = 0
        for dot in dots:
            mask |= 1 << (int(dot) - 1)
        return cls(mask)

    @classmethod
    def from_symbol(cls, symbol: str) -> "BrailleCell":
        if len(symbol) != 1:
            raise ValueError("Symbol must be a single braille character")
        offset = ord(symbol) - BRAILLE_BLANK
        if not 0 <= offset <= SIX_DOT_MASK:
            raise ValueError(f"Not a six-dot braille pattern: {symbol!r}")
        return cls(offset)

    @property
    def symbol(self) -> str:
        return chr(BRAILLE_BLANK + self.mask)

    @property
    def dots(self) -> str:
        return "".join(str(bit + 1) for bit in range(6) if self.mask & (1 << bit))

    def __str__(self):
        return f"BrailleCell({self.symbol} dots: {self.dots or '-'})"


def cells_for(glyph: str) -> List[BrailleCell]:
    return [BrailleCell.from_symbol(symbol) for symbol in glyph]
