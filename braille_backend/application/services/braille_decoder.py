import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from braille_backend.infrastructure.mapping.spanish_braille_table import (
    CAPITAL_INDICATOR,
    LETTER_TO_DIGIT,
    NUMBER_INDICATOR,
    NUMERIC_SEPARATORS,
    SPACE,
    SpanishBrailleTable,
)

logger = logging.getLogger(__name__)


@dataclass
class DecodeState:
    pending_capital: bool = False
    in_numeric_mode: bool = False


class BrailleDecoder:
    """Transliterates Unicode Braille cells back into Spanish text.

    Multi-cell glyphs are matched on their full key before any single cell
    is interpreted, so ``⠨⠂`` reads as ``>`` rather than a capital indicator
    followed by a comma.
    """

    def __init__(self):
        self._table = SpanishBrailleTable()
        self._separator_glyphs = frozenset(
            self._table.glyph_for(separator) for separator in NUMERIC_SEPARATORS
        )

    def decode(self, braille: str) -> str:
        if not braille:
            return ""

        state = DecodeState()
        output: List[str] = []
        index = 0

        while index < len(braille):
            multi_cell = self._match_multi_cell(braille, index)
            if multi_cell is not None:
                glyph, char = multi_cell
                output.append(self._apply_modes(char, state))
                index += len(glyph)
                continue

            unit = braille[index]
            index += 1

            if unit == CAPITAL_INDICATOR:
                state.pending_capital = True
                continue

            if unit == NUMBER_INDICATOR:
                state.in_numeric_mode = True
                continue

            if unit in self._separator_glyphs:
                # Numeric mode survives; a following digit brings its own indicator
                output.append(self._table.char_for(unit))
                continue

            if unit == SPACE:
                output.append(SPACE)
                state.in_numeric_mode = False
                state.pending_capital = False
                continue

            char = self._table.char_for(unit)
            if char is None:
                logger.debug("Unknown braille unit %r, passing through", unit)
                output.append(unit)
                continue

            output.append(self._apply_modes(char, state))

        return "".join(output)

    def _match_multi_cell(self, braille: str, index: int) -> Optional[Tuple[str, str]]:
        for length in range(self._table.max_glyph_length, 1, -1):
            candidate = braille[index : index + length]
            if len(candidate) < length:
                continue
            char = self._table.char_for(candidate)
            if char is not None:
                return candidate, char
        return None

    @staticmethod
    def _apply_modes(char: str, state: DecodeState) -> str:
        if state.in_numeric_mode:
            # Letters outside a-j have no digit and come through unchanged
            return LETTER_TO_DIGIT.get(char, char)
        if state.pending_capital:
            state.pending_capital = False
            return char.upper()
        return char
