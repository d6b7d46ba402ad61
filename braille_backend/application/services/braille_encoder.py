import logging
from dataclasses import dataclass
from typing import List

from braille_backend.infrastructure.mapping.spanish_braille_table import (
    CAPITAL_INDICATOR,
    NUMBER_INDICATOR,
    NUMERIC_SEPARATORS,
    SPACE,
    SpanishBrailleTable,
)

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


@dataclass
class EncodeState:
    in_numeric_run: bool = False


class BrailleEncoder:
    """Transliterates Spanish text into Unicode Braille cells."""

    def __init__(self):
        self._table = SpanishBrailleTable()

    def encode(self, text: str) -> str:
        if not text:
            return ""

        state = EncodeState()
        output: List[str] = []

        for index, char in enumerate(text):
            is_digit = char in DIGITS

            if is_digit and not state.in_numeric_run:
                output.append(NUMBER_INDICATOR)
                state.in_numeric_run = True

            if state.in_numeric_run and char in NUMERIC_SEPARATORS:
                output.append(self._table.glyph_for(char))
                next_index = index + 1
                if next_index < len(text) and text[next_index] in DIGITS:
                    output.append(NUMBER_INDICATOR)
                else:
                    state.in_numeric_run = False
                continue

            if not is_digit and char not in NUMERIC_SEPARATORS:
                state.in_numeric_run = False

            if char.isupper() and not is_digit and char != SPACE:
                output.append(CAPITAL_INDICATOR)

            glyph = self._table.glyph_for(char.lower())
            if glyph is not None:
                output.append(glyph)
            else:
                logger.debug("No braille glyph for %r, passing through", char)
                output.append(char)

        return "".join(output)
