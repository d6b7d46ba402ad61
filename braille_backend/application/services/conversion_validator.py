from dataclasses import dataclass, field
from typing import List, Optional

from braille_backend.infrastructure.mapping.spanish_braille_table import (
    CAPITAL_INDICATOR,
    NUMBER_INDICATOR,
    SPACE,
    SpanishBrailleTable,
)


@dataclass
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None
    unsupported: List[str] = field(default_factory=list)


class ConversionValidator:
    def __init__(self):
        self._table = SpanishBrailleTable()

    def can_encode(self, text: str) -> bool:
        # Empty input is a negative case, not vacuously encodable
        if not text:
            return False

        return all(
            self._table.is_encodable_character(char) for char in text.lower()
        )

    def find_unsupported_characters(self, text: str) -> List[str]:
        unsupported: List[str] = []
        for char in text:
            if char == SPACE or char in unsupported:
                continue
            if not self._table.is_encodable_character(char.lower()):
                unsupported.append(char)
        return unsupported

    def validate_text(self, text: str) -> ValidationResult:
        if not text or not text.strip():
            return ValidationResult(is_valid=False, error="Text must not be empty")

        unsupported = self.find_unsupported_characters(text)
        if unsupported:
            return ValidationResult(
                is_valid=False,
                error=f"Unsupported characters: {', '.join(unsupported)}",
                unsupported=unsupported,
            )

        return ValidationResult(is_valid=True)

    def find_unknown_braille_units(self, braille: str) -> List[str]:
        """Return the units of ``braille`` that no glyph or indicator covers.

        Multi-cell glyphs are matched whole first, so the prefix cell of
        ``⠐⠣`` is not reported on its own.
        """
        indicators = (CAPITAL_INDICATOR, NUMBER_INDICATOR)
        unknown: List[str] = []
        index = 0

        while index < len(braille):
            matched = 0
            for length in range(self._table.max_glyph_length, 0, -1):
                candidate = braille[index : index + length]
                if len(candidate) == length and (
                    self._table.is_known_glyph(candidate) or candidate in indicators
                ):
                    matched = length
                    break

            if matched:
                index += matched
                continue

            unit = braille[index]
            if unit not in unknown:
                unknown.append(unit)
            index += 1

        return unknown

    def is_valid_braille(self, braille: str) -> bool:
        if not braille:
            return False
        return not self.find_unknown_braille_units(braille)

    def validate_braille(self, braille: str) -> ValidationResult:
        if not braille or not braille.strip():
            return ValidationResult(is_valid=False, error="Braille must not be empty")

        unknown = self.find_unknown_braille_units(braille)
        if unknown:
            return ValidationResult(
                is_valid=False,
                error=f"Unknown braille units: {', '.join(unknown)}",
                unsupported=unknown,
            )

        return ValidationResult(is_valid=True)
