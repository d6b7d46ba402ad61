import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

CAPITAL_INDICATOR = "⠨"
NUMBER_INDICATOR = "⠼"
SPACE = " "

# Hyphen, comma and period keep a number running when a digit follows them
NUMERIC_SEPARATORS = ("-", ",", ".")

LETTER_TO_DIGIT: Mapping[str, str] = MappingProxyType(
    {
        "a": "1",
        "b": "2",
        "c": "3",
        "d": "4",
        "e": "5",
        "f": "6",
        "g": "7",
        "h": "8",
        "i": "9",
        "j": "0",
    }
)

# (character, glyph) pairs in table order
SYMBOL_TABLE: Tuple[Tuple[str, str], ...] = (
    # Spanish alphabet
    ("a", "⠁"),
    ("b", "⠃"),
    ("c", "⠉"),
    ("d", "⠙"),
    ("e", "⠑"),
    ("f", "⠋"),
    ("g", "⠛"),
    ("h", "⠓"),
    ("i", "⠊"),
    ("j", "⠚"),
    ("k", "⠅"),
    ("l", "⠇"),
    ("m", "⠍"),
    ("n", "⠝"),
    ("ñ", "⠻"),
    ("o", "⠕"),
    ("p", "⠏"),
    ("q", "⠟"),
    ("r", "⠗"),
    ("s", "⠎"),
    ("t", "⠞"),
    ("u", "⠥"),
    ("v", "⠧"),
    ("w", "⠺"),
    ("x", "⠭"),
    ("y", "⠽"),
    ("z", "⠵"),
    # Accented vowels
    ("á", "⠷"),
    ("é", "⠮"),
    ("í", "⠌"),
    ("ó", "⠬"),
    ("ú", "⠾"),
    ("ü", "⠳"),
    # Digits share the a-j cells, the number indicator tells them apart
    ("0", "⠚"),
    ("1", "⠁"),
    ("2", "⠃"),
    ("3", "⠉"),
    ("4", "⠙"),
    ("5", "⠑"),
    ("6", "⠋"),
    ("7", "⠛"),
    ("8", "⠓"),
    ("9", "⠊"),
    # Punctuation
    (" ", SPACE),
    (",", "⠂"),
    (".", "⠄"),
    ("?", "⠢"),
    ("¿", "⠢"),
    ("!", "⠖"),
    ("¡", "⠖"),
    (";", "⠆"),
    (":", "⠒"),
    ("-", "⠤"),
    ("(", "⠐⠣"),
    (")", "⠐⠜"),
    # Arithmetic and other symbols
    ("+", "⠐⠖"),
    ("*", "⠡"),
    ("×", "⠡"),
    ("/", "⠸⠌"),
    ("÷", "⠸⠌"),
    ("=", "⠶"),
    ("<", "⠐⠅"),
    (">", "⠨⠂"),
    ("%", "⠚⠴"),
    ("@", "⠈⠁"),
    ("#", "⠼"),
    ("$", "⠈⠎"),
    ("€", "⠈⠑"),
    ("&", "⠯"),
    ("_", "⠤⠤"),
    ('"', "⠦"),
    ("'", "⠄"),
    ("[", "⠷"),
    ("]", "⠾"),
    ("{", "⠐⠷"),
    ("}", "⠐⠾"),
    ("\\", "⠸⠡"),
    ("`", "⠸⠳"),
    ("~", "⠈⠱"),
    ("^", "⠈⠢"),
    ("°", "⠴"),
)

# Applied in order after the bulk insert; the last entry for a glyph wins.
REVERSE_OVERRIDES: Tuple[Tuple[str, str], ...] = (
    # Letters take the a-j cells back from the digits
    ("⠁", "a"),
    ("⠃", "b"),
    ("⠉", "c"),
    ("⠙", "d"),
    ("⠑", "e"),
    ("⠋", "f"),
    ("⠛", "g"),
    ("⠓", "h"),
    ("⠊", "i"),
    ("⠚", "j"),
    # Accented vowels over brackets and the unprefixed division cell
    ("⠷", "á"),
    ("⠾", "ú"),
    ("⠌", "í"),
    # Shared single cells
    ("⠄", "."),
    ("⠢", "¿"),
    ("⠖", "¡"),
    ("⠡", "×"),
    # Multi-cell glyphs
    ("⠐⠣", "("),
    ("⠐⠜", ")"),
    ("⠐⠖", "+"),
    ("⠸⠌", "/"),
    ("⠐⠅", "<"),
    ("⠨⠂", ">"),
    ("⠚⠴", "%"),
    ("⠈⠁", "@"),
    ("⠈⠎", "$"),
    ("⠈⠑", "€"),
    ("⠤⠤", "_"),
    ("⠐⠷", "{"),
    ("⠐⠾", "}"),
    ("⠸⠡", "\\"),
    ("⠸⠳", "`"),
    ("⠈⠱", "~"),
    ("⠈⠢", "^"),
)


def build_mappings() -> Tuple[Mapping[str, str], Mapping[str, str]]:
    """Build the forward and reverse lookups from the literal tables.

    The reverse lookup is built in two phases: every non-space pair is
    inserted in table order, then REVERSE_OVERRIDES is applied in order.
    Mode indicators are control signals and never decode to a character.
    """
    forward: Dict[str, str] = {}
    for char, glyph in SYMBOL_TABLE:
        forward[char] = glyph

    reverse: Dict[str, str] = {}
    for char, glyph in SYMBOL_TABLE:
        if glyph != SPACE:
            reverse[glyph] = char
    reverse[SPACE] = SPACE

    for glyph, char in REVERSE_OVERRIDES:
        reverse[glyph] = char

    reverse.pop(CAPITAL_INDICATOR, None)
    reverse.pop(NUMBER_INDICATOR, None)

    return MappingProxyType(forward), MappingProxyType(reverse)


class SpanishBrailleTable:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize_mappings()
        return cls._instance

    def _initialize_mappings(self):
        self._text_to_braille, self._braille_to_text = build_mappings()
        self._max_glyph_length = max(len(glyph) for glyph in self._braille_to_text)
        logger.debug(
            "Braille table built: %d characters, %d glyphs",
            len(self._text_to_braille),
            len(self._braille_to_text),
        )

    @property
    def max_glyph_length(self) -> int:
        return self._max_glyph_length

    def glyph_for(self, char: str) -> Optional[str]:
        if not char or len(char) != 1:
            return None
        return self._text_to_braille.get(char)

    def char_for(self, glyph: str) -> Optional[str]:
        if not glyph:
            return None
        return self._braille_to_text.get(glyph)

    def is_encodable_character(self, char: str) -> bool:
        return char in self._text_to_braille

    def is_known_glyph(self, glyph: str) -> bool:
        return glyph in self._braille_to_text

    def get_forward_mappings(self) -> Dict[str, str]:
        return dict(self._text_to_braille)

    def get_reverse_mappings(self) -> Dict[str, str]:
        return dict(self._braille_to_text)
