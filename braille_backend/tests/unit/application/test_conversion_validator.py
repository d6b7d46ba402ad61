import pytest
from braille_backend.application.services.conversion_validator import (
    ConversionValidator,
)


class TestConversionValidator:
    def test_can_encode_empty_is_false(self):
        assert ConversionValidator().can_encode("") is False

    def test_can_encode_plain_text(self):
        validator = ConversionValidator()

        assert validator.can_encode("abc") is True
        assert validator.can_encode("abc#") is True
        assert validator.can_encode("Árbol de 3 metros, ¿verdad?") is True

    def test_can_encode_unsupported(self):
        validator = ConversionValidator()

        assert validator.can_encode("abc§") is False
        assert validator.can_encode("日本") is False

    def test_find_unsupported_characters_unique_in_order(self):
        validator = ConversionValidator()

        assert validator.find_unsupported_characters("a§b|c§") == ["§", "|"]
        assert validator.find_unsupported_characters("hola mundo") == []

    def test_validate_text_valid(self):
        result = ConversionValidator().validate_text("Hola")

        assert result.is_valid is True
        assert result.error is None
        assert result.unsupported == []

    @pytest.mark.parametrize("text", ["", "   "])
    def test_validate_text_empty(self, text):
        result = ConversionValidator().validate_text(text)

        assert result.is_valid is False
        assert result.error == "Text must not be empty"

    def test_validate_text_unsupported(self):
        result = ConversionValidator().validate_text("a§b|")

        assert result.is_valid is False
        assert "Unsupported characters: §, |" == result.error
        assert result.unsupported == ["§", "|"]

    def test_is_valid_braille(self):
        validator = ConversionValidator()

        assert validator.is_valid_braille("⠓⠕⠇⠁") is True
        assert validator.is_valid_braille("⠨⠓⠕⠇⠁ ⠼⠁⠃") is True
        assert validator.is_valid_braille("⠐⠣⠁⠐⠜") is True
        assert validator.is_valid_braille("⠓a") is False
        assert validator.is_valid_braille("") is False

    def test_lone_prefix_cell_is_not_valid_braille(self):
        validator = ConversionValidator()

        assert validator.find_unknown_braille_units("⠐") == ["⠐"]
        assert validator.find_unknown_braille_units("⠐⠣") == []

    def test_find_unknown_braille_units_unique_in_order(self):
        validator = ConversionValidator()

        assert validator.find_unknown_braille_units("⠁x⠿⠃x") == ["x", "⠿"]

    def test_validate_braille_unknown_units(self):
        result = ConversionValidator().validate_braille("⠓a")

        assert result.is_valid is False
        assert result.error == "Unknown braille units: a"
        assert result.unsupported == ["a"]

    @pytest.mark.parametrize("braille", ["", "   "])
    def test_validate_braille_empty(self, braille):
        result = ConversionValidator().validate_braille(braille)

        assert result.is_valid is False
        assert result.error == "Braille must not be empty"
