import pytest
from datetime import datetime
from braille_backend.domain.entities.conversion import (
    Conversion,
    ConversionDirection,
    ConversionMetadata,
)


class TestConversionDirection:
    def test_parse_valid(self):
        assert ConversionDirection.parse("text-to-braille") is ConversionDirection.TEXT_TO_BRAILLE
        assert ConversionDirection.parse("braille-to-text") is ConversionDirection.BRAILLE_TO_TEXT

    def test_parse_invalid(self):
        with pytest.raises(ValueError, match="Unknown conversion direction"):
            ConversionDirection.parse("texto-a-braille")


class TestConversion:
    def test_create_conversion(self):
        conversion = Conversion(
            conversion_id="conv_123",
            original="Hola",
            result="⠨⠓⠕⠇⠁",
            direction=ConversionDirection.TEXT_TO_BRAILLE,
            processing_time_ms=0.42,
        )

        assert conversion.original_length == 4
        assert conversion.result_length == 5
        assert conversion.metadata == ConversionMetadata()
        assert isinstance(conversion.timestamp, datetime)

    def test_direction_from_string(self):
        conversion = Conversion("conv_1", "⠁", "a", "braille-to-text", 0.1)
        assert conversion.direction is ConversionDirection.BRAILLE_TO_TEXT

    def test_negative_processing_time(self):
        with pytest.raises(ValueError, match="Processing time must not be negative"):
            Conversion("conv_1", "a", "⠁", ConversionDirection.TEXT_TO_BRAILLE, -1.0)

    def test_conversion_to_dict(self):
        metadata = ConversionMetadata(device="desktop", client="chrome")
        conversion = Conversion(
            "conv_1", "a", "⠁", ConversionDirection.TEXT_TO_BRAILLE, 0.25, metadata
        )

        result_dict = conversion.to_dict()

        assert result_dict["conversion_id"] == "conv_1"
        assert result_dict["direction"] == "text-to-braille"
        assert result_dict["original_length"] == 1
        assert result_dict["result_length"] == 1
        assert result_dict["processing_time_ms"] == 0.25
        assert result_dict["metadata"] == {
            "device": "desktop",
            "client": "chrome",
            "origin": None,
        }
        assert "timestamp" in result_dict
