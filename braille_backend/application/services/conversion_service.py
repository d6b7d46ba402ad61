import logging
import time
import uuid
from typing import Optional, Union

from braille_backend.application.services.braille_decoder import BrailleDecoder
from braille_backend.application.services.braille_encoder import BrailleEncoder
from braille_backend.domain.entities.conversion import (
    Conversion,
    ConversionDirection,
    ConversionMetadata,
)

logger = logging.getLogger(__name__)


class ConversionService:
    def __init__(self):
        self.encoder = BrailleEncoder()
        self.decoder = BrailleDecoder()

    def convert(
        self,
        text: str,
        direction: Union[ConversionDirection, str],
        metadata: Optional[ConversionMetadata] = None,
    ) -> Conversion:
        """Run one conversion and wrap it with its timing and caller metadata."""
        if not isinstance(direction, ConversionDirection):
            direction = ConversionDirection.parse(direction)

        conversion_id = f"conv_{uuid.uuid4().hex[:8]}"
        start_time = time.perf_counter()

        if direction is ConversionDirection.TEXT_TO_BRAILLE:
            result = self.encoder.encode(text)
        else:
            result = self.decoder.decode(text)

        elapsed_ms = (time.perf_counter() - start_time) * 1000

        conversion = Conversion(
            conversion_id=conversion_id,
            original=text,
            result=result,
            direction=direction,
            processing_time_ms=elapsed_ms,
            metadata=metadata or ConversionMetadata(),
        )
        logger.info(
            "Conversion %s (%s): %d -> %d chars in %.3f ms",
            conversion_id,
            direction.value,
            conversion.original_length,
            conversion.result_length,
            elapsed_ms,
        )
        return conversion
