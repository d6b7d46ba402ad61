from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class ConversionDirection(str, Enum):
    TEXT_TO_BRAILLE = "text-to-braille"
    BRAILLE_TO_TEXT = "braille-to-text"

    @classmethod
    def parse(cls, value: str) -> "ConversionDirection":
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(direction.value for direction in cls)
            raise ValueError(
                f"Unknown conversion direction: {value!r}. Expected one of: {allowed}"
            ) from None


@dataclass(frozen=True)
class ConversionMetadata:
    """Caller details stored next to a conversion; the codec never reads them."""

    device: Optional[str] = None
    client: Optional[str] = None
    origin: Optional[str] = None

    def to_dict(self) -> dict:
        return {"device": self.device, "client": self.client, "origin": self.origin}


@dataclass
class Conversion:
    conversion_id: str
    original: str
    result: str
    direction: ConversionDirection
    processing_time_ms: float
    metadata: ConversionMetadata = field(default_factory=ConversionMetadata)
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if not isinstance(self.direction, ConversionDirection):
            self.direction = ConversionDirection.parse(self.direction)
        if self.processing_time_ms < 0:
            raise ValueError("Processing time must not be negative")

    @property
    def original_length(self) -> int:
        return len(self.original)

    @property
    def result_length(self) -> int:
        return len(self.result)

    def to_dict(self) -> dict:
        return {
            "conversion_id": self.conversion_id,
            "original": self.original,
            "result": self.result,
            "direction": self.direction.value,
            "original_length": self.original_length,
            "result_length": self.result_length,
            "processing_time_ms": self.processing_time_ms,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata.to_dict(),
        }
