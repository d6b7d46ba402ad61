from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List, Optional
from braille_backend.application.services.conversion_service import ConversionService
from braille_backend.application.services.conversion_validator import (
    ConversionValidator,
)
from braille_backend.config import get_settings
from braille_backend.domain.entities.braille_cell import BrailleCell, cells_for
from braille_backend.domain.entities.conversion import (
    ConversionDirection,
    ConversionMetadata,
)
from braille_backend.infrastructure.mapping.spanish_braille_table import (
    CAPITAL_INDICATOR,
    NUMBER_INDICATOR,
    SpanishBrailleTable,
)


router = APIRouter()


class ConversionRequest(BaseModel):
    text: str
    direction: ConversionDirection
    device: Optional[str] = None
    client: Optional[str] = None
    origin: Optional[str] = None


class ConversionResponse(BaseModel):
    conversion_id: str
    original: str
    result: str
    direction: ConversionDirection
    original_length: int
    result_length: int
    processing_time_ms: float
    timestamp: str


class ValidationRequest(BaseModel):
    text: str
    direction: ConversionDirection = ConversionDirection.TEXT_TO_BRAILLE


class ValidationResponse(BaseModel):
    direction: ConversionDirection
    is_valid: bool
    error: Optional[str] = None
    unsupported_characters: List[str]


class CellResponse(BaseModel):
    dots: str
    symbol: str


class AlphabetEntry(BaseModel):
    character: str
    glyph: str
    dots: List[str]


class AlphabetResponse(BaseModel):
    capital_indicator: str
    number_indicator: str
    entries: List[AlphabetEntry]


def _check_length(text: str) -> None:
    max_length = get_settings().max_text_length
    if len(text) > max_length:
        raise HTTPException(
            status_code=413,
            detail=f"Text too long: {len(text)} characters (limit {max_length})",
        )


@router.post("/convert", response_model=ConversionResponse)
async def convert(request: ConversionRequest):
    # Only the HTTP layer rejects blank input; the codec accepts anything
    if not request.text or not request.text.strip():
        raise HTTPException(status_code=400, detail="Text is required")
    _check_length(request.text)

    try:
        conversion_service = ConversionService()
        result = conversion_service.convert(
            request.text,
            request.direction,
            ConversionMetadata(
                device=request.device, client=request.client, origin=request.origin
            ),
        )

        return ConversionResponse(
            conversion_id=result.conversion_id,
            original=result.original,
            result=result.result,
            direction=result.direction,
            original_length=result.original_length,
            result_length=result.result_length,
            processing_time_ms=result.processing_time_ms,
            timestamp=result.timestamp.isoformat(),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Error converting text: {str(e)}")


@router.post("/validate", response_model=ValidationResponse)
async def validate(request: ValidationRequest):
    _check_length(request.text)

    validator = ConversionValidator()
    if request.direction is ConversionDirection.BRAILLE_TO_TEXT:
        result = validator.validate_braille(request.text)
    else:
        result = validator.validate_text(request.text)

    return ValidationResponse(
        direction=request.direction,
        is_valid=result.is_valid,
        error=result.error,
        unsupported_characters=result.unsupported,
    )


@router.get("/cells/{dots}", response_model=CellResponse)
async def get_cell(dots: str):
    try:
        cell = BrailleCell.from_dots(dots)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CellResponse(dots=cell.dots, symbol=cell.symbol)


@router.get("/alphabet", response_model=AlphabetResponse)
async def get_alphabet():
    table = SpanishBrailleTable()

    entries = []
    for character, glyph in table.get_forward_mappings().items():
        try:
            dots = [cell.dots for cell in cells_for(glyph)]
        except ValueError:
            # Space is stored as a plain space, not a braille cell
            dots = []
        entries.append(AlphabetEntry(character=character, glyph=glyph, dots=dots))

    return AlphabetResponse(
        capital_indicator=CAPITAL_INDICATOR,
        number_indicator=NUMBER_INDICATOR,
        entries=entries,
    )
