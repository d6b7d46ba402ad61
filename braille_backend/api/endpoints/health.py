from fastapi import APIRouter
from datetime import datetime
from braille_backend import __version__
from braille_backend.config import get_settings
from braille_backend.infrastructure.mapping.spanish_braille_table import (
    SpanishBrailleTable,
)


router = APIRouter()


@router.get("/health")
async def health_check():
    table = SpanishBrailleTable()
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
        "service": "spanish-braille-converter",
        "api_prefix": get_settings().api_prefix,
        "characters": len(table.get_forward_mappings()),
        "glyphs": len(table.get_reverse_mappings()),
    }
