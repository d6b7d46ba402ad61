from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from braille_backend import __version__
from braille_backend.api.endpoints import braille, health
from braille_backend.config import configure_logging, get_settings


settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title="Spanish Braille Converter API",
    description="Converts Spanish text to six-dot Unicode Braille and back",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
app.include_router(
    braille.router, prefix=f"{settings.api_prefix}/braille", tags=["braille"]
)


@app.get("/")
async def root():
    return {
        "message": "Spanish Braille Converter API",
        "docs": "/docs",
        "health": f"{settings.api_prefix}/health",
    }
