"""
FastAPI application entry point.

Bunny.net Processor API - Generates chapters and cleaned captions from
transcripts with Gemini, and relays chapter updates to Bunny.net Stream.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.settings import get_settings
from app.routers import processing_router, bunny_router, proxy_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="Bunny.net Processor API",
    description="""
API for turning video transcripts into Bunny.net chapters and captions.

## Features
- Generate chapter markers (topic list + Bunny.net CSV) from a transcript
- Clean caption files into readable SRT
- Push edited chapters to a Bunny.net video

## Credentials
The Gemini key and the Bunny.net library keys stay on the server.
Library keys are resolved from `BUNNY_KEY_<libraryId>`, any `BUNNY_KEY_*`
variable containing the library ID, or `BUNNY_API_KEY`.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS", "PATCH", "DELETE", "POST", "PUT"],
    allow_headers=[
        "X-CSRF-Token",
        "X-Requested-With",
        "Accept",
        "Accept-Version",
        "Content-Length",
        "Content-MD5",
        "Content-Type",
        "Date",
        "X-Api-Version",
    ],
)

# Include routers
app.include_router(processing_router)
app.include_router(bunny_router)
app.include_router(proxy_router)


@app.get("/", tags=["root"])
def root():
    """
    Root endpoint - API health check and info.
    """
    return {
        "name": "Bunny.net Processor API",
        "version": "1.0.0",
        "status": "healthy",
        "docs": "/docs",
    }


@app.get("/health", tags=["root"])
def health_check():
    """
    Health check endpoint for monitoring.
    """
    return {"status": "ok"}
