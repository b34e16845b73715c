import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import PLACEHOLDER_KEYS, get_app_url, get_cors_origins, is_configured, is_debug
from .errors import register_error_handlers
from .routes.document_analysis import router as document_analysis_router
from .routes.frame import router as frame_router
from .routes.legal import router as legal_router
from .routes.og import router as og_router
from .routes.payments import router as payments_router
from .routes.sessions import router as sessions_router
from .routes.templates import router as templates_router
from .routes.user import router as user_router
from .services.session_store import session_store

logging.basicConfig(
    level=logging.DEBUG if is_debug() else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

VERSION = "0.1.0"


def _status(key: str) -> str:
    return "Configured" if is_configured(key) else "Not set"


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup
    print("Starting LegalEase Frame API")
    print(f"   App URL:     {get_app_url()}")
    print(f"   OpenAI Key:  {_status('OPENAI_API_KEY')}")
    for key in PLACEHOLDER_KEYS:
        print(f"   {key}: {_status(key)} (unused)")
    print("   Ready to answer legal questions!")

    yield

    session_store.clear()
    print("Shutting down LegalEase Frame API")


app = FastAPI(
    title="LegalEase Frame API",
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(legal_router)
app.include_router(document_analysis_router)
app.include_router(templates_router)
app.include_router(sessions_router)
app.include_router(payments_router)
app.include_router(user_router)
app.include_router(frame_router)
app.include_router(og_router)


@app.get(
    "/",
    summary="API Root",
    description="Welcome endpoint with API information",
    tags=["General"]
)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "LegalEase Frame",
        "version": VERSION,
        "description": "Plain-language legal information, templates and document analysis",
        "docs": "/docs",
        "endpoints": {
            "legal_advice": "POST /api/legal-advice",
            "advice": "POST|GET /api/advice",
            "document_analysis": "POST|GET /api/document-analysis",
            "templates": "POST|GET|PUT /api/templates",
            "sessions": "POST|GET|PUT|DELETE /api/sessions",
            "payments": "POST|GET /api/payments",
            "payment_intents": "POST|GET|PUT /api/payment",
            "user": "POST|GET|PUT /api/user",
            "frame": "POST|GET /api/frame",
            "images": "GET /api/og/{welcome,query,topics,advice,error,payment,templates}",
            "health": "GET /health",
        },
    }


@app.get(
    "/health",
    summary="Global Health Check",
    description="Check if the API server is running",
    tags=["General"]
)
async def health():
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "service": "legalease-frame",
        "version": VERSION,
        "aiConfigured": is_configured("OPENAI_API_KEY"),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "legalease.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=is_debug(),
    )
