import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import models  # noqa: F401  registers tables on Base.metadata
from .config import AUTO_CREATE_TABLES, CORS_ORIGINS
from .db import Base, engine
from .errors import register_exception_handlers
from .logging_config import configure as configure_logging
from .middleware import RequestLoggingMiddleware
from .routes import api_router

configure_logging()
logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Auth", "description": "Admin login, session and password management."},
    {"name": "Staff accounts", "description": "Staff login accounts (admin only)."},
    {"name": "Services", "description": "Service catalogue."},
    {"name": "Packages", "description": "Bundled service packages."},
    {"name": "Staff", "description": "Public staff profiles and QR verification."},
    {"name": "Gallery", "description": "Before/after work gallery."},
    {"name": "Testimonials", "description": "Customer testimonials."},
    {"name": "Bookings", "description": "Public booking submission and admin booking management."},
    {"name": "Contact", "description": "Business contact details."},
    {"name": "Branding", "description": "Brand name and logo."},
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    if AUTO_CREATE_TABLES:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("database tables verified")
    yield
    await engine.dispose()


app = FastAPI(title="Quickfixx API", openapi_tags=OPENAPI_TAGS, lifespan=lifespan)

app.add_middleware(RequestLoggingMiddleware)
if CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)
app.include_router(api_router)


@app.get("/health")
async def health():
    return {"status": "ok", "service": "quickfixx-api"}
