"""Entry point for the Listings service."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import router as v1_router
from app.core.config import settings
from app.core.database import verify_database_connection
from app.core.error_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(_: FastAPI):
    verify_database_connection()
    yield


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

register_exception_handlers(app)

app.include_router(
    v1_router,
    prefix=settings.API_PREFIX,
)


__all__ = ["app"]
