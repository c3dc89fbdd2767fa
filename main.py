#!/usr/bin/env python3

"""
Main application entry point for the Receitas API.

Architecture: FastAPI application over an async SQLAlchemy database.
Key Features: Lifecycle management, database health checks, domain error mapping, CORS configuration.
"""

import errno
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from receitas.api.auth import router as auth_router
from receitas.api.http import router as http_router
from receitas.api.recipes import router as recipes_router
from receitas.config import settings
from receitas.db import check_db_connection, close_db, init_db
from receitas.exceptions import ReceitasError, Unauthorized, ValidationFailed
from receitas.utils.logger import setup_logger

logger = setup_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup...")
    try:
        logger.info("Initializing database...")
        await init_db()
        logger.info("Database initialization complete.")

        logger.info("Checking database connectivity...")
        if await check_db_connection():
            logger.info("Database connectivity confirmed.")
        else:
            logger.critical("Database connectivity check failed.")
            raise SystemExit("Database connection failed.")

    except Exception as e:
        logger.critical(f"Startup error: {e}")
        raise SystemExit(f"Startup failed: {e}") from e

    logger.info("Receitas API startup successful.")

    yield

    logger.info("Receitas API shutdown...")
    await close_db()
    logger.info("Shutdown complete.")


def _format_validation_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    if location:
        return f'"{location}" {error.get("msg", "is invalid")}'
    return error.get("msg", "Invalid request body")


def create_app():
    app = FastAPI(title="Receitas API", lifespan=lifespan)

    @app.exception_handler(ValidationFailed)
    async def validation_failed_handler(request: Request, exc: ValidationFailed):
        return JSONResponse(status_code=exc.status_code, content=exc.messages)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ):
        messages = [_format_validation_error(error) for error in exc.errors()]
        return JSONResponse(
            status_code=ValidationFailed.status_code, content=messages
        )

    @app.exception_handler(Unauthorized)
    async def unauthorized_handler(request: Request, exc: Unauthorized):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(ReceitasError)
    async def receitas_error_handler(request: Request, exc: ReceitasError):
        if exc.status_code >= 500:
            logger.error(
                f"{request.method} {request.url.path} failed: {exc.message}"
            )
        return JSONResponse(
            status_code=exc.status_code, content={"detail": exc.message}
        )

    @app.exception_handler(OSError)
    async def oserror_exception_handler(request: Request, exc: OSError):
        logger.error(f"OSError caught: {exc}, errno: {exc.errno}")
        if exc.errno in [errno.ETIMEDOUT, errno.ECONNREFUSED]:
            logger.error(
                f"Returning 503 due to DB connection issue: {settings.db_unavailable_hint}"
            )
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"detail": settings.db_unavailable_hint},
            )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": f"An unexpected OS error occurred: {exc}"},
        )

    app.include_router(http_router)
    app.include_router(auth_router)
    app.include_router(recipes_router)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    return app


app = create_app()


def main():
    port = int(settings.server_port)
    host = settings.server_host

    logger.info(f"Starting Receitas API server on {host}:{port}")

    try:
        uvicorn.run(app, host=host, port=port, workers=settings.server_workers)
    except Exception as e:
        logger.error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
