"""FastAPI binding for the contact intake service."""

import json
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from portfolio_contact import __version__
from portfolio_contact.config import Settings
from portfolio_contact.intake.service import IntakeService
from portfolio_contact.storage.store import StorageCorruptError

logger = logging.getLogger(__name__)

RESUME_DOWNLOAD_NAME = "AI_Resume.pdf"


def create_app(service: IntakeService, settings: Settings | None = None) -> FastAPI:
    """Create the HTTP application around an intake service.

    Args:
        service: Intake service handling submissions.
        settings: Deployment settings. Defaults are used if omitted.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(title="Portfolio Contact API", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/send-email")
    async def send_email(request: Request) -> JSONResponse:
        """Accept a contact form submission."""
        try:
            payload: Any = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        result = await run_in_threadpool(service.submit, payload)
        return JSONResponse(
            status_code=result.status_code, content=result.to_response()
        )

    @app.get("/api/submissions")
    def list_submissions() -> JSONResponse:
        """List stored submissions for inspection."""
        try:
            submissions = service.list()
        except StorageCorruptError as e:
            logger.error("Cannot list submissions: %s", e)
            return JSONResponse(
                status_code=500,
                content={"success": False, "message": "Failed to load submissions."},
            )
        return JSONResponse(
            content={"items": [s.model_dump(mode="json") for s in submissions]}
        )

    @app.get("/api/generate-resume", response_model=None)
    def generate_resume() -> FileResponse | PlainTextResponse:
        """Download the static resume PDF."""
        if not settings.resume_path.is_file():
            logger.error("Resume file %s not found", settings.resume_path)
            return PlainTextResponse("Failed to download resume", status_code=500)
        return FileResponse(
            settings.resume_path,
            media_type="application/pdf",
            filename=RESUME_DOWNLOAD_NAME,
        )

    return app
