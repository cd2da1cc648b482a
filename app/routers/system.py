"""System-level routes for diagnostics."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..database import get_session

router = APIRouter(tags=["system"])


class ApiInfoResponse(BaseModel):
    service: str
    version: str


class HealthResponse(BaseModel):
    status: str
    database: bool


@router.get("/api", response_model=ApiInfoResponse)
def api_info(settings: Settings = Depends(get_settings)) -> ApiInfoResponse:
    return ApiInfoResponse(service=settings.app_name, version=settings.api_version)


@router.get("/health", response_model=HealthResponse)
def healthcheck(db: Session = Depends(get_session)) -> HealthResponse:
    """Report whether the database answers a trivial query."""

    db.execute(text("SELECT 1"))
    return HealthResponse(status="ok", database=True)


__all__ = ["router"]
