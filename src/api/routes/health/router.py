"""Liveness (/health) e readiness (/ready).

/ready não chama a Graph API: confere a credencial configurada e se os
descritores de node carregam.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.nodes import NodeDescriptorError, list_node_descriptors
from config.settings import get_base_settings, get_whatsapp_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str
    version: str = SERVICE_VERSION


def _now() -> str:
    return datetime.now(UTC).isoformat()


def _check_credentials() -> list[str]:
    return get_whatsapp_settings().validate()


def _check_descriptors() -> list[str]:
    try:
        if not list_node_descriptors():
            return ["no node descriptors found"]
    except NodeDescriptorError as exc:
        return [str(exc)]
    return []


READINESS_CHECKS = {"whatsapp": _check_credentials, "nodes": _check_descriptors}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=_now(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    checks: dict[str, dict[str, object]] = {}
    for name, check in READINESS_CHECKS.items():
        errors = check()
        checks[name] = {"status": "failed" if errors else "ok", "errors": errors}

    failed = [name for name, result in checks.items() if result["errors"]]
    if failed:
        logger.warning("readiness_check_failed", extra={"failed_checks": failed})

    return JSONResponse(
        content={
            "status": "not_ready" if failed else "ready",
            "checks": checks,
            "timestamp": _now(),
        },
        status_code=503 if failed else 200,
    )
