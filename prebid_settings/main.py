from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Query, Request

from .admin import health as admin_health
from .config import ServerConfig, get_server_config
from .settings import ApplicationSettings, NotFoundError, SettingsError, build_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    server_config = get_server_config()
    try:
        application_settings = build_settings(server_config)
    except SettingsError:
        logger.error("Failed to load application settings", exc_info=True)
        raise

    app.state.server_config = server_config
    app.state.application_settings = application_settings
    app.state.start_time = datetime.now(timezone.utc)

    yield


app = FastAPI(
    title="Prebid File Settings Server",
    version="1.0.0",
    docs_url="/docs",
    lifespan=lifespan,
)

app.include_router(admin_health.router)


# Dependency helpers ---------------------------------------------------------


def get_server_settings(request: Request) -> ServerConfig:
    return request.app.state.server_config


def get_application_settings(request: Request) -> ApplicationSettings:
    return request.app.state.application_settings


# Routes ---------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root(settings: ServerConfig = Depends(get_server_settings)) -> dict[str, Any]:
    return {
        "service": "prebid-file-settings",
        "version": app.version,
        "settings": {
            "filename": str(settings.settings.filename),
            "stored_requests_dir": str(settings.settings.stored_requests_dir),
        },
    }


@app.get("/settings/accounts/{account_id}", tags=["settings"])
async def get_account(
    account_id: str,
    application_settings: ApplicationSettings = Depends(get_application_settings),
) -> dict[str, Any]:
    try:
        account = await application_settings.get_account_by_id(account_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"id": account.id, "price_granularity": account.price_granularity}


@app.get("/settings/ad-unit-configs/{config_id}", tags=["settings"])
async def get_ad_unit_config(
    config_id: str,
    application_settings: ApplicationSettings = Depends(get_application_settings),
) -> dict[str, str]:
    try:
        config = await application_settings.get_ad_unit_config_by_id(config_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"id": config_id, "config": config}


@app.get("/settings/stored-requests", tags=["settings"])
async def get_stored_requests(
    ids: list[str] = Query([], alias="id"),
    application_settings: ApplicationSettings = Depends(get_application_settings),
) -> dict[str, Any]:
    """
    Resolve stored requests by id.

    Always answers 200: ids that are not found are listed in ``errors`` in
    the order they were requested, alongside every stored request that was.
    """
    result = await application_settings.get_stored_requests_by_id(ids)
    return {
        "stored_requests": dict(result.stored_id_to_content),
        "errors": list(result.errors),
    }
