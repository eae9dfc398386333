# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from contextlib import asynccontextmanager
import json
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.logging import setup_logging
from app.api.v1.router import router_v1
from app.db.collection import MongoCollection
from app.db.mongo import create_client, get_database
from app.db.schema import CAT_SCHEMA, OWNER_SCHEMA
from app.services.cat_service import CatService
from app.services.exceptions import RecordNotFoundError
from app.services.owner_service import OwnerService

"""
Cats API – FastAPI entrypoint.

- Cria a instância principal do FastAPI (title/version) e monta /api/v1.
- Lifespan: conecta no MongoDB e cria os services uma única vez (`app.state`).
- Configura CORS conforme settings (origens, headers, métodos).
- Expõe / e /health para diagnóstico rápido do ambiente.
"""

setup_logging(settings.LOG_LEVEL)
log = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    client = create_client()
    db = get_database(client)
    app.state.db = db
    app.state.cat_service = CatService(MongoCollection(db[CAT_SCHEMA.collection_name], CAT_SCHEMA))
    app.state.owner_service = OwnerService(MongoCollection(db[OWNER_SCHEMA.collection_name], OWNER_SCHEMA))
    log.info("Services prontos (db=%s)", db.name)
    try:
        yield
    finally:
        await client.close()


start_server = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

start_server.include_router(router_v1, prefix="/api/v1")


@start_server.exception_handler(RecordNotFoundError)
async def record_not_found_handler(request: Request, exc: RecordNotFoundError):
    return JSONResponse(status_code=404, content={"detail": f"{exc.record_type} not found"})


def _normalize_cors(origins_setting):
    """
    Aceita: list[str], string JSON (ex: '["http://..."]') ou CSV (ex: 'http://...,http://...').
    Retorna sempre uma lista de strings (sem espaços) ou lista vazia.
    """
    if not origins_setting:
        return []
    if isinstance(origins_setting, list):
        return [o.strip() for o in origins_setting if o and o.strip()]
    if isinstance(origins_setting, str):
        s = origins_setting.strip()
        try:
            parsed = json.loads(s)
            if isinstance(parsed, list):
                return [o.strip() for o in parsed if o and o.strip()]
        except json.JSONDecodeError:
            pass
        return [o.strip() for o in s.split(",") if o and o.strip()]
    return []

origins = _normalize_cors(settings.CORS_ORIGINS)

if not origins:
    origins = ["http://localhost:3000", "http://127.0.0.1:3000"]

start_server.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

log.info("CORS habilitado para: %s", origins)

@start_server.get("/", tags=["Health"])
def hello():
    return "Hello World!"

@start_server.get("/health", tags=["Health"])
def health():
    return {"status": "ok", "env": settings.APP_ENV}
