# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from time import perf_counter
import logging
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from app.core.config import settings

"""
Conexão assíncrona com o MongoDB via pymongo (API async).


- `create_client()` valida o prefixo da URL e cria `AsyncMongoClient` com pool/timeout.
- `get_database()` resolve o banco (MONGODB_DB > banco da URL > "nest").
- `ping()` faz round-trip e mede latência (usado no health).
"""

log = logging.getLogger("mongo")

DEFAULT_DATABASE = "nest"


def create_client(url: str = settings.MONGODB_URL) -> AsyncMongoClient:
    if not url.startswith(("mongodb://", "mongodb+srv://")):
        raise RuntimeError("MONGODB_URL deve usar o prefixo 'mongodb://' ou 'mongodb+srv://'.")

    client = AsyncMongoClient(
        url,
        maxPoolSize=settings.MONGODB_MAX_POOL_SIZE,
        serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        tz_aware=True,
    )
    log.info("Mongo client criado para %s", url.split("@")[-1])
    return client


def get_database(client: AsyncMongoClient, name: str | None = settings.MONGODB_DB) -> AsyncDatabase:
    if name:
        return client[name]
    return client.get_default_database(DEFAULT_DATABASE)


async def ping(db: AsyncDatabase) -> float:
    """Executa `ping` e retorna a latência em ms."""
    t0 = perf_counter()
    await db.command("ping")
    return round((perf_counter() - t0) * 1000.0, 2)
