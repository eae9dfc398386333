# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from fastapi import APIRouter, Depends, HTTPException
from pymongo.asynchronous.database import AsyncDatabase
from app.api.deps import get_db
from app.db.mongo import ping
from app.db.schema import CAT_SCHEMA, OWNER_SCHEMA

"""
Diagnóstico do banco de dados.


- `GET /db` verifica conectividade (ping) e mede latência.
- Retorna banco atual e contagem de gatos/donos; trata erros com 503.
"""

router = APIRouter(tags=["Health"])

@router.get("/db")
async def health_db(db: AsyncDatabase = Depends(get_db)):
    """
    Verifica conexão com o banco e retorna alguns metadados úteis.
    """
    try:
        latency_ms = await ping(db)
        cat_count = await db[CAT_SCHEMA.collection_name].count_documents({})
        owner_count = await db[OWNER_SCHEMA.collection_name].count_documents({})

        return {
            "db": "ok",
            "latency_ms": latency_ms,
            "current_database": db.name,
            "cat_count": cat_count,
            "owner_count": owner_count,
        }
    except Exception as e:
        raise HTTPException(
            status_code=503,
            detail={"db": "error", "type": e.__class__.__name__, "message": str(e)},
        )
