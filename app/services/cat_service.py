# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any, Dict, List
import logging
from app.db.collection import RecordCollection
from app.schemas.cat import CatCreateIn, CatUpdateIn
from app.services.exceptions import RecordNotFoundError

"""
Serviço de acesso aos registros de gatos.


- Recebe o handle da coleção pronto (conectado) na construção; não gerencia conexão.
- `create`/`find_all`/`find_one`/`update`/`remove`: uma ida ao storage por chamada.
- Erros do storage sobem sem tradução; id inexistente -> `RecordNotFoundError`.
"""

log = logging.getLogger("cats")


class CatService:
    def __init__(self, collection: RecordCollection):
        self._cats = collection

    @property
    def collection(self) -> RecordCollection:
        return self._cats

    @property
    def record_type(self) -> str:
        return self._cats.schema.name

    async def create(self, payload: CatCreateIn) -> Dict[str, Any]:
        cat = await self._cats.insert(payload.model_dump(exclude_none=True))
        log.info("Cat criado id=%s name=%s", cat["id"], cat.get("name"))
        return cat

    async def find_all(self) -> List[Dict[str, Any]]:
        return await self._cats.list_all()

    async def find_one(self, cat_id: str) -> Dict[str, Any]:
        cat = await self._cats.find_by_id(cat_id)
        if cat is None:
            log.info("Cat não encontrado id=%s", cat_id)
            raise RecordNotFoundError(self.record_type, cat_id)
        return cat

    async def update(self, cat_id: str, payload: CatUpdateIn) -> Dict[str, Any]:
        """
        Update parcial: só os campos enviados explicitamente.
        Sem campos -> retorna o registro atual.
        """
        fields = payload.model_dump(exclude_unset=True, exclude_none=True)
        if not fields:
            return await self.find_one(cat_id)

        cat = await self._cats.update_by_id(cat_id, fields)
        if cat is None:
            log.info("Cat não encontrado para update id=%s", cat_id)
            raise RecordNotFoundError(self.record_type, cat_id)
        log.info("Cat atualizado id=%s campos=%s", cat_id, sorted(fields))
        return cat

    async def remove(self, cat_id: str) -> Dict[str, Any]:
        cat = await self._cats.delete_by_id(cat_id)
        if cat is None:
            log.info("Cat não encontrado para remoção id=%s", cat_id)
            raise RecordNotFoundError(self.record_type, cat_id)
        log.info("Cat removido id=%s", cat_id)
        return cat

    # Mensagens das ações (texto fixo, sem acesso ao storage)
    @staticmethod
    def describe_find_one(cat_id: Any) -> str:
        return f"This action returns a #{cat_id} cat"

    @staticmethod
    def describe_update(cat_id: Any) -> str:
        return f"This action updates a #{cat_id} cat"

    @staticmethod
    def describe_remove(cat_id: Any) -> str:
        return f"This action removes a #{cat_id} cat"
