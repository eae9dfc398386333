# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Any, Dict, List
import logging
from app.db.collection import RecordCollection
from app.schemas.owner import OwnerCreateIn
from app.services.exceptions import RecordNotFoundError

"""
Serviço de donos (Owner). A referência `Cat.owner` é resolvida aqui, por chamada explícita.
"""

log = logging.getLogger("owners")


class OwnerService:
    def __init__(self, collection: RecordCollection):
        self._owners = collection

    @property
    def collection(self) -> RecordCollection:
        return self._owners

    async def create(self, payload: OwnerCreateIn) -> Dict[str, Any]:
        owner = await self._owners.insert(payload.model_dump(exclude_none=True))
        log.info("Owner criado id=%s", owner["id"])
        return owner

    async def find_all(self) -> List[Dict[str, Any]]:
        return await self._owners.list_all()

    async def find_one(self, owner_id: str) -> Dict[str, Any]:
        owner = await self._owners.find_by_id(owner_id)
        if owner is None:
            log.info("Owner não encontrado id=%s", owner_id)
            raise RecordNotFoundError(self._owners.schema.name, owner_id)
        return owner
