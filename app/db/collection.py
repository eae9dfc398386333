# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Protocol
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from app.db.schema import RecordSchema

"""
Handle de coleção (contrato de armazenamento) + implementação MongoDB.


- `RecordCollection`: contrato usado pelos services (insert/list_all/find/update/delete).
- `MongoCollection`: implementação sobre `AsyncCollection` do pymongo.
- Converte `_id`/referências ObjectId <-> str; id malformado = não encontrado.
- Erros do driver (`pymongo.errors.*`) sobem sem tradução.
"""

Record = Dict[str, Any]


class RecordCollection(Protocol):
    schema: RecordSchema

    async def insert(self, record: Mapping[str, Any]) -> Record: ...

    async def list_all(self) -> List[Record]: ...

    async def find_by_id(self, record_id: str) -> Optional[Record]: ...

    async def update_by_id(self, record_id: str, fields: Mapping[str, Any]) -> Optional[Record]: ...

    async def delete_by_id(self, record_id: str) -> Optional[Record]: ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _object_id(value: Any) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


class MongoCollection:
    """Coleção MongoDB ligada a um `RecordSchema`."""

    def __init__(self, collection: AsyncCollection, schema: RecordSchema):
        self._collection = collection
        self.schema = schema

    @property
    def name(self) -> str:
        return self._collection.name

    # Conversões
    def _to_mongo(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        doc = self.schema.pick(data)
        for f in self.schema.ref_fields:
            if f.name not in doc:
                continue
            value = doc[f.name]
            if f.many:
                doc[f.name] = [_object_id(v) or v for v in value]
            else:
                doc[f.name] = _object_id(value) or value
        return doc

    def _from_mongo(self, doc: Mapping[str, Any]) -> Record:
        out: Record = {"id": str(doc["_id"])}
        out.update((k, v) for k, v in doc.items() if k != "_id")
        for f in self.schema.ref_fields:
            value = out.get(f.name)
            if isinstance(value, ObjectId):
                out[f.name] = str(value)
            elif f.many and isinstance(value, list):
                out[f.name] = [str(v) if isinstance(v, ObjectId) else v for v in value]
        return out

    # Operações
    async def insert(self, record: Mapping[str, Any]) -> Record:
        now = _utcnow()
        doc = self._to_mongo(record)
        doc["created_at"] = now
        doc["updated_at"] = now
        result = await self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._from_mongo(doc)

    async def list_all(self) -> List[Record]:
        docs = await self._collection.find({}).to_list(None)
        return [self._from_mongo(d) for d in docs]

    async def find_by_id(self, record_id: str) -> Optional[Record]:
        oid = _object_id(record_id)
        if oid is None:
            return None
        doc = await self._collection.find_one({"_id": oid})
        return self._from_mongo(doc) if doc else None

    async def update_by_id(self, record_id: str, fields: Mapping[str, Any]) -> Optional[Record]:
        oid = _object_id(record_id)
        if oid is None:
            return None
        changes = self._to_mongo(fields)
        changes["updated_at"] = _utcnow()
        doc = await self._collection.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        return self._from_mongo(doc) if doc else None

    async def delete_by_id(self, record_id: str) -> Optional[Record]:
        oid = _object_id(record_id)
        if oid is None:
            return None
        doc = await self._collection.find_one_and_delete({"_id": oid})
        return self._from_mongo(doc) if doc else None
