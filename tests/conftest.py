from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional
import httpx
import pytest
from bson import ObjectId
from app.api.deps import get_cat_service, get_owner_service
from app.db.schema import CAT_SCHEMA, OWNER_SCHEMA, RecordSchema
from app.main import start_server
from app.services.cat_service import CatService
from app.services.owner_service import OwnerService


class InMemoryCollection:
    """Coleção em memória que segue o contrato `RecordCollection`."""

    def __init__(self, schema: RecordSchema):
        self.schema = schema
        self.records: Dict[str, Dict[str, Any]] = {}

    async def insert(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        now = datetime.now(timezone.utc)
        stored = {"id": str(ObjectId()), **self.schema.pick(record), "created_at": now, "updated_at": now}
        self.records[stored["id"]] = stored
        return dict(stored)

    async def list_all(self) -> List[Dict[str, Any]]:
        return [dict(r) for r in self.records.values()]

    async def find_by_id(self, record_id: str) -> Optional[Dict[str, Any]]:
        found = self.records.get(record_id)
        return dict(found) if found else None

    async def update_by_id(self, record_id: str, fields: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        found = self.records.get(record_id)
        if found is None:
            return None
        found.update(self.schema.pick(fields))
        found["updated_at"] = datetime.now(timezone.utc)
        return dict(found)

    async def delete_by_id(self, record_id: str) -> Optional[Dict[str, Any]]:
        found = self.records.pop(record_id, None)
        return dict(found) if found else None


@pytest.fixture
def cat_collection() -> InMemoryCollection:
    return InMemoryCollection(CAT_SCHEMA)


@pytest.fixture
def owner_collection() -> InMemoryCollection:
    return InMemoryCollection(OWNER_SCHEMA)


@pytest.fixture
def cat_service(cat_collection) -> CatService:
    return CatService(cat_collection)


@pytest.fixture
def owner_service(owner_collection) -> OwnerService:
    return OwnerService(owner_collection)


@pytest.fixture
async def client(cat_service, owner_service):
    start_server.dependency_overrides[get_cat_service] = lambda: cat_service
    start_server.dependency_overrides[get_owner_service] = lambda: owner_service
    transport = httpx.ASGITransport(app=start_server)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    start_server.dependency_overrides.clear()
