from unittest.mock import AsyncMock, MagicMock
import pytest
from app.db.mongo import create_client, get_database, ping


def test_create_client_rejects_non_mongo_url():
    with pytest.raises(RuntimeError):
        create_client("postgresql+asyncpg://localhost/nest")


async def test_get_database_resolution():
    client = create_client("mongodb://localhost:27017/catsdb")
    try:
        assert get_database(client, None).name == "catsdb"
        assert get_database(client, "other").name == "other"
    finally:
        await client.close()

    client = create_client("mongodb://localhost:27017")
    try:
        assert get_database(client, None).name == "nest"
    finally:
        await client.close()


async def test_ping_returns_latency():
    db = MagicMock()
    db.command = AsyncMock(return_value={"ok": 1.0})

    latency = await ping(db)

    assert latency >= 0
    db.command.assert_awaited_once_with("ping")
