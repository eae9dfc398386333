import logging
import pytest
from pymongo.errors import ServerSelectionTimeoutError
from app.schemas.cat import CatCreateIn, CatUpdateIn
from app.services.cat_service import CatService
from app.services.exceptions import RecordNotFoundError


async def test_create_returns_record_with_generated_id(cat_service):
    cat = await cat_service.create(CatCreateIn(name="Tom", age=3, breed="Tabby"))

    assert cat["id"]
    assert (cat["name"], cat["age"], cat["breed"]) == ("Tom", 3, "Tabby")
    assert cat["created_at"] is not None


async def test_find_all_on_empty_collection_is_empty(cat_service):
    assert await cat_service.find_all() == []


async def test_created_records_are_listed(cat_service):
    tom = await cat_service.create(CatCreateIn(name="Tom", age=3, breed="Tabby"))
    kit = await cat_service.create(CatCreateIn(name="Kit", age=1, breed="Siamese", tags=["indoor"]))

    listed = await cat_service.find_all()

    assert {c["id"] for c in listed} == {tom["id"], kit["id"]}


async def test_find_one_returns_record(cat_service):
    tom = await cat_service.create(CatCreateIn(name="Tom", age=3, breed="Tabby"))

    found = await cat_service.find_one(tom["id"])

    assert found["name"] == "Tom"


async def test_find_one_unknown_id_raises_not_found(cat_service):
    with pytest.raises(RecordNotFoundError) as exc:
        await cat_service.find_one("5")
    assert exc.value.record_type == "Cat"
    assert exc.value.record_id == "5"


async def test_update_applies_only_sent_fields(cat_service):
    tom = await cat_service.create(CatCreateIn(name="Tom", age=3, breed="Tabby"))

    updated = await cat_service.update(tom["id"], CatUpdateIn(age=4))

    assert updated["age"] == 4
    assert updated["name"] == "Tom"
    assert updated["breed"] == "Tabby"


async def test_update_without_fields_returns_current_record(cat_service):
    tom = await cat_service.create(CatCreateIn(name="Tom", age=3, breed="Tabby"))

    assert (await cat_service.update(tom["id"], CatUpdateIn()))["age"] == 3


async def test_update_unknown_id_raises_not_found(cat_service):
    with pytest.raises(RecordNotFoundError):
        await cat_service.update("0" * 24, CatUpdateIn(name="Ghost"))


async def test_remove_deletes_record(cat_service):
    tom = await cat_service.create(CatCreateIn(name="Tom", age=3, breed="Tabby"))

    removed = await cat_service.remove(tom["id"])

    assert removed["id"] == tom["id"]
    assert await cat_service.find_all() == []
    with pytest.raises(RecordNotFoundError):
        await cat_service.remove(tom["id"])


async def test_storage_errors_propagate_unchanged(cat_collection):
    async def boom(*args, **kwargs):
        raise ServerSelectionTimeoutError("no servers available")

    cat_collection.list_all = boom
    cat_collection.insert = boom
    service = CatService(cat_collection)

    with pytest.raises(ServerSelectionTimeoutError):
        await service.find_all()
    with pytest.raises(ServerSelectionTimeoutError):
        await service.create(CatCreateIn(name="Tom", age=3, breed="Tabby"))


def test_service_keeps_collection_handle(cat_collection):
    service = CatService(cat_collection)

    assert service.collection is cat_collection
    with pytest.raises(AttributeError):
        service.collection = None


def test_action_messages():
    assert CatService.describe_find_one(5) == "This action returns a #5 cat"
    assert CatService.describe_update(5) == "This action updates a #5 cat"
    assert CatService.describe_remove(5) == "This action removes a #5 cat"


async def test_negative_age_is_stored_unchanged(cat_service):
    cat = await cat_service.create(CatCreateIn(name="Tom", age=-1, breed="Tabby"))

    assert cat["age"] == -1
    assert (await cat_service.find_one(cat["id"]))["age"] == -1


async def test_not_found_lookups_are_logged(cat_service, owner_service, caplog):
    caplog.set_level(logging.INFO)
    missing = "0" * 24

    for call in (
        cat_service.find_one(missing),
        cat_service.update(missing, CatUpdateIn(age=2)),
        cat_service.remove(missing),
        owner_service.find_one(missing),
    ):
        with pytest.raises(RecordNotFoundError):
            await call

    messages = [r.getMessage() for r in caplog.records if "não encontrado" in r.getMessage()]
    assert len(messages) == 4
    assert all(missing in m for m in messages)
