"""
Unit tests for the Mongo repositories using mocked Motor collections.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId

from marketplace_api.infrastructure.db.mongo_donation_repository import MongoDonationRepository
from marketplace_api.infrastructure.db.mongo_product_repository import MongoProductRepository
from marketplace_api.infrastructure.db.mongo_user_repository import MongoUserRepository
from tests.factories import OTHER_PRODUCT_ID, PRODUCT_ID, USER_MONGO_ID, make_user


class _AsyncCursor:
    """Stand-in for a Motor cursor supporting ``async for``"""

    def __init__(self, documents):
        self._documents = list(documents)

    def __aiter__(self):
        self._iter = iter(self._documents)
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


def _user_document(**overrides):
    document = {
        "_id": ObjectId(USER_MONGO_ID),
        "id": "usr-1",
        "email": "ana@example.com",
        "password": "$2b$12$hashed",
        "nombre": "Ana",
        "mostrarContacto": True,
        "favoritos": [ObjectId(PRODUCT_ID)],
        "transacciones": [{"ref": "t1", "deleted": True}],
    }
    document.update(overrides)
    return document


@pytest.fixture
def collection():
    return MagicMock()


class TestMongoUserRepository:

    @pytest.mark.asyncio
    async def test_document_to_user(self, collection):
        collection.find_one = AsyncMock(return_value=_user_document())
        user = await MongoUserRepository(collection).find_by_id("usr-1")

        collection.find_one.assert_awaited_once_with({"id": "usr-1"})
        assert user.mongo_id == USER_MONGO_ID
        assert user.hashed_password == "$2b$12$hashed"
        assert user.mostrar_contacto is True
        assert user.favoritos == [PRODUCT_ID]

    @pytest.mark.asyncio
    async def test_find_by_mongo_id_with_malformed_id_returns_none(self, collection):
        collection.find_one = AsyncMock()
        assert await MongoUserRepository(collection).find_by_mongo_id("not-an-object-id") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_driver_error_is_wrapped(self, collection):
        collection.find_one = AsyncMock(side_effect=Exception("connection refused"))
        with pytest.raises(RuntimeError, match="connection refused"):
            await MongoUserRepository(collection).find_by_email("ana@example.com")

    @pytest.mark.asyncio
    async def test_find_all(self, collection):
        collection.find = MagicMock(return_value=_AsyncCursor([
            _user_document(),
            _user_document(_id=ObjectId(), id="usr-2", email="b@example.com"),
        ]))
        users = await MongoUserRepository(collection).find_all()
        assert [user.id for user in users] == ["usr-1", "usr-2"]

    @pytest.mark.asyncio
    async def test_insert_new_user(self, collection):
        inserted_id = ObjectId()
        collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=inserted_id))
        collection.find_one = AsyncMock(return_value=_user_document(_id=inserted_id, favoritos=[]))

        saved = await MongoUserRepository(collection).save(make_user(mongo_id=None))

        stored = collection.insert_one.call_args.args[0]
        assert "_id" not in stored
        assert stored["password"] == "$2b$12$hashed"
        assert stored["mostrarContacto"] is False
        assert saved.mongo_id == str(inserted_id)

    @pytest.mark.asyncio
    async def test_update_does_not_touch_favorites(self, collection):
        collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1))
        collection.find_one = AsyncMock(return_value=_user_document())

        await MongoUserRepository(collection).save(make_user(favoritos=[OTHER_PRODUCT_ID]))

        query, update = collection.update_one.call_args.args
        assert query == {"_id": ObjectId(USER_MONGO_ID)}
        assert "favoritos" not in update["$set"]
        assert update["$set"]["telefono"] == "000"

    @pytest.mark.asyncio
    async def test_update_missing_user_raises(self, collection):
        collection.update_one = AsyncMock(return_value=MagicMock(matched_count=0))
        with pytest.raises(ValueError, match="not found"):
            await MongoUserRepository(collection).save(make_user())

    @pytest.mark.asyncio
    async def test_add_favorite_is_a_conditional_push(self, collection):
        collection.update_one = AsyncMock(return_value=MagicMock(modified_count=1))

        added = await MongoUserRepository(collection).add_favorite("usr-1", PRODUCT_ID)

        query, update = collection.update_one.call_args.args
        assert query == {"id": "usr-1", "favoritos": {"$ne": ObjectId(PRODUCT_ID)}}
        assert update == {"$push": {"favoritos": ObjectId(PRODUCT_ID)}}
        assert added is True

    @pytest.mark.asyncio
    async def test_add_favorite_already_present(self, collection):
        collection.update_one = AsyncMock(return_value=MagicMock(modified_count=0))
        assert await MongoUserRepository(collection).add_favorite("usr-1", PRODUCT_ID) is False

    @pytest.mark.asyncio
    async def test_remove_favorite_pulls(self, collection):
        collection.update_one = AsyncMock(return_value=MagicMock(modified_count=0))

        await MongoUserRepository(collection).remove_favorite("usr-1", PRODUCT_ID)

        collection.update_one.assert_awaited_once_with(
            {"id": "usr-1"}, {"$pull": {"favoritos": ObjectId(PRODUCT_ID)}}
        )

    @pytest.mark.asyncio
    async def test_list_favorites_as_strings(self, collection):
        collection.find_one = AsyncMock(return_value={"_id": ObjectId(), "favoritos": [ObjectId(PRODUCT_ID)]})
        assert await MongoUserRepository(collection).list_favorites("usr-1") == [PRODUCT_ID]

    @pytest.mark.asyncio
    async def test_remove_products_from_all_favorites_skips_empty(self, collection):
        collection.update_many = AsyncMock()
        assert await MongoUserRepository(collection).remove_products_from_all_favorites([]) == 0
        collection.update_many.assert_not_called()


class TestMongoProductRepository:

    @pytest.mark.asyncio
    async def test_find_by_ids_keeps_order_and_skips_missing(self, collection):
        collection.find = MagicMock(return_value=_AsyncCursor([
            {"_id": ObjectId(PRODUCT_ID), "title": "Bicicleta"},
            {"_id": ObjectId(OTHER_PRODUCT_ID), "title": "Mesa"},
        ]))
        missing = str(ObjectId())

        products = await MongoProductRepository(collection).find_by_ids([OTHER_PRODUCT_ID, missing, PRODUCT_ID])

        assert [product.title for product in products] == ["Mesa", "Bicicleta"]

    @pytest.mark.asyncio
    async def test_find_by_id_malformed_returns_none(self, collection):
        collection.find_one = AsyncMock()
        assert await MongoProductRepository(collection).find_by_id("abc") is None

    @pytest.mark.asyncio
    async def test_delete_by_owner(self, collection):
        collection.delete_many = AsyncMock(return_value=MagicMock(deleted_count=4))
        assert await MongoProductRepository(collection).delete_by_owner("usr-1") == 4
        collection.delete_many.assert_awaited_once_with({"ownerId": "usr-1"})


class TestMongoDonationRepository:

    @pytest.mark.asyncio
    async def test_counts_only_delivered(self, collection):
        collection.count_documents = AsyncMock(return_value=2)
        assert await MongoDonationRepository(collection).count_delivered_by_donor(USER_MONGO_ID) == 2
        collection.count_documents.assert_awaited_once_with(
            {"donor": ObjectId(USER_MONGO_ID), "status": "delivered"}
        )

    @pytest.mark.asyncio
    async def test_delete_by_user_matches_donor_or_receiver(self, collection):
        collection.delete_many = AsyncMock(return_value=MagicMock(deleted_count=3))
        assert await MongoDonationRepository(collection).delete_by_user(USER_MONGO_ID) == 3
        query = collection.delete_many.call_args.args[0]
        assert query["$or"] == [{"donor": ObjectId(USER_MONGO_ID)}, {"receiver": ObjectId(USER_MONGO_ID)}]
