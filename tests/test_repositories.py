"""
Tests for the storage port implementations.

The MongoDB repositories are exercised against a mocked client; only the
query shapes and document mapping are checked.
"""
from unittest.mock import MagicMock

import pytest
from pymongo.errors import DuplicateKeyError

from storefront.core.exceptions import InvalidArgumentError
from storefront.domain.models.product import Product
from storefront.domain.models.user import User
from storefront.infrastructure.db.mongo_product_repository import MongoProductRepository
from storefront.infrastructure.db.mongo_user_repository import MongoUserRepository


class TestInMemoryProductRepository:
    def test_save_assigns_sequential_ids(self, product_repository):
        first = product_repository.save(Product(name="A", price=1.0))
        second = product_repository.save(Product(name="B", price=1.0))
        assert (first.id, second.id) == (1, 2)

    def test_save_does_not_mutate_argument(self, product_repository):
        product = Product(name="A", price=1.0)
        product_repository.save(product)
        assert product.id is None

    def test_ids_are_not_reused_after_delete(self, product_repository):
        first = product_repository.save(Product(name="A", price=1.0))
        product_repository.delete_by_id(first.id)
        assert product_repository.save(Product(name="B", price=1.0)).id == 2

    def test_delete_missing_is_a_no_op(self, product_repository):
        product_repository.delete_by_id(5)
        assert product_repository.find_all() == []


class TestInMemoryUserRepository:
    def test_find_by_email_is_exact(self, user_repository):
        user_repository.save(User(name="Joana", email="j@example.com"))
        assert user_repository.find_by_email("J@example.com") is None
        assert user_repository.find_by_email("j@example.com").name == "Joana"

    def test_find_by_name_containing(self, user_repository):
        user_repository.save(User(name="Joana", email="j@example.com"))
        user_repository.save(User(name="Maria", email="m@example.com"))
        assert [u.name for u in user_repository.find_by_name_containing("ari")] == ["Maria"]


@pytest.fixture
def mongo_client():
    client = MagicMock()
    client.next_sequence.return_value = 7
    return client


class TestMongoProductRepository:
    def test_save_new_product_takes_next_sequence(self, mongo_client):
        repository = MongoProductRepository(mongo_client)

        saved = repository.save(Product(name="Phone", price=10.0, stock=2))

        assert saved.id == 7
        mongo_client.next_sequence.assert_called_once_with("products")
        collection = mongo_client.get_collection.return_value
        collection.replace_one.assert_called_once_with(
            {"id": 7},
            {"id": 7, "name": "Phone", "price": 10.0, "stock": 2},
            upsert=True,
        )

    def test_save_existing_product_keeps_id(self, mongo_client):
        repository = MongoProductRepository(mongo_client)
        assert repository.save(Product(id=3, name="Phone", price=10.0)).id == 3
        mongo_client.next_sequence.assert_not_called()

    def test_find_by_id_maps_document(self, mongo_client):
        collection = mongo_client.get_collection.return_value
        collection.find_one.return_value = {"_id": "x", "id": 3, "name": "Phone", "price": 10, "stock": 1}

        product = MongoProductRepository(mongo_client).find_by_id(3)

        assert product == Product(id=3, name="Phone", price=10.0, stock=1)
        collection.find_one.assert_called_once_with({"id": 3})

    def test_find_by_id_missing(self, mongo_client):
        mongo_client.get_collection.return_value.find_one.return_value = None
        assert MongoProductRepository(mongo_client).find_by_id(3) is None

    def test_price_range_query(self, mongo_client):
        collection = mongo_client.get_collection.return_value
        collection.find.return_value.sort.return_value = []

        MongoProductRepository(mongo_client).find_by_price_between(1.0, 5.0)

        collection.find.assert_called_once_with({"price": {"$gte": 1.0, "$lte": 5.0}})


class TestMongoUserRepository:
    def test_creates_unique_email_index(self, mongo_client):
        MongoUserRepository(mongo_client)
        collection = mongo_client.get_collection.return_value
        collection.create_index.assert_called_once_with([("email", 1)], unique=True)

    def test_duplicate_key_becomes_invalid_argument(self, mongo_client):
        collection = mongo_client.get_collection.return_value
        collection.replace_one.side_effect = DuplicateKeyError("E11000 duplicate key")

        with pytest.raises(InvalidArgumentError, match="Email already in use"):
            MongoUserRepository(mongo_client).save(User(name="Joana", email="j@example.com"))

    def test_name_search_escapes_regex(self, mongo_client):
        collection = mongo_client.get_collection.return_value
        collection.find.return_value.sort.return_value = []

        MongoUserRepository(mongo_client).find_by_name_containing("a.b")

        collection.find.assert_called_once_with({"name": {"$regex": r"a\.b"}})
