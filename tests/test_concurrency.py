"""
Concurrency tests for the check-then-act sequences.

A slow repository widens the window between the check and the write so
that, without serialization, the races would reliably show up.
"""
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from storefront.application.services.product_service import ProductService
from storefront.application.services.user_service import UserService
from storefront.core.exceptions import InvalidArgumentError
from storefront.domain.models.product import Product
from storefront.domain.models.user import User
from storefront.infrastructure.memory import InMemoryProductRepository, InMemoryUserRepository
from storefront.utils.key_lock import KeyedLock


class SlowProductRepository(InMemoryProductRepository):
    def find_by_id(self, product_id):
        product = super().find_by_id(product_id)
        time.sleep(0.005)
        return product


class SlowUserRepository(InMemoryUserRepository):
    def find_by_email(self, email):
        user = super().find_by_email(email)
        time.sleep(0.02)
        return user


class TestKeyedLock:
    """Test KeyedLock bookkeeping"""

    def test_entries_are_released(self):
        lock = KeyedLock()
        with lock.hold("a", "b"):
            assert lock.active_keys() == 2
        assert lock.active_keys() == 0

    def test_is_reentrant(self):
        lock = KeyedLock()
        with lock.hold("a"):
            with lock.hold("a"):
                assert lock.active_keys() == 1
        assert lock.active_keys() == 0

    def test_released_after_exception(self):
        lock = KeyedLock()
        with pytest.raises(RuntimeError):
            with lock.hold("a"):
                raise RuntimeError("boom")
        assert lock.active_keys() == 0

    def test_same_key_is_exclusive(self):
        lock = KeyedLock()
        inside = []
        overlap = threading.Event()

        def worker():
            with lock.hold("k"):
                inside.append(1)
                if len(inside) > 1:
                    overlap.set()
                time.sleep(0.01)
                inside.pop()

        threads = [threading.Thread(target=worker) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not overlap.is_set()


class TestServiceSerialization:
    """Test that services serialize per-entity read-modify-write"""

    def test_concurrent_stock_adjustments_are_not_lost(self):
        service = ProductService(SlowProductRepository())
        product = service.save(Product(name="Phone", price=10.0, stock=0))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda _: service.adjust_stock(product.id, 1), range(40)))

        assert service.get_by_id(product.id).stock == 40

    def test_concurrent_withdrawals_never_go_negative(self):
        service = ProductService(SlowProductRepository())
        product = service.save(Product(name="Phone", price=10.0, stock=5))

        def withdraw(_):
            try:
                service.adjust_stock(product.id, -1)
                return True
            except InvalidArgumentError:
                return False

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(withdraw, range(20)))

        assert results.count(True) == 5
        assert service.get_by_id(product.id).stock == 0

    def test_concurrent_creation_with_same_email_admits_one(self):
        service = UserService(SlowUserRepository())

        def create(i):
            try:
                service.save(User(name=f"User {i}", email="same@example.com"))
                return True
            except InvalidArgumentError:
                return False

        with ThreadPoolExecutor(max_workers=6) as pool:
            results = list(pool.map(create, range(6)))

        assert results.count(True) == 1
        assert len(service.get_all()) == 1

    def test_creation_and_email_change_to_same_address_admit_one(self):
        service = UserService(SlowUserRepository())
        existing = service.save(User(name="Existing", email="old@example.com"))
        barrier = threading.Barrier(2)
        outcomes = {}

        def create():
            barrier.wait()
            try:
                service.save(User(name="New", email="target@example.com"))
                outcomes["create"] = True
            except InvalidArgumentError:
                outcomes["create"] = False

        def change():
            barrier.wait()
            try:
                service.update_partial(existing.id, {"email": "target@example.com"})
                outcomes["change"] = True
            except InvalidArgumentError:
                outcomes["change"] = False

        threads = [threading.Thread(target=create), threading.Thread(target=change)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(outcomes.values()) == [False, True]
        holders = [u for u in service.get_all() if u.email == "target@example.com"]
        assert len(holders) == 1
