"""Tests for the in-memory and database order repositories."""

import logging

from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.database_order_repository import (
    DatabaseOrderRepository,
)
from storefront.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)


def _order(order_id: str, customer: str = "João") -> Order:
    return Order(order_id, customer, ["Produto A"], Money.of("10"))


class TestInMemoryOrderRepository:

    def test_save_returns_same_order(self):
        repo = InMemoryOrderRepository()
        order = _order("ORD-1")
        assert repo.save(order) is order

    def test_find_by_id_on_empty_repo(self):
        assert InMemoryOrderRepository().find_by_id("ORD-1") is None

    def test_find_by_id_no_match(self):
        repo = InMemoryOrderRepository()
        repo.save(_order("ORD-1"))
        assert repo.find_by_id("ORD-2") is None

    def test_find_by_id_returns_first_match(self):
        repo = InMemoryOrderRepository()
        first = repo.save(_order("ORD-1", "First"))
        repo.save(_order("ORD-1", "Second"))
        assert repo.find_by_id("ORD-1") is first

    def test_find_all_keeps_insertion_order(self):
        repo = InMemoryOrderRepository()
        for order_id in ("ORD-3", "ORD-1", "ORD-2"):
            repo.save(_order(order_id))
        assert [o.id for o in repo.find_all()] == ["ORD-3", "ORD-1", "ORD-2"]

    def test_find_all_is_read_only_view(self):
        repo = InMemoryOrderRepository()
        repo.save(_order("ORD-1"))
        snapshot = repo.find_all()
        assert isinstance(snapshot, tuple)
        repo.save(_order("ORD-2"))
        assert len(snapshot) == 1
        assert len(repo.find_all()) == 2

    def test_instances_do_not_share_storage(self):
        a, b = InMemoryOrderRepository(), InMemoryOrderRepository()
        a.save(_order("ORD-1"))
        assert b.find_all() == ()


class TestDatabaseOrderRepository:

    def test_save_logs_then_stores(self, caplog):
        repo = DatabaseOrderRepository()
        order = _order("ORD-003")
        with caplog.at_level(logging.INFO, logger="storefront"):
            saved = repo.save(order)
        assert saved is order
        assert "[Database] Saving order ORD-003 to database" in caplog.text
        assert repo.find_by_id("ORD-003") is order

    def test_delegates_to_wrapped_repository(self):
        inner = InMemoryOrderRepository()
        repo = DatabaseOrderRepository(inner)
        order = repo.save(_order("ORD-1"))
        assert inner.find_all() == (order,)
        assert repo.find_all() == (order,)

    def test_logging_does_not_alter_stored_state(self, caplog):
        plain, logged = InMemoryOrderRepository(), DatabaseOrderRepository()
        orders = [_order("ORD-1"), _order("ORD-2")]
        with caplog.at_level(logging.DEBUG):
            for order in orders:
                plain.save(order)
                logged.save(order)
        assert plain.find_all() == logged.find_all()

    def test_missing_order_is_none(self):
        assert DatabaseOrderRepository().find_by_id("nope") is None
