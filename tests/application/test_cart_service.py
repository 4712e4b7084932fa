"""Tests for the CartService write-through behaviour.

Uses in-memory fake repositories, no file I/O.
"""

import pytest

from storefront.application.cart_service import CartService
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, burger


def _setup(initial: Cart | None = None) -> tuple[CartService, FakeCartRepository]:
    repo = FakeCartRepository(initial)
    return CartService(repo), repo


class TestRestore:

    def test_starts_empty_without_snapshot(self):
        service, _ = _setup()
        assert service.is_empty
        assert service.subtotal == Money.zero()

    def test_restores_saved_cart(self):
        saved = Cart()
        saved.add(burger(), 3)
        service, _ = _setup(saved)
        assert service.count == 3

    def test_unreadable_snapshot_means_empty_cart(self):
        repo = FakeCartRepository()
        repo.fail_on_load = True
        service = CartService(repo)
        assert service.is_empty


class TestWriteThrough:

    def test_every_mutation_is_persisted(self):
        service, repo = _setup()
        service.add_to_cart(burger(1), 2)
        service.add_to_cart(burger(2, "Fries", "400"))
        service.update_quantity(1, 5)
        service.remove_from_cart(2)
        assert repo.saves == 4
        assert repo.stored.count == 5

    def test_persisted_snapshot_matches_memory(self):
        service, repo = _setup()
        service.add_to_cart(burger(1), 2)
        service.add_to_cart(burger(1), 1)
        reloaded = CartService(repo)
        assert reloaded.count == service.count == 3
        assert reloaded.subtotal == service.subtotal

    def test_clear_deletes_snapshot(self):
        service, repo = _setup()
        service.add_to_cart(burger())
        service.clear_cart()
        assert service.is_empty
        assert repo.stored is None

    def test_failed_write_keeps_memory_state(self):
        service, repo = _setup()
        repo.fail_on_save = True
        service.add_to_cart(burger(), 2)
        assert service.count == 2
        service.clear_cart()
        assert service.is_empty

    def test_rejected_add_persists_nothing(self):
        service, repo = _setup()
        with pytest.raises(ValidationError):
            service.add_to_cart(burger(), 0)
        assert repo.saves == 0
        assert service.is_empty


class TestQueries:

    def test_lines_is_a_copy(self):
        service, _ = _setup()
        service.add_to_cart(burger())
        service.lines.clear()
        assert service.count == 1

    def test_subtotal(self):
        service, _ = _setup()
        service.add_to_cart(burger(1, price="1250"), 2)
        service.add_to_cart(burger(2, "Cola", "300"), 1)
        assert service.subtotal == Money.of("2800")
