"""Unit tests for ProductInMemoryRepository."""

from __future__ import annotations

import pytest

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from modules.products.repositories.memory_repository import ProductInMemoryRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return ProductInMemoryRepository()


def _new(name: str = "product1") -> Product:
    return Product(name=name, maker="maker1", price=10_000, image="img")


class TestInMemoryRepository:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)

    def test_assigns_sequential_ids(self, repo):
        first = repo.save(_new("a"))
        second = repo.save(_new("b"))
        assert (first.id, second.id) == (1, 2)

    def test_list_in_id_order(self, repo):
        repo.save(_new("a"))
        repo.save(_new("b"))
        assert [p.name for p in repo.list()] == ["a", "b"]

    def test_get_by_id(self, repo):
        saved = repo.save(_new())
        found = repo.get_by_id(saved.id)
        assert found is not None
        assert found.name == "product1"
        assert repo.get_by_id(-1) is None

    def test_exists_by_id(self, repo):
        saved = repo.save(_new())
        assert repo.exists_by_id(saved.id) is True
        assert repo.exists_by_id(saved.id + 1) is False

    def test_save_overwrites_existing_id(self, repo):
        saved = repo.save(_new())
        saved.name = "renamed"
        repo.save(saved)
        assert [p.name for p in repo.list()] == ["renamed"]

    def test_returned_entities_are_copies(self, repo):
        saved = repo.save(_new())
        fetched = repo.get_by_id(saved.id)
        fetched.name = "mutated without save"
        assert repo.get_by_id(saved.id).name == "product1"

    def test_explicit_id_does_not_collide_with_generated_ones(self, repo):
        repo.save(Product(id=5, name="x", maker="m", price=1))
        generated = repo.save(_new())
        assert generated.id == 6

    def test_delete_by_id(self, repo):
        saved = repo.save(_new())
        repo.delete_by_id(saved.id)
        assert repo.list() == []

    def test_delete_absent_id_is_a_no_op(self, repo):
        repo.save(_new())
        repo.delete_by_id(-1)
        assert len(repo.list()) == 1

    def test_never_touches_the_database(self, repo):
        repo.save(_new())
        assert Product.objects.count() == 0
