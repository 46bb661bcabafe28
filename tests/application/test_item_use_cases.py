"""Tests for the item and category use cases."""

import pytest

from shop.application.add_category import AddCategoryHandler, ShowCategoryHandler
from shop.application.add_item import AddItemHandler
from shop.application.show_item import ListItemsHandler, ShowItemHandler
from shop.application.update_item import UpdateItemHandler
from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.model.item import AlbumDetails, ItemKind, MovieDetails
from tests.fakes import FakeUnitOfWork


class TestAddItem:

    def test_adds_album(self):
        uow = FakeUnitOfWork()
        item = AddItemHandler(uow).handle("Live", 15000, 3, AlbumDetails(artist="band"))
        assert item.id == 1
        assert item.kind == ItemKind.ALBUM
        assert ShowItemHandler(uow).handle(1) is item

    def test_invalid_price_not_saved(self):
        uow = FakeUnitOfWork()
        with pytest.raises(ValidationError):
            AddItemHandler(uow).handle("Live", -5, 3, AlbumDetails())
        assert ListItemsHandler(uow).handle() == []


class TestUpdateItem:

    def test_changes_fields_and_keeps_details(self):
        uow = FakeUnitOfWork()
        details = MovieDetails(director="park", actor="lee")
        item = AddItemHandler(uow).handle("Film", 9000, 2, details)
        UpdateItemHandler(uow).handle(item.id, "Film (director's cut)", 12000, 4)

        stored = ShowItemHandler(uow).handle(item.id)
        assert (stored.name, stored.price, stored.stock_quantity) == (
            "Film (director's cut)", 12000, 4,
        )
        assert stored.details == details

    def test_unknown_item(self):
        with pytest.raises(EntityNotFoundError):
            UpdateItemHandler(FakeUnitOfWork()).handle(3, "x", 1, 1)


class TestAddCategory:

    def test_nested_category_with_items(self):
        uow = FakeUnitOfWork()
        item = AddItemHandler(uow).handle("Live", 15000, 3, AlbumDetails())
        music_id = AddCategoryHandler(uow).handle("Music")
        live_id = AddCategoryHandler(uow).handle("Live", parent_id=music_id, item_ids=[item.id])

        live = ShowCategoryHandler(uow).handle(live_id)
        assert live.parent.id == music_id
        assert live.items == [item]

    def test_unknown_parent(self):
        with pytest.raises(EntityNotFoundError, match="Category #3"):
            AddCategoryHandler(FakeUnitOfWork()).handle("Live", parent_id=3)

    def test_unknown_item(self):
        with pytest.raises(EntityNotFoundError, match="Item #3"):
            AddCategoryHandler(FakeUnitOfWork()).handle("Live", item_ids=[3])
