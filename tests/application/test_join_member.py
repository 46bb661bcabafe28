"""Tests for the member use cases, with in-memory fakes."""

import pytest

from shop.application.join_member import JoinMemberHandler
from shop.application.show_member import ListMembersHandler, ShowMemberHandler
from shop.application.update_member import UpdateMemberHandler
from shop.domain.exceptions import DuplicateMemberError, EntityNotFoundError, ValidationError
from shop.domain.model.value_objects import Address
from tests.fakes import FakeUnitOfWork


class TestJoinMember:

    def test_returns_new_id(self):
        uow = FakeUnitOfWork()
        member_id = JoinMemberHandler(uow).handle("userA", "Seoul", "1", "1111")
        assert member_id == 1
        assert uow.commits == 1

    def test_persists_address(self):
        uow = FakeUnitOfWork()
        member_id = JoinMemberHandler(uow).handle("userA", "Seoul", "1", "1111")
        assert uow.members.get_by_id(member_id).address == Address("Seoul", "1", "1111")

    def test_address_is_optional(self):
        uow = FakeUnitOfWork()
        member_id = JoinMemberHandler(uow).handle("userA")
        assert uow.members.get_by_id(member_id).address is None

    def test_duplicate_name_rejected(self):
        uow = FakeUnitOfWork()
        handler = JoinMemberHandler(uow)
        handler.handle("userA")
        with pytest.raises(DuplicateMemberError, match="userA"):
            handler.handle("userA")
        assert len(uow.members.list_all()) == 1
        assert uow.commits == 1

    def test_blank_name_rejected(self):
        uow = FakeUnitOfWork()
        with pytest.raises(ValidationError):
            JoinMemberHandler(uow).handle("  ")
        assert uow.commits == 0


class TestUpdateMember:

    def test_rename(self):
        uow = FakeUnitOfWork()
        member_id = JoinMemberHandler(uow).handle("userA")
        UpdateMemberHandler(uow).handle(member_id, "userC")
        assert uow.members.get_by_id(member_id).name == "userC"

    def test_rename_to_own_name_allowed(self):
        uow = FakeUnitOfWork()
        member_id = JoinMemberHandler(uow).handle("userA")
        UpdateMemberHandler(uow).handle(member_id, "userA")
        assert uow.commits == 2

    def test_rename_to_taken_name_rejected(self):
        uow = FakeUnitOfWork()
        JoinMemberHandler(uow).handle("userA")
        member_id = JoinMemberHandler(uow).handle("userB")
        with pytest.raises(DuplicateMemberError):
            UpdateMemberHandler(uow).handle(member_id, "userA")

    def test_rename_to_taken_name_logged(self, caplog):
        uow = FakeUnitOfWork()
        JoinMemberHandler(uow).handle("userA")
        member_id = JoinMemberHandler(uow).handle("userB")
        with caplog.at_level("WARNING", logger="shop.application.update_member"):
            with pytest.raises(DuplicateMemberError):
                UpdateMemberHandler(uow).handle(member_id, "userA")
        assert "taken name 'userA'" in caplog.text

    def test_unknown_member(self):
        with pytest.raises(EntityNotFoundError, match="#42"):
            UpdateMemberHandler(FakeUnitOfWork()).handle(42, "userC")


class TestMemberQueries:

    def test_show_absent_member_is_none(self):
        assert ShowMemberHandler(FakeUnitOfWork()).handle(1) is None

    def test_list(self):
        uow = FakeUnitOfWork()
        JoinMemberHandler(uow).handle("userA")
        JoinMemberHandler(uow).handle("userB")
        assert [m.name for m in ListMembersHandler(uow).handle()] == ["userA", "userB"]
