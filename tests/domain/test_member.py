"""Unit tests for Member."""

import pytest

from shop.domain.exceptions import ValidationError
from shop.domain.model.member import Member
from shop.domain.model.value_objects import Address


class TestMember:

    def test_create(self):
        member = Member.create(" userA ", Address("Seoul", "1", "1111"))
        assert member.id is None
        assert member.name == "userA"
        assert member.orders == []

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Member.create("")

    def test_rename(self):
        member = Member.create("userA")
        member.rename("userC")
        assert member.name == "userC"

    def test_rename_to_blank_rejected(self):
        member = Member.create("userA")
        with pytest.raises(ValidationError):
            member.rename("   ")
        assert member.name == "userA"

    def test_orders_not_part_of_equality(self):
        a = Member(id=1, name="userA")
        b = Member(id=1, name="userA", orders=[object()])  # type: ignore[list-item]
        assert a == b
