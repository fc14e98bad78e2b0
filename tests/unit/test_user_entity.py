"""
User entity tests.

Covers construction, validation, immutability and structural equality.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.domain.entities import ID_MAX, User


class TestUserConstruction:
    """Test building users from raw records."""

    def test_snake_case_record(self, user_record: dict[str, object]) -> None:
        user = User.model_validate(user_record)
        assert user.id == 10
        assert user.first_name == "Ada"
        assert user.balance == Decimal("1250.75")
        assert user.birth_day == date(1815, 12, 10)

    def test_camel_case_record(self, user_record: dict[str, object]) -> None:
        record = {
            "id": user_record["id"],
            "firstName": user_record["first_name"],
            "lastName": user_record["last_name"],
            "email": user_record["email"],
            "balance": user_record["balance"],
            "birthDay": user_record["birth_day"],
            "createdOn": user_record["created_on"],
        }
        assert User.model_validate(record) == User.model_validate(user_record)

    def test_balance_kept_exact(self, user_record: dict[str, object]) -> None:
        user_record["balance"] = "0.1"
        user = User.model_validate(user_record)
        assert isinstance(user.balance, Decimal)
        assert user.balance == Decimal("0.1")

    def test_email_domain(self, user_record: dict[str, object]) -> None:
        assert User.model_validate(user_record).email_domain == "example.com"


class TestUserValidation:
    """Test rejected records."""

    @pytest.mark.parametrize("email", ["no-at-sign.com", "two@@example.com", "a@b@c"])
    def test_email_needs_one_at_sign(
        self, user_record: dict[str, object], email: str
    ) -> None:
        user_record["email"] = email
        with pytest.raises(ValidationError, match="exactly one '@'"):
            User.model_validate(user_record)

    def test_id_out_of_64_bit_range(self, user_record: dict[str, object]) -> None:
        user_record["id"] = ID_MAX + 1
        with pytest.raises(ValidationError):
            User.model_validate(user_record)

    @pytest.mark.parametrize("field", ["first_name", "email", "balance", "birth_day"])
    def test_missing_field(self, user_record: dict[str, object], field: str) -> None:
        del user_record[field]
        with pytest.raises(ValidationError):
            User.model_validate(user_record)

    def test_nan_balance_rejected(self, user_record: dict[str, object]) -> None:
        user_record["balance"] = "NaN"
        with pytest.raises(ValidationError):
            User.model_validate(user_record)

    def test_bad_date_rejected(self, user_record: dict[str, object]) -> None:
        user_record["birth_day"] = "2020-13-40"
        with pytest.raises(ValidationError):
            User.model_validate(user_record)


class TestUserValueSemantics:
    """Test equality, hashing and immutability."""

    def test_structural_equality(self, user_record: dict[str, object]) -> None:
        assert User.model_validate(user_record) == User.model_validate(dict(user_record))

    def test_differs_on_any_field(self, user_record: dict[str, object]) -> None:
        other = dict(user_record, created_on="2021-01-01")
        assert User.model_validate(user_record) != User.model_validate(other)

    def test_hashable(self, user_record: dict[str, object]) -> None:
        user = User.model_validate(user_record)
        assert {user, User.model_validate(user_record)} == {user}

    def test_frozen(self, user_record: dict[str, object]) -> None:
        user = User.model_validate(user_record)
        with pytest.raises(ValidationError):
            user.balance = Decimal(0)  # type: ignore[misc]
