from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
import yaml

from src.components.users import UserQueryService
from src.domain.entities import User

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def example_users() -> list[User]:
    """The four-user example dataset, in file order."""
    return [
        User(
            id=1,
            first_name="Justin",
            last_name="Butler",
            email="justin.butler@gmail.com",
            balance=Decimal(172966),
            birth_day=date(2003, 4, 17),
            created_on=date(2016, 6, 13),
        ),
        User(
            id=2,
            first_name="Olivia",
            last_name="Cardenas",
            email="cardenas@mail.com",
            balance=Decimal(38029),
            birth_day=date(1930, 1, 19),
            created_on=date(2014, 6, 21),
        ),
        User(
            id=3,
            first_name="Nolan",
            last_name="Donovan",
            email="nolandonovan@gmail.com",
            balance=Decimal(13889),
            birth_day=date(1925, 4, 19),
            created_on=date(2011, 3, 10),
        ),
        User(
            id=4,
            first_name="Lucas",
            last_name="Lynn",
            email="lucas.lynn@yahoo.com",
            balance=Decimal(16980),
            birth_day=date(1987, 5, 25),
            created_on=date(2009, 3, 5),
        ),
    ]


@pytest.fixture
def example_service(example_users: list[User]) -> UserQueryService:
    return UserQueryService(example_users)


@pytest.fixture
def write_yaml(tmp_path: Path):
    """Dump a mapping to a YAML file under tmp_path and return its path."""

    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(data, f, sort_keys=False)
        return path

    return _write


@pytest.fixture
def user_record() -> dict[str, object]:
    """A single valid raw user record, snake_case keys."""
    return {
        "id": 10,
        "first_name": "Ada",
        "last_name": "Byron",
        "email": "ada@example.com",
        "balance": "1250.75",
        "birth_day": "1815-12-10",
        "created_on": "2020-01-01",
    }
