from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Limits ---
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

# --- Users ---

class User(BaseModel):
    """Immutable user record. Equality and hashing are structural."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(ge=ID_MIN, le=ID_MAX)
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    balance: Decimal = Field(allow_inf_nan=False)
    birth_day: date = Field(alias="birthDay")
    created_on: date = Field(alias="createdOn")

    @field_validator("email")
    @classmethod
    def _single_at_sign(cls, value: str) -> str:
        if value.count("@") != 1:
            raise ValueError("email must contain exactly one '@'")
        return value

    @property
    def email_domain(self) -> str:
        return self.email.partition("@")[2]


UserCollection = Sequence[User]
