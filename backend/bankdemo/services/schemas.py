from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from bankdemo.domain.money import parse_amount


class AccountOpenRequest(BaseModel):
    opening_balance: Decimal
    account_number: str = Field(min_length=1)   # ex: "ACC-001"

    @field_validator("opening_balance", mode="before")
    @classmethod
    def parse_opening_balance(cls, v):
        return parse_amount(v)

    @field_validator("account_number", mode="before")
    @classmethod
    def strip_account_number(cls, v):
        return v.strip() if isinstance(v, str) else v


class AmountRequest(BaseModel):
    amount: Decimal

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount_field(cls, v):
        return parse_amount(v)
