"""Account, currency, signing and exchange types."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum, IntEnum
from typing import Annotated, Any, Literal

from pydantic import Field, field_validator

from ledger_live_sdk.models import HexBytes, WireDecimal, WireModel
from ledger_live_sdk.transactions import Transaction


class CurrencyType(str, Enum):
    """Currency variant discriminant."""

    CRYPTO_CURRENCY = "CryptoCurrency"
    TOKEN_CURRENCY = "TokenCurrency"


class ExchangeType(IntEnum):
    """Kind of exchange flow. Sent to the host as its number."""

    SWAP = 0
    SELL = 1
    FUND = 2


class FeesLevel(str, Enum):
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"


class Unit(WireModel):
    """A display unit of a currency (e.g. BTC, mBTC, satoshi)."""

    name: str
    code: str
    magnitude: int


class CryptoCurrency(WireModel):
    type: Literal["CryptoCurrency"] = "CryptoCurrency"
    id: str
    name: str
    ticker: str
    color: str
    family: str
    units: list[Unit]


class TokenCurrency(WireModel):
    type: Literal["TokenCurrency"] = "TokenCurrency"
    id: str
    name: str
    ticker: str
    color: str
    standard: str
    contract: str
    parent: str
    units: list[Unit]


Currency = Annotated[CryptoCurrency | TokenCurrency, Field(discriminator="type")]


class RawAccount(WireModel):
    """An account as the host sends it: decimals and dates are strings."""

    id: str
    name: str
    address: str
    currency: str
    balance: str
    spendable_balance: str
    block_height: int
    last_sync_date: str

    @field_validator("balance", "spendable_balance")
    @classmethod
    def _check_decimal(cls, value: str) -> str:
        try:
            parsed = Decimal(value)
        except InvalidOperation:
            raise ValueError(f"not a decimal string: {value!r}") from None
        if not parsed.is_finite():
            raise ValueError(f"not a finite decimal: {value!r}")
        return value

    @field_validator("last_sync_date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        datetime.fromisoformat(value)
        return value


class Account(WireModel):
    """An account with exact balances and a parsed sync date."""

    id: str
    name: str
    address: str
    currency: str
    balance: WireDecimal
    spendable_balance: WireDecimal
    block_height: int
    last_sync_date: datetime


class RawSignedTransaction(WireModel):
    """A signed transaction as exchanged on the wire."""

    operation: Any = None
    signature: str
    expiration_date: str | None = None


class SignedTransaction(WireModel):
    """A signed transaction with a binary signature and parsed expiration."""

    operation: Any = None
    signature: bytes
    expiration_date: datetime | None = None


class RequestAccountParams(WireModel):
    """Filters for the account picker shown by the host."""

    currencies: list[str] | None = None
    allow_add_account: bool | None = None


class SignTransactionParams(WireModel):
    # Name of the device app to sign with, when it differs from the family's
    use_app: str | None = None


class StartExchangeParams(WireModel):
    exchange_type: ExchangeType


class CompleteExchangeParams(WireModel):
    """Everything the host needs to finish an exchange started earlier.

    ``to_account_id`` is only optional for non-swap exchanges; the SDK
    checks that before sending.
    """

    provider: str
    from_account_id: str
    to_account_id: str | None = None
    transaction: Transaction
    binary_payload: HexBytes
    signature: HexBytes
    fees_strategy: FeesLevel
    exchange_type: ExchangeType
