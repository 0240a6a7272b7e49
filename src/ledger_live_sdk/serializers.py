"""Conversions between wire values and domain values."""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from pydantic import TypeAdapter

from ledger_live_sdk.errors import ValidationError
from ledger_live_sdk.models import WireModel, format_decimal
from ledger_live_sdk.transactions import TRANSACTION_TYPES, Family, Transaction
from ledger_live_sdk.types import (
    Account,
    CompleteExchangeParams,
    RawAccount,
    RawSignedTransaction,
    SignedTransaction,
)

_transaction_adapter: TypeAdapter[Transaction] = TypeAdapter(Transaction)


def parse_date(text: str) -> datetime:
    """Parse an ISO 8601 date; a value without an offset is taken as UTC."""
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def to_hex(data: bytes) -> str:
    return data.hex()


def from_hex(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError:
        raise ValidationError(f"Invalid hex string: {text!r}") from None


def serialize_account(account: Account) -> RawAccount:
    return RawAccount(
        id=account.id,
        name=account.name,
        address=account.address,
        currency=account.currency,
        balance=format_decimal(account.balance),
        spendable_balance=format_decimal(account.spendable_balance),
        block_height=account.block_height,
        last_sync_date=account.last_sync_date.isoformat(),
    )


def deserialize_account(raw: RawAccount) -> Account:
    return Account(
        id=raw.id,
        name=raw.name,
        address=raw.address,
        currency=raw.currency,
        balance=Decimal(raw.balance),
        spendable_balance=Decimal(raw.spendable_balance),
        block_height=raw.block_height,
        last_sync_date=parse_date(raw.last_sync_date),
    )


def serialize_transaction(transaction: WireModel) -> dict[str, Any]:
    """Render a transaction for the wire, checked against its family's type.

    Raises:
        ValidationError: If the value is not the registered type for its family.
    """
    family = getattr(transaction, "family", None)
    try:
        expected = TRANSACTION_TYPES[Family(family)]
    except ValueError:
        raise ValidationError(f"Unsupported transaction family: {family!r}") from None
    if type(transaction) is not expected:
        raise ValidationError(
            f"Transaction for family {family!r} must be a {expected.__name__}"
        )
    return transaction.to_wire(exclude_none=True)


def deserialize_transaction(raw: dict[str, Any]) -> Transaction:
    """Build the family-specific transaction from its wire form."""
    family = raw.get("family")
    if family not in {f.value for f in Family}:
        raise ValidationError(f"Unsupported transaction family: {family!r}")
    return _transaction_adapter.validate_python(raw)


def serialize_signed_transaction(signed: SignedTransaction) -> RawSignedTransaction:
    return RawSignedTransaction(
        operation=signed.operation,
        signature=to_hex(signed.signature),
        expiration_date=(
            signed.expiration_date.isoformat() if signed.expiration_date else None
        ),
    )


def deserialize_signed_transaction(raw: RawSignedTransaction) -> SignedTransaction:
    return SignedTransaction(
        operation=raw.operation,
        signature=from_hex(raw.signature),
        expiration_date=(
            parse_date(raw.expiration_date)
            if raw.expiration_date
            else None
        ),
    )


def serialize_complete_exchange_params(params: CompleteExchangeParams) -> dict[str, Any]:
    """Render exchange completion params; payload and signature become hex."""
    wire = params.to_wire(exclude_none=True)
    wire["transaction"] = serialize_transaction(params.transaction)
    return wire
