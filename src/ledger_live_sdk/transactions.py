"""Transaction variants, one per blockchain family.

Every variant carries its ``family`` tag first, then ``amount`` and
``recipient``, then the family's own fields. Optional fields left as None are
omitted from the wire.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import Field

from ledger_live_sdk.models import HexBytes, WireDecimal, WireModel


class Family(str, Enum):
    """Transaction family discriminant."""

    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
    ALGORAND = "algorand"
    CRYPTO_ORG = "crypto_org"
    RIPPLE = "ripple"
    COSMOS = "cosmos"
    TEZOS = "tezos"
    POLKADOT = "polkadot"
    STELLAR = "stellar"
    TRON = "tron"


class BitcoinTransaction(WireModel):
    family: Literal["bitcoin"] = "bitcoin"
    amount: WireDecimal
    recipient: str
    fee_per_byte: WireDecimal | None = None
    op_return_data: HexBytes | None = None


class EthereumTransaction(WireModel):
    family: Literal["ethereum"] = "ethereum"
    amount: WireDecimal
    recipient: str
    nonce: int | None = Field(default=None, ge=0)
    data: HexBytes | None = None
    gas_price: WireDecimal | None = None
    gas_limit: WireDecimal | None = None


class AlgorandTransaction(WireModel):
    family: Literal["algorand"] = "algorand"
    amount: WireDecimal
    recipient: str
    mode: Literal["send", "optIn", "claimReward", "optOut"] = "send"
    fees: WireDecimal | None = None
    asset_id: str | None = None
    memo: str | None = None


class CryptoOrgTransaction(WireModel):
    family: Literal["crypto_org"] = "crypto_org"
    amount: WireDecimal
    recipient: str
    mode: Literal["send"] = "send"
    fees: WireDecimal | None = None


class RippleTransaction(WireModel):
    family: Literal["ripple"] = "ripple"
    amount: WireDecimal
    recipient: str
    fee: WireDecimal | None = None
    # Destination tag is a uint32 on the ledger
    tag: int | None = Field(default=None, ge=0, le=0xFFFFFFFF)


class CosmosTransaction(WireModel):
    family: Literal["cosmos"] = "cosmos"
    amount: WireDecimal
    recipient: str
    mode: Literal[
        "send",
        "delegate",
        "undelegate",
        "redelegate",
        "claimReward",
        "claimRewardCompound",
    ] = "send"
    fees: WireDecimal | None = None
    gas: WireDecimal | None = None
    memo: str | None = None


class TezosTransaction(WireModel):
    family: Literal["tezos"] = "tezos"
    amount: WireDecimal
    recipient: str
    mode: Literal["send", "delegate", "undelegate"] = "send"
    fees: WireDecimal | None = None
    gas_limit: WireDecimal | None = None


class PolkadotTransaction(WireModel):
    family: Literal["polkadot"] = "polkadot"
    amount: WireDecimal
    recipient: str
    mode: Literal[
        "send",
        "bond",
        "unbond",
        "rebond",
        "withdrawUnbonded",
        "setController",
        "nominate",
        "chill",
        "claimReward",
    ] = "send"
    fee: WireDecimal | None = None
    era: int | None = None


class StellarTransaction(WireModel):
    family: Literal["stellar"] = "stellar"
    amount: WireDecimal
    recipient: str
    fees: WireDecimal | None = None
    memo_type: str | None = None
    memo_value: str | None = None


class TronTransaction(WireModel):
    family: Literal["tron"] = "tron"
    amount: WireDecimal
    recipient: str
    mode: Literal["send", "freeze", "unfreeze", "vote", "claimReward"] = "send"
    resource: Literal["BANDWIDTH", "ENERGY"] | None = None
    duration: int | None = None


Transaction = Annotated[
    BitcoinTransaction
    | EthereumTransaction
    | AlgorandTransaction
    | CryptoOrgTransaction
    | RippleTransaction
    | CosmosTransaction
    | TezosTransaction
    | PolkadotTransaction
    | StellarTransaction
    | TronTransaction,
    Field(discriminator="family"),
]

TRANSACTION_TYPES: dict[Family, type[WireModel]] = {
    Family.BITCOIN: BitcoinTransaction,
    Family.ETHEREUM: EthereumTransaction,
    Family.ALGORAND: AlgorandTransaction,
    Family.CRYPTO_ORG: CryptoOrgTransaction,
    Family.RIPPLE: RippleTransaction,
    Family.COSMOS: CosmosTransaction,
    Family.TEZOS: TezosTransaction,
    Family.POLKADOT: PolkadotTransaction,
    Family.STELLAR: StellarTransaction,
    Family.TRON: TronTransaction,
}
