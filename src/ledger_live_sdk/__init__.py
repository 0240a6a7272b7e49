"""Ledger Live platform SDK.

Lets an app embedded in Ledger Live call the host over JSON-RPC 2.0.
"""

from ledger_live_sdk.errors import (
    DisconnectedError,
    InvalidResponseError,
    NotConnectedError,
    NotImplementedYetError,
    ProtocolError,
    RemoteError,
    SDKError,
    ValidationError,
)
from ledger_live_sdk.sdk import LedgerLivePlatformSDK
from ledger_live_sdk.transactions import (
    AlgorandTransaction,
    BitcoinTransaction,
    CosmosTransaction,
    CryptoOrgTransaction,
    EthereumTransaction,
    Family,
    PolkadotTransaction,
    RippleTransaction,
    StellarTransaction,
    TezosTransaction,
    Transaction,
    TronTransaction,
)
from ledger_live_sdk.transport import (
    ANY_ORIGIN,
    LocalChannel,
    MessageChannel,
    MessageChannelTransport,
    MessageEvent,
    StreamChannel,
    Transport,
)
from ledger_live_sdk.types import (
    Account,
    CompleteExchangeParams,
    CryptoCurrency,
    Currency,
    CurrencyType,
    ExchangeType,
    FeesLevel,
    RawAccount,
    RawSignedTransaction,
    RequestAccountParams,
    SignedTransaction,
    SignTransactionParams,
    StartExchangeParams,
    TokenCurrency,
    Unit,
)

__all__ = [
    # SDK
    "LedgerLivePlatformSDK",
    # Transport
    "ANY_ORIGIN",
    "LocalChannel",
    "MessageChannel",
    "MessageChannelTransport",
    "MessageEvent",
    "StreamChannel",
    "Transport",
    # Types
    "Account",
    "CompleteExchangeParams",
    "CryptoCurrency",
    "Currency",
    "CurrencyType",
    "ExchangeType",
    "FeesLevel",
    "RawAccount",
    "RawSignedTransaction",
    "RequestAccountParams",
    "SignTransactionParams",
    "SignedTransaction",
    "StartExchangeParams",
    "TokenCurrency",
    "Unit",
    # Transactions
    "AlgorandTransaction",
    "BitcoinTransaction",
    "CosmosTransaction",
    "CryptoOrgTransaction",
    "EthereumTransaction",
    "Family",
    "PolkadotTransaction",
    "RippleTransaction",
    "StellarTransaction",
    "TezosTransaction",
    "Transaction",
    "TronTransaction",
    # Errors
    "DisconnectedError",
    "InvalidResponseError",
    "NotConnectedError",
    "NotImplementedYetError",
    "ProtocolError",
    "RemoteError",
    "SDKError",
    "ValidationError",
]
