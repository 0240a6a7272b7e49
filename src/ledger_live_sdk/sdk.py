"""Public SDK surface for platform apps."""

import logging
from types import TracebackType
from typing import Any, NoReturn, TypeVar

import pydantic
from pydantic import TypeAdapter

from ledger_live_sdk.errors import (
    InvalidResponseError,
    NotConnectedError,
    NotImplementedYetError,
    ValidationError,
)
from ledger_live_sdk.rpc.client import RPCClient
from ledger_live_sdk.serializers import (
    deserialize_account,
    serialize_complete_exchange_params,
    serialize_signed_transaction,
    serialize_transaction,
    to_hex,
)
from ledger_live_sdk.transactions import Transaction
from ledger_live_sdk.transport.base import Transport
from ledger_live_sdk.types import (
    Account,
    CompleteExchangeParams,
    Currency,
    ExchangeType,
    RawAccount,
    RawSignedTransaction,
    RequestAccountParams,
    SignedTransaction,
    SignTransactionParams,
    StartExchangeParams,
)

T = TypeVar("T")

_raw_accounts: TypeAdapter[list[RawAccount]] = TypeAdapter(list[RawAccount])
_raw_account: TypeAdapter[RawAccount] = TypeAdapter(RawAccount)
_currencies: TypeAdapter[list[Currency]] = TypeAdapter(list[Currency])
_raw_signed_transaction: TypeAdapter[RawSignedTransaction] = TypeAdapter(
    RawSignedTransaction
)
_string: TypeAdapter[str] = TypeAdapter(str)


class LedgerLivePlatformSDK:
    """Client for the Ledger Live platform API.

    Every remote method validates its arguments, marshals them to wire form,
    calls the host through the JSON-RPC client and unmarshals the result.
    Call connect() first; until then (and after disconnect()) remote methods
    raise NotConnectedError.

    Example:
        sdk = LedgerLivePlatformSDK(MessageChannelTransport(channel))
        sdk.connect()
        accounts = await sdk.list_accounts()
    """

    def __init__(self, transport: Transport, logger: logging.Logger | None = None):
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self._client: RPCClient | None = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self) -> None:
        """Start listening to the host. Does nothing if already connected."""
        if self._client is not None:
            return
        client = RPCClient(self.transport)
        self.transport.connect(client.handle_message)
        self._client = client
        self.logger.info("Connected to Ledger Live")

    def disconnect(self) -> None:
        """Stop listening to the host and reject calls still waiting on it."""
        client = self._client
        self._client = None
        self.transport.disconnect()
        if client is not None:
            client.close()
        self.logger.info("Disconnected from Ledger Live")

    async def __aenter__(self) -> "LedgerLivePlatformSDK":
        self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.disconnect()

    async def _request(self, method: str, params: dict[str, Any] | None = None) -> Any:
        if self._client is None:
            raise NotConnectedError()
        return await self._client.call(method, params or {})

    def _parse(self, method: str, adapter: TypeAdapter[T], result: Any) -> T:
        try:
            return adapter.validate_python(result)
        except pydantic.ValidationError as e:
            self.logger.warning("Unexpected result for %s: %s", method, e)
            raise InvalidResponseError(method, str(e)) from e

    # Accounts

    async def list_accounts(self) -> list[Account]:
        """List the accounts the user has in Ledger Live."""
        result = await self._request("account.list")
        raw_accounts = self._parse("account.list", _raw_accounts, result)
        return [deserialize_account(raw) for raw in raw_accounts]

    async def receive(self, account_id: str) -> str:
        """Ask the host to display and verify a receive address.

        Returns:
            The verified address.
        """
        result = await self._request("account.receive", {"accountId": account_id})
        return self._parse("account.receive", _string, result)

    async def request_account(
        self, params: RequestAccountParams | None = None
    ) -> Account:
        """Let the user pick an account, optionally filtered by currency."""
        wire = params.to_wire(exclude_none=True) if params is not None else {}
        result = await self._request("account.request", wire)
        return deserialize_account(self._parse("account.request", _raw_account, result))

    # Currencies

    async def list_currencies(self) -> list[Currency]:
        result = await self._request("currency.list")
        return self._parse("currency.list", _currencies, result)

    # Signing

    async def sign_transaction(
        self,
        account_id: str,
        transaction: Transaction,
        params: SignTransactionParams | None = None,
    ) -> RawSignedTransaction:
        """Have the user sign a transaction on their device.

        The returned transaction keeps its expiration date as a string.
        """
        params = params or SignTransactionParams()
        result = await self._request(
            "transaction.sign",
            {
                "accountId": account_id,
                "transaction": serialize_transaction(transaction),
                "params": params.to_wire(exclude_none=True),
            },
        )
        return self._parse("transaction.sign", _raw_signed_transaction, result)

    async def sign_message(self, account_id: str, message: bytes) -> str:
        result = await self._request(
            "message.sign", {"accountId": account_id, "message": to_hex(message)}
        )
        return self._parse("message.sign", _string, result)

    async def broadcast_signed_transaction(
        self,
        account_id: str,
        signed_transaction: RawSignedTransaction | SignedTransaction,
    ) -> str:
        """Broadcast a signed transaction.

        Returns:
            The hash of the resulting operation.
        """
        if isinstance(signed_transaction, SignedTransaction):
            signed_transaction = serialize_signed_transaction(signed_transaction)
        result = await self._request(
            "transaction.broadcast",
            {
                "accountId": account_id,
                "signedTransaction": signed_transaction.to_wire(),
            },
        )
        return self._parse("transaction.broadcast", _string, result)

    # Exchange

    async def start_exchange(self, params: StartExchangeParams) -> str:
        """Start an exchange flow on the device.

        Returns:
            The device transaction id (nonce) the provider must sign against.
        """
        result = await self._request("exchange.start", params.to_wire())
        return self._parse("exchange.start", _string, result)

    async def complete_exchange(
        self, params: CompleteExchangeParams
    ) -> RawSignedTransaction:
        """Finish an exchange with the provider's signed payload.

        Raises:
            ValidationError: If a swap has no destination account.
        """
        if params.exchange_type == ExchangeType.SWAP and not params.to_account_id:
            raise ValidationError("Missing parameter 'toAccountId' for a swap operation")

        result = await self._request(
            "exchange.complete", serialize_complete_exchange_params(params)
        )
        return self._parse("exchange.complete", _raw_signed_transaction, result)

    # Not backed by the host yet

    async def bridge_app(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise NotImplementedYetError()

    async def bridge_dashboard(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise NotImplementedYetError()

    async def get_last_connected_device_info(
        self, *args: Any, **kwargs: Any
    ) -> NoReturn:
        raise NotImplementedYetError()

    async def list_apps(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise NotImplementedYetError()

    async def synchronize_account(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise NotImplementedYetError()
