"""Main CLI application."""

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated, TypeVar

import typer

from ledger_live_sdk.cli.console import console, create_table, error, success
from ledger_live_sdk.config import ConfigError, SDKConfig, load_config
from ledger_live_sdk.errors import SDKError
from ledger_live_sdk.logging import configure_logging
from ledger_live_sdk.sdk import LedgerLivePlatformSDK
from ledger_live_sdk.serializers import from_hex
from ledger_live_sdk.transport import ANY_ORIGIN, MessageChannelTransport, StreamChannel
from ledger_live_sdk.types import CryptoCurrency, RawSignedTransaction

T = TypeVar("T")

app = typer.Typer(
    name="ledger-live-sdk",
    help="Call a Ledger Live host from the command line.",
    no_args_is_help=True,
)


@asynccontextmanager
async def open_sdk(config: SDKConfig) -> AsyncIterator[LedgerLivePlatformSDK]:
    """Connect an SDK to the host socket named in config."""
    if config.socket_path is None:
        raise ConfigError(
            "No host socket configured (use --socket or LEDGER_LIVE_SDK_SOCKET)"
        )

    # A socket has no origin of its own; the configured one names the host
    peer_origin = config.origin if config.origin != ANY_ORIGIN else None
    channel = await StreamChannel.open_unix(config.socket_path, peer_origin=peer_origin)
    transport = MessageChannelTransport(
        channel,
        expected_origin=config.origin,
        target_origin=config.target_origin,
    )
    try:
        async with LedgerLivePlatformSDK(transport) as sdk:
            yield sdk
    finally:
        await channel.close()


def _run(
    ctx: typer.Context, action: Callable[[LedgerLivePlatformSDK], Awaitable[T]]
) -> T:
    config: SDKConfig = ctx.obj

    async def runner() -> T:
        async with open_sdk(config) as sdk:
            return await action(sdk)

    try:
        return asyncio.run(runner())
    except (SDKError, ConfigError, OSError) as e:
        error(f"Error: {e}")
        raise typer.Exit(1) from None


@app.callback()
def main(
    ctx: typer.Context,
    socket: Annotated[
        Path | None,
        typer.Option("--socket", "-s", help="Unix socket the host listens on"),
    ] = None,
    origin: Annotated[
        str | None,
        typer.Option("--origin", help="Origin host messages must come from"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to configuration file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every envelope"),
    ] = False,
) -> None:
    """Call a Ledger Live host from the command line."""
    try:
        sdk_config = load_config(config)
    except (FileNotFoundError, ConfigError) as e:
        error(str(e))
        raise typer.Exit(1) from None

    updates: dict[str, object] = {}
    if socket is not None:
        updates["socket_path"] = socket
    if origin is not None:
        updates["origin"] = origin
    if updates:
        sdk_config = sdk_config.model_copy(update=updates)

    configure_logging("DEBUG" if verbose else sdk_config.log_level, use_rich=True)
    ctx.obj = sdk_config


@app.command()
def accounts(ctx: typer.Context) -> None:
    """List accounts."""
    result = _run(ctx, lambda sdk: sdk.list_accounts())

    table = create_table(
        "Accounts",
        [
            ("ID", "cyan"),
            ("Name", ""),
            ("Currency", "magenta"),
            ("Balance", {"justify": "right", "style": "green"}),
            ("Address", "dim"),
            ("Last sync", ""),
        ],
    )
    for account in result:
        table.add_row(
            account.id,
            account.name,
            account.currency,
            str(account.balance),
            account.address,
            account.last_sync_date.isoformat(timespec="seconds"),
        )
    console.print(table)
    console.print(f"Total: {len(result)} account(s)", markup=False)


@app.command()
def currencies(ctx: typer.Context) -> None:
    """List currencies."""
    result = _run(ctx, lambda sdk: sdk.list_currencies())

    table = create_table(
        "Currencies",
        [
            ("ID", "cyan"),
            ("Ticker", "bold"),
            ("Name", ""),
            ("Family / Parent", "magenta"),
        ],
    )
    for currency in result:
        lineage = (
            currency.family if isinstance(currency, CryptoCurrency) else currency.parent
        )
        table.add_row(currency.id, currency.ticker, currency.name, lineage)
    console.print(table)
    console.print(f"Total: {len(result)} currency(ies)", markup=False)


@app.command()
def receive(
    ctx: typer.Context,
    account_id: Annotated[str, typer.Argument(help="Account to receive on")],
) -> None:
    """Verify and print a receive address."""
    address = _run(ctx, lambda sdk: sdk.receive(account_id))
    typer.echo(address)


@app.command("sign-message")
def sign_message(
    ctx: typer.Context,
    account_id: Annotated[str, typer.Argument(help="Signing account")],
    message: Annotated[str, typer.Argument(help="Message to sign")],
    is_hex: Annotated[
        bool,
        typer.Option("--hex", help="Treat MESSAGE as hex-encoded bytes"),
    ] = False,
) -> None:
    """Sign a message with an account."""
    try:
        data = from_hex(message) if is_hex else message.encode()
    except SDKError as e:
        error(f"Error: {e}")
        raise typer.Exit(1) from None

    signed = _run(ctx, lambda sdk: sdk.sign_message(account_id, data))
    typer.echo(signed)


@app.command()
def broadcast(
    ctx: typer.Context,
    account_id: Annotated[str, typer.Argument(help="Account the transaction spends")],
    signature: Annotated[str, typer.Argument(help="Signed transaction (hex)")],
    expiration_date: Annotated[
        str | None,
        typer.Option("--expiration-date", help="Expiration date (ISO 8601)"),
    ] = None,
) -> None:
    """Broadcast a signed transaction."""
    signed_transaction = RawSignedTransaction(
        signature=signature, expiration_date=expiration_date
    )
    operation_hash = _run(
        ctx, lambda sdk: sdk.broadcast_signed_transaction(account_id, signed_transaction)
    )
    success(f"Broadcast: {operation_hash}")


if __name__ == "__main__":
    app()
