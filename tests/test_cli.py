"""Tests for the ledger-live-sdk CLI."""

from __future__ import annotations

from contextlib import asynccontextmanager
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from ledger_live_sdk.cli.app import app

ACCOUNT = {
    "id": "js:2:ethereum:0xabc:",
    "name": "Ethereum 1",
    "address": "0xabc",
    "currency": "ethereum",
    "balance": "1500000000000000000",
    "spendableBalance": "1500000000000000000",
    "blockHeight": 17000000,
    "lastSyncDate": "2023-05-01T12:00:00.000Z",
}

BITCOIN = {
    "type": "CryptoCurrency",
    "id": "bitcoin",
    "name": "Bitcoin",
    "ticker": "BTC",
    "color": "#ffae35",
    "family": "bitcoin",
    "units": [{"name": "bitcoin", "code": "BTC", "magnitude": 8}],
}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner(
        env={
            "LEDGER_LIVE_SDK_CONFIG": None,
            "LEDGER_LIVE_SDK_SOCKET": None,
        }
    )


@pytest.fixture
def connected(sdk):
    """Route CLI commands to the fake host instead of a real socket."""

    @asynccontextmanager
    async def fake_open_sdk(config):
        async with sdk:
            yield sdk

    with (
        patch("ledger_live_sdk.cli.app.open_sdk", fake_open_sdk),
        patch("ledger_live_sdk.cli.app.configure_logging"),
    ):
        yield


def test_accounts_lists_table(runner, host, connected) -> None:
    host.reply("account.list", [ACCOUNT])

    result = runner.invoke(app, ["accounts"])

    assert result.exit_code == 0
    assert "Accounts" in result.output
    assert "Total: 1 account(s)" in result.output
    assert host.requests[0]["method"] == "account.list"


def test_currencies_lists_table(runner, host, connected) -> None:
    host.reply("currency.list", [BITCOIN])

    result = runner.invoke(app, ["currencies"])

    assert result.exit_code == 0
    assert "BTC" in result.output
    assert "Total: 1 currency(ies)" in result.output


def test_receive_prints_address(runner, host, connected) -> None:
    host.reply("account.receive", "0xabc")

    result = runner.invoke(app, ["receive", "account-1"])

    assert result.exit_code == 0
    assert result.output.strip() == "0xabc"
    assert host.requests[0]["params"] == {"accountId": "account-1"}


def test_sign_message_encodes_text(runner, host, connected) -> None:
    host.reply("message.sign", "0xsigned")

    result = runner.invoke(app, ["sign-message", "account-1", "hi"])

    assert result.exit_code == 0
    assert result.output.strip() == "0xsigned"
    assert host.requests[0]["params"] == {"accountId": "account-1", "message": "6869"}


def test_sign_message_hex_input(runner, host, connected) -> None:
    host.reply("message.sign", "0xsigned")

    result = runner.invoke(app, ["sign-message", "account-1", "DEADBEEF", "--hex"])

    assert result.exit_code == 0
    assert host.requests[0]["params"]["message"] == "deadbeef"


def test_sign_message_rejects_bad_hex(runner, host, connected) -> None:
    result = runner.invoke(app, ["sign-message", "account-1", "xyz", "--hex"])

    assert result.exit_code == 1
    assert "Invalid hex string" in result.output
    assert host.received == []


def test_broadcast_sends_raw_signed_transaction(runner, host, connected) -> None:
    host.reply("transaction.broadcast", "0xhash")

    result = runner.invoke(
        app,
        ["broadcast", "account-1", "00ff", "--expiration-date", "2023-05-01T12:00:00Z"],
    )

    assert result.exit_code == 0
    assert "Broadcast: 0xhash" in result.output
    assert host.requests[0]["params"] == {
        "accountId": "account-1",
        "signedTransaction": {
            "operation": None,
            "signature": "00ff",
            "expirationDate": "2023-05-01T12:00:00Z",
        },
    }


def test_remote_error_exits_nonzero(runner, host, connected) -> None:
    host.fail("account.receive", "Account not found")

    result = runner.invoke(app, ["receive", "missing"])

    assert result.exit_code == 1
    assert "Error: Account not found" in result.output


def test_missing_socket_is_reported(runner) -> None:
    with patch("ledger_live_sdk.cli.app.configure_logging"):
        result = runner.invoke(app, ["receive", "account-1"])

    assert result.exit_code == 1
    assert "No host socket configured" in result.output


def test_missing_config_file(runner, tmp_path) -> None:
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.toml"), "accounts"])

    assert result.exit_code == 1
    assert "Config file not found" in result.output
